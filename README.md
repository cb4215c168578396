# evtcparse

Read and write ArcDPS EVTC combat logs, both plain (`.evtc`) and
compressed (`.zevtc` / `.zip`). The package has no dependencies beyond
the Python standard library (3.10 or later).

## Installation

```
pip install evtcparse
```

## Reading a log

```python
from evtcparse.log import parse_file

log = parse_file("path/to/log.zevtc")
print("Log for boss id", log.header.boss_id)

for agent in log.agents:
    print(agent.id, agent.name)

print(log.skill_name(7))
```

`parse_file` (and `Log.parse_file`) uses the compressed reader when the
file name ends in `.zevtc` or `.zip`, and the plain reader otherwise. For
compressed logs the first entry of the archive is read. A log can also be
read from any binary stream:

```python
from evtcparse.log import Log, parse_zevtc

with open("log.evtc", "rb") as stream:
    log = Log.parse(stream)

with open("log.zevtc", "rb") as stream:
    log = parse_zevtc(stream)
```

Only revision 1 logs are accepted. After the header, agents and skills,
events are read until the stream no longer holds a whole event record; a
trailing partial record is ignored.

## What a log holds

- `log.header`: a `Header` with `date` (a string starting with `EVTC`),
  `revision` and `boss_id` (1 means a WvW log, 2 a map log).
- `log.agents`: a list of `Agent` records. `Agent.name` is the list of
  non-empty parts of the null-separated name field; for players these are
  character name, account name and subgroup.
- `log.skills`: a list of `Skill` records with `id` and `name`.
- `log.events`: a list of raw `Event` records, one field per value in the
  binary record (`time`, `src_agent`, `dst_agent`, `value`, `skill_id`,
  `is_statechange`, and so on).

## Looking things up

- `Log.agent(agent_id)` and `Log.agent_name(agent_id)`
- `Log.skill(skill_id)` and `Log.skill_name(skill_id)`

Each returns the first match, or `None` when nothing matches.

## Writing a log

Each record type (`Header`, `Agent`, `Skill`, `Event`, `Log`) has a
`parse(stream)` class method and a `save(stream)` method, so a log can be
read, changed and written back out:

```python
with open("copy.evtc", "wb") as out:
    log.save(out)
```

`Log.save` always writes the plain, uncompressed form. Saving a name or
date whose UTF-8 encoding is longer than its fixed-size field raises
`ValueError`.

## Errors

- `evtcparse.errors.ParseError`: base class; raised directly when a text
  field is not valid UTF-8.
- `NotEvtcError`: the data does not start with the `EVTC` magic, or a
  compressed input is not a zip archive or holds no entries.
- `UnsupportedRevisionError`: the header names a revision other than 1;
  the value is kept in its `revision` attribute.

Input that ends before the header, the agent and skill counts, or the
agent and skill records are complete raises `EOFError`.

## What it does not do

The package has no command-line tool; it is used as a library. It reads
and writes events as raw records only and does not decode them into
kinds of events (state changes, buff applications, damage and the like),
nor does it interpret agent professions or specializations.