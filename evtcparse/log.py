"""Complete EVTC logs: header, agents, skills and events."""

from __future__ import annotations

import os
import struct
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

from evtcparse.agent import Agent
from evtcparse.errors import NotEvtcError, UnsupportedRevisionError
from evtcparse.event import Event
from evtcparse.header import Header
from evtcparse.skill import Skill
from evtcparse.util import read_exact

_COUNT = struct.Struct("<I")
_SUPPORTED_REVISION = 1
_COMPRESSED_EXTENSIONS = frozenset({".zevtc", ".zip"})


def _read_count(stream: BinaryIO) -> int:
    (count,) = _COUNT.unpack(read_exact(stream, _COUNT.size))
    return count


@dataclass
class Log:
    """An EVTC log."""

    header: Header
    agents: list[Agent] = field(default_factory=list)
    skills: list[Skill] = field(default_factory=list)
    events: list[Event] = field(default_factory=list)

    @classmethod
    def parse(cls, stream: BinaryIO) -> Log:
        """Parse a log from an uncompressed binary stream.

        Events are read until the stream no longer holds a whole event.
        """
        header = Header.parse(stream)
        if header.revision != _SUPPORTED_REVISION:
            raise UnsupportedRevisionError(header.revision)

        agents = [Agent.parse(stream) for _ in range(_read_count(stream))]
        skills = [Skill.parse(stream) for _ in range(_read_count(stream))]

        events = []
        while True:
            try:
                events.append(Event.parse(stream))
            except EOFError:
                break

        return cls(header=header, agents=agents, skills=skills, events=events)

    def save(self, stream: BinaryIO) -> None:
        """Write the log to a binary stream in uncompressed form."""
        self.header.save(stream)
        stream.write(_COUNT.pack(len(self.agents)))
        for agent in self.agents:
            agent.save(stream)
        stream.write(_COUNT.pack(len(self.skills)))
        for skill in self.skills:
            skill.save(stream)
        for event in self.events:
            event.save(stream)

    @classmethod
    def parse_file(cls, path: str | os.PathLike[str]) -> Log:
        """Parse a log from a file, handling compressed ``.zevtc``/``.zip`` files."""
        path = Path(path)
        with path.open("rb") as file:
            if path.suffix in _COMPRESSED_EXTENSIONS:
                return cls.parse_zevtc(file)
            return cls.parse(file)

    @classmethod
    def parse_zevtc(cls, stream: BinaryIO) -> Log:
        """Parse a log from a compressed zevtc stream (first archive entry)."""
        try:
            archive = zipfile.ZipFile(stream)
        except zipfile.BadZipFile as err:
            raise NotEvtcError("input log file not compressed") from err
        with archive:
            entries = archive.infolist()
            if not entries:
                raise NotEvtcError("input log file empty")
            with archive.open(entries[0]) as entry:
                return cls.parse(entry)

    def agent(self, agent_id: int) -> Agent | None:
        """Return the agent with the given id, if any."""
        return next((agent for agent in self.agents if agent.id == agent_id), None)

    def agent_name(self, agent_id: int) -> list[str] | None:
        """Return the name parts of the agent with the given id, if any."""
        agent = self.agent(agent_id)
        return None if agent is None else agent.name

    def skill(self, skill_id: int) -> Skill | None:
        """Return the skill with the given id, if any."""
        return next((skill for skill in self.skills if skill.id == skill_id), None)

    def skill_name(self, skill_id: int) -> str | None:
        """Return the name of the skill with the given id, if any."""
        skill = self.skill(skill_id)
        return None if skill is None else skill.name


def parse_file(path: str | os.PathLike[str]) -> Log:
    """Parse a log from a file path; compressed logs are supported."""
    return Log.parse_file(path)


def parse_zevtc(stream: BinaryIO) -> Log:
    """Parse a log from a compressed zevtc stream."""
    return Log.parse_zevtc(stream)