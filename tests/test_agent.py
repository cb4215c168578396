import io

import pytest

from evtcparse.agent import Agent

NAME = ["Character", ":Account.1234", "1"]
NAME_DATA = b"Character\0:Account.1234\x001".ljust(Agent.NAME_SIZE, b"\0")


def test_name_parse_consumes_name_size():
    stream = io.BytesIO(NAME_DATA + b"extra")
    Agent.parse_name(stream)
    assert stream.tell() == Agent.NAME_SIZE
    assert stream.read() == b"extra"


def test_agent_name_parse():
    assert Agent.parse_name(io.BytesIO(NAME_DATA)) == NAME


def test_agent_name_save():
    agent = Agent(id=0, name=list(NAME))
    out = io.BytesIO()
    agent.save_name(out)
    assert out.getvalue() == NAME_DATA


def test_agent_round_trip():
    agent = Agent(
        id=42,
        name=list(NAME),
        profession=3,
        is_elite=0xFFFFFFFF,
        hitbox_width=48,
        hitbox_height=96,
        toughness=10,
        concentration=5,
        healing=7,
        condition=9,
    )
    out = io.BytesIO()
    agent.save(out)
    assert len(out.getvalue()) == 96
    assert Agent.parse(io.BytesIO(out.getvalue())) == agent


def test_agent_truncated_raises():
    out = io.BytesIO()
    Agent(id=1, name=["x"]).save(out)
    with pytest.raises(EOFError):
        Agent.parse(io.BytesIO(out.getvalue()[:-1]))


def test_agent_ordering_by_id_first():
    assert Agent(id=1, name=["b"]) < Agent(id=2, name=["a"])