import io

import pytest

from evtcparse.errors import NotEvtcError
from evtcparse.header import Header


def test_header_round_trip():
    header = Header(date="EVTC20230328", revision=1, boss_id=123)
    out = io.BytesIO()
    header.save(out)
    assert len(out.getvalue()) == 16
    parsed = Header.parse(io.BytesIO(out.getvalue()))
    assert parsed == header


def test_header_wrong_magic_raises():
    data = b"ABCD20230328" + b"\x01\x7b\x00\x00"
    with pytest.raises(NotEvtcError):
        Header.parse(io.BytesIO(data))


def test_header_truncated_raises():
    with pytest.raises(EOFError):
        Header.parse(io.BytesIO(b"EVTC2023"))


def test_header_date_too_long_raises():
    header = Header(date="EVTC202303281", revision=1, boss_id=0)
    with pytest.raises(ValueError):
        header.save(io.BytesIO())