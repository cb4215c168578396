import io

import pytest

from evtcparse.errors import ParseError
from evtcparse.util import (
    read_exact,
    read_string_buffer,
    truncate_null,
    write_string_buffer,
)


def test_truncate_null_cuts_at_first_null():
    assert truncate_null("abc\0def\0") == "abc"


def test_truncate_null_without_null_is_unchanged():
    assert truncate_null("abc") == "abc"


def test_read_exact_returns_requested_bytes():
    stream = io.BytesIO(b"abcdef")
    assert read_exact(stream, 4) == b"abcd"
    assert stream.read() == b"ef"


def test_read_exact_short_input_raises():
    with pytest.raises(EOFError):
        read_exact(io.BytesIO(b"ab"), 4)


def test_string_buffer_round_trip():
    out = io.BytesIO()
    write_string_buffer(out, "hello", 16)
    data = out.getvalue()
    assert len(data) == 16
    assert data == b"hello".ljust(16, b"\0")
    assert truncate_null(read_string_buffer(io.BytesIO(data), 16)) == "hello"


def test_write_string_buffer_exact_fit():
    out = io.BytesIO()
    write_string_buffer(out, "EVTC", 4)
    assert out.getvalue() == b"EVTC"


def test_write_string_buffer_too_long_raises():
    with pytest.raises(ValueError):
        write_string_buffer(io.BytesIO(), "too long", 4)


def test_read_string_buffer_invalid_utf8_raises():
    with pytest.raises(ParseError):
        read_string_buffer(io.BytesIO(b"\xff\xfe\0\0"), 4)