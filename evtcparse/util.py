"""Helpers for reading and writing fixed-size EVTC fields."""

from typing import BinaryIO

from evtcparse.errors import ParseError


def truncate_null(string: str) -> str:
    """Return the part of ``string`` before the first null character."""
    head, _, _ = string.partition("\0")
    return head


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes from ``stream``.

    Raises EOFError if the stream ends early.
    """
    data = stream.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def read_string_buffer(stream: BinaryIO, size: int) -> str:
    """Read a fixed-size UTF-8 buffer of ``size`` bytes as a string."""
    data = read_exact(stream, size)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as err:
        raise ParseError(f"invalid utf-8 in string buffer: {err}") from err


def write_string_buffer(stream: BinaryIO, string: str, size: int) -> None:
    """Write ``string`` as UTF-8 into a null-padded buffer of ``size`` bytes."""
    encoded = string.encode("utf-8")
    if len(encoded) > size:
        raise ValueError(
            f"string of {len(encoded)} bytes does not fit into a buffer of {size} bytes"
        )
    stream.write(encoded.ljust(size, b"\0"))