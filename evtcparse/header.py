"""The EVTC log header."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, ClassVar

from evtcparse.errors import NotEvtcError
from evtcparse.util import read_exact, read_string_buffer, write_string_buffer

_MAGIC = "EVTC"
_TAIL = struct.Struct("<BHB")


@dataclass
class Header:
    """An EVTC log header.

    A ``boss_id`` of 1 indicates a WvW log, 2 a map log.
    """

    date: str
    revision: int
    boss_id: int

    DATE_SIZE: ClassVar[int] = 12

    @classmethod
    def parse(cls, stream: BinaryIO) -> Header:
        """Parse a header from a binary stream."""
        magic = read_string_buffer(stream, len(_MAGIC))
        if magic != _MAGIC:
            raise NotEvtcError()
        date = read_string_buffer(stream, cls.DATE_SIZE - len(_MAGIC))
        revision, boss_id, _unused = _TAIL.unpack(read_exact(stream, _TAIL.size))
        return cls(date=magic + date, revision=revision, boss_id=boss_id)

    def save(self, stream: BinaryIO) -> None:
        """Write the header to a binary stream."""
        write_string_buffer(stream, self.date, self.DATE_SIZE)
        stream.write(_TAIL.pack(self.revision, self.boss_id, 0))