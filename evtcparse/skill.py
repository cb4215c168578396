"""EVTC skill definitions."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, ClassVar

from evtcparse.util import (
    read_exact,
    read_string_buffer,
    truncate_null,
    write_string_buffer,
)

_ID = struct.Struct("<I")


@dataclass(order=True)
class Skill:
    """An EVTC skill definition."""

    id: int
    name: str

    NAME_SIZE: ClassVar[int] = 64

    @classmethod
    def parse(cls, stream: BinaryIO) -> Skill:
        """Parse a skill from a binary stream."""
        (skill_id,) = _ID.unpack(read_exact(stream, _ID.size))
        name = truncate_null(read_string_buffer(stream, cls.NAME_SIZE))
        return cls(id=skill_id, name=name)

    def save(self, stream: BinaryIO) -> None:
        """Write the skill to a binary stream."""
        stream.write(_ID.pack(self.id))
        write_string_buffer(stream, self.name, self.NAME_SIZE)