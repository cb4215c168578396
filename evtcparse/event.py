"""EVTC combat events."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from typing import BinaryIO, ClassVar

from evtcparse.util import read_exact

_LAYOUT = struct.Struct("<QQQiiIIHHHH16B")


@dataclass
class Event:
    """A raw EVTC event record."""

    time: int = 0
    src_agent: int = 0
    dst_agent: int = 0
    value: int = 0
    buff_dmg: int = 0
    overstack_value: int = 0
    skill_id: int = 0
    src_instance_id: int = 0
    dst_instance_id: int = 0
    src_master_instance_id: int = 0
    dst_master_instance_id: int = 0
    affinity: int = 0
    buff: int = 0
    result: int = 0
    is_activation: int = 0
    is_buffremove: int = 0
    is_ninety: int = 0
    is_fifty: int = 0
    is_moving: int = 0
    is_statechange: int = 0
    is_flanking: int = 0
    is_shields: int = 0
    is_offcycle: int = 0
    pad61: int = 0
    pad62: int = 0
    pad63: int = 0
    pad64: int = 0

    SIZE: ClassVar[int] = _LAYOUT.size

    @classmethod
    def parse(cls, stream: BinaryIO) -> Event:
        """Parse an event from a binary stream.

        Raises EOFError if the stream holds fewer bytes than one event.
        """
        return cls(*_LAYOUT.unpack(read_exact(stream, _LAYOUT.size)))

    def save(self, stream: BinaryIO) -> None:
        """Write the event to a binary stream."""
        stream.write(_LAYOUT.pack(*astuple(self)))