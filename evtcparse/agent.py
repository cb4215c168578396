"""EVTC agent records."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import BinaryIO, ClassVar

from evtcparse.util import read_exact, read_string_buffer, write_string_buffer

_FIELDS = struct.Struct("<QIIHHHHHH")
_PADDING = struct.Struct("<I")


@dataclass(order=True)
class Agent:
    """An EVTC agent: a player, enemy, minion, gadget or other entity.

    For players ``name`` holds character name, account name and subgroup.
    """

    id: int
    name: list[str] = field(default_factory=list)
    profession: int = 0
    is_elite: int = 0
    hitbox_width: int = 0
    hitbox_height: int = 0
    toughness: int = 0
    concentration: int = 0
    healing: int = 0
    condition: int = 0

    NAME_SIZE: ClassVar[int] = 64

    @classmethod
    def parse_name(cls, stream: BinaryIO) -> list[str]:
        """Parse the null-separated name combo string."""
        string = read_string_buffer(stream, cls.NAME_SIZE)
        return [part for part in string.split("\0") if part]

    def save_name(self, stream: BinaryIO) -> None:
        """Write the name parts as a null-separated combo string."""
        write_string_buffer(stream, "\0".join(self.name), self.NAME_SIZE)

    @classmethod
    def parse(cls, stream: BinaryIO) -> Agent:
        """Parse an agent from a binary stream."""
        (
            agent_id,
            profession,
            is_elite,
            toughness,
            concentration,
            healing,
            hitbox_width,
            condition,
            hitbox_height,
        ) = _FIELDS.unpack(read_exact(stream, _FIELDS.size))
        name = cls.parse_name(stream)
        read_exact(stream, _PADDING.size)
        return cls(
            id=agent_id,
            name=name,
            profession=profession,
            is_elite=is_elite,
            hitbox_width=hitbox_width,
            hitbox_height=hitbox_height,
            toughness=toughness,
            concentration=concentration,
            healing=healing,
            condition=condition,
        )

    def save(self, stream: BinaryIO) -> None:
        """Write the agent to a binary stream."""
        stream.write(
            _FIELDS.pack(
                self.id,
                self.profession,
                self.is_elite,
                self.toughness,
                self.concentration,
                self.healing,
                self.hitbox_width,
                self.condition,
                self.hitbox_height,
            )
        )
        self.save_name(stream)
        stream.write(_PADDING.pack(0))