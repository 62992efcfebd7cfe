"""Shared typed models.

This module defines the tag enumeration, the persisted entry model,
and immutable value models used by the record and value codecs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class DataType(IntEnum):
    """Semantic type of an entry payload, persisted as a one-byte tag."""

    FLOAT = 0
    BOOL = 1
    INT = 2
    STRING = 3
    ENUM = 4
    ACTOR = 5
    VECTOR = 6
    ROTATOR = 7
    TRANSFORM = 8


class SaveFileFormat(str, Enum):
    """Save file flavour, used only to pick the file extension."""

    BIN = "bin"
    SAV = "sav"
    DAT = "dat"
    JSON = "json"


@dataclass(frozen=True)
class StoreEntry:
    """One keyed record persisted in a store file.

    Attributes:
        data_type: Tag describing how to interpret the payload.
        key: Unique key within one file.
        payload: Already-encoded value bytes, opaque to the record codec.
    """

    data_type: DataType
    key: str
    payload: bytes = field(default=b"")


@dataclass(frozen=True)
class Vector:
    """Three-dimensional point or direction.

    Attributes:
        x: X component.
        y: Y component.
        z: Z component.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Rotator:
    """Rotation expressed as pitch, yaw and roll in degrees."""

    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0


@dataclass(frozen=True)
class Quat:
    """Rotation quaternion, identity by default."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass(frozen=True)
class Transform:
    """Combined rotation, translation and scale.

    Attributes:
        rotation: Rotation quaternion.
        translation: Position offset.
        scale: Per-axis scale factors.
    """

    rotation: Quat = field(default_factory=Quat)
    translation: Vector = field(default_factory=Vector)
    scale: Vector = field(default_factory=lambda: Vector(1.0, 1.0, 1.0))


@dataclass(frozen=True)
class EnumValue:
    """Enumerated constant stored at an explicit bit width.

    Attributes:
        value: Unsigned underlying value.
        width: Bit width of the underlying enum type (8, 16, 32 or 64).
    """

    value: int
    width: int = 8


@dataclass(frozen=True)
class ActorRef:
    """Reference to a world object by its path name."""

    path_name: str
