"""Typed value conversion to and from payload bytes.

This module encodes scalar and structured values independently of
record framing. Each kind has a symmetric to/from pair, and the
tag-dispatched helpers pick the pair for a stored DataType.
"""

from __future__ import annotations

import struct
from typing import Any, Callable

from core.constants import (
    BOOL_FORMAT,
    ENUM_FORMATS,
    FLOAT_FORMAT,
    INT_FORMAT,
    QUAT_COMPONENT_COUNT,
    TRANSFORM_COMPONENT_COUNT,
    VECTOR_COMPONENT_COUNT,
)
from core.errors import CorruptStoreError, KeystashValueError
from core.types import ActorRef, DataType, EnumValue, Quat, Rotator, Transform, Vector
from store.binary_primitives import ByteReader, pack_text

_VECTOR_FORMAT = f"<{VECTOR_COMPONENT_COUNT}f"
_TRANSFORM_FORMAT = f"<{TRANSFORM_COMPONENT_COUNT}f"
_ENUM_WIDTHS_BY_SIZE = {struct.calcsize(fmt): width for width, fmt in ENUM_FORMATS.items()}


def float_to_bytes(value: float) -> bytes:
    """Encode a float as a 4-byte float32."""
    return _pack(FLOAT_FORMAT, "float", value)


def bytes_to_float(payload: bytes) -> float:
    """Decode a 4-byte float32 payload."""
    (value,) = _unpack_exact(FLOAT_FORMAT, payload, "float")
    return value


def int_to_bytes(value: int) -> bytes:
    """Encode an integer as a signed 4-byte int32."""
    return _pack(INT_FORMAT, "int", value)


def bytes_to_int(payload: bytes) -> int:
    """Decode a signed 4-byte int32 payload."""
    (value,) = _unpack_exact(INT_FORMAT, payload, "int")
    return value


def bool_to_bytes(value: bool) -> bytes:
    """Encode a boolean as a single 0/1 byte."""
    return struct.pack(BOOL_FORMAT, 1 if value else 0)


def bytes_to_bool(payload: bytes) -> bool:
    """Decode a single-byte boolean payload.

    Raises:
        KeystashValueError: If the byte is neither 0 nor 1.
    """
    (raw,) = _unpack_exact(BOOL_FORMAT, payload, "bool")
    if raw not in (0, 1):
        raise KeystashValueError(f"Invalid bool payload byte {raw}: expected 0 or 1.")
    return raw == 1


def text_to_bytes(value: str) -> bytes:
    """Encode text as a u32 length followed by UTF-8 bytes."""
    return pack_text(value)


def bytes_to_text(payload: bytes) -> str:
    """Decode a length-prefixed UTF-8 payload.

    Raises:
        KeystashValueError: If the length prefix does not match the payload
            or the bytes are not valid UTF-8.
    """
    reader = ByteReader(payload)
    try:
        text = reader.read_text()
    except CorruptStoreError as error:
        raise KeystashValueError(f"Invalid text payload: {error}") from error
    if not reader.at_end():
        raise KeystashValueError(
            f"Invalid text payload: {reader.remaining} trailing bytes after string."
        )
    return text


def enum_to_bytes(value: int, width: int = 8) -> bytes:
    """Encode an unsigned enum value at the given bit width.

    Args:
        value: Underlying enum value.
        width: Bit width, one of 8, 16, 32 or 64.

    Returns:
        Exactly width / 8 bytes, no framing.

    Raises:
        KeystashValueError: If the width is unsupported or the value does not fit.
    """
    fmt = ENUM_FORMATS.get(width)
    if fmt is None:
        supported = ", ".join(str(item) for item in ENUM_FORMATS)
        raise KeystashValueError(f"Unsupported enum width {width}: expected one of {supported}.")
    return _pack(fmt, f"uint{width} enum", int(value))


def bytes_to_enum(payload: bytes) -> EnumValue:
    """Decode an enum payload, recovering its width from the payload size."""
    width = _ENUM_WIDTHS_BY_SIZE.get(len(payload))
    if width is None:
        raise KeystashValueError(
            f"Invalid enum payload: {len(payload)} bytes does not match an 8/16/32/64-bit width."
        )
    (value,) = struct.unpack(ENUM_FORMATS[width], payload)
    return EnumValue(value=value, width=width)


def actor_to_bytes(value: ActorRef) -> bytes:
    """Encode a world-object reference by its path name."""
    return text_to_bytes(value.path_name)


def bytes_to_actor(payload: bytes) -> ActorRef:
    return ActorRef(path_name=bytes_to_text(payload))


def vector_to_bytes(value: Vector) -> bytes:
    """Encode a vector as x, y, z float32 components."""
    return _pack(_VECTOR_FORMAT, "vector", value.x, value.y, value.z)


def bytes_to_vector(payload: bytes) -> Vector:
    x, y, z = _unpack_exact(_VECTOR_FORMAT, payload, "vector")
    return Vector(x, y, z)


def rotator_to_bytes(value: Rotator) -> bytes:
    """Encode a rotator as pitch, yaw, roll float32 components."""
    return _pack(_VECTOR_FORMAT, "rotator", value.pitch, value.yaw, value.roll)


def bytes_to_rotator(payload: bytes) -> Rotator:
    pitch, yaw, roll = _unpack_exact(_VECTOR_FORMAT, payload, "rotator")
    return Rotator(pitch, yaw, roll)


def transform_to_bytes(value: Transform) -> bytes:
    """Encode a transform as rotation (x, y, z, w), translation, then scale."""
    rotation, translation, scale = value.rotation, value.translation, value.scale
    return _pack(
        _TRANSFORM_FORMAT,
        "transform",
        rotation.x,
        rotation.y,
        rotation.z,
        rotation.w,
        translation.x,
        translation.y,
        translation.z,
        scale.x,
        scale.y,
        scale.z,
    )


def bytes_to_transform(payload: bytes) -> Transform:
    components = _unpack_exact(_TRANSFORM_FORMAT, payload, "transform")
    rotation_end = QUAT_COMPONENT_COUNT
    translation_end = rotation_end + VECTOR_COMPONENT_COUNT
    return Transform(
        rotation=Quat(*components[:rotation_end]),
        translation=Vector(*components[rotation_end:translation_end]),
        scale=Vector(*components[translation_end:]),
    )


def _encode_enum_value(value: EnumValue | int) -> bytes:
    if isinstance(value, EnumValue):
        return enum_to_bytes(value.value, value.width)
    return enum_to_bytes(int(value))


_ENCODERS: dict[DataType, Callable[[Any], bytes]] = {
    DataType.FLOAT: float_to_bytes,
    DataType.BOOL: bool_to_bytes,
    DataType.INT: int_to_bytes,
    DataType.STRING: text_to_bytes,
    DataType.ENUM: _encode_enum_value,
    DataType.ACTOR: actor_to_bytes,
    DataType.VECTOR: vector_to_bytes,
    DataType.ROTATOR: rotator_to_bytes,
    DataType.TRANSFORM: transform_to_bytes,
}

_DECODERS: dict[DataType, Callable[[bytes], Any]] = {
    DataType.FLOAT: bytes_to_float,
    DataType.BOOL: bytes_to_bool,
    DataType.INT: bytes_to_int,
    DataType.STRING: bytes_to_text,
    DataType.ENUM: bytes_to_enum,
    DataType.ACTOR: bytes_to_actor,
    DataType.VECTOR: bytes_to_vector,
    DataType.ROTATOR: bytes_to_rotator,
    DataType.TRANSFORM: bytes_to_transform,
}

_ACCEPTED_TYPES: dict[DataType, tuple[type, ...]] = {
    DataType.FLOAT: (float, int),
    DataType.BOOL: (bool,),
    DataType.INT: (int,),
    DataType.STRING: (str,),
    DataType.ENUM: (EnumValue, int),
    DataType.ACTOR: (ActorRef,),
    DataType.VECTOR: (Vector,),
    DataType.ROTATOR: (Rotator,),
    DataType.TRANSFORM: (Transform,),
}


def encode_value(data_type: DataType, value: Any) -> bytes:
    """Encode a value using the codec for its data type.

    Args:
        data_type: Tag the payload will be stored under.
        value: Python value of the matching kind.

    Returns:
        Encoded payload bytes.

    Raises:
        KeystashValueError: If the value does not match the data type.
    """
    accepted = _ACCEPTED_TYPES[data_type]
    is_bool_mismatch = isinstance(value, bool) and data_type is not DataType.BOOL
    if is_bool_mismatch or not isinstance(value, accepted):
        raise KeystashValueError(
            f"Cannot store {type(value).__name__} as {data_type.name}: "
            f"expected {' or '.join(item.__name__ for item in accepted)}."
        )
    return _ENCODERS[data_type](value)


def decode_value(data_type: DataType, payload: bytes) -> Any:
    """Decode payload bytes using the codec for a stored data type.

    Raises:
        KeystashValueError: If the payload does not match the data type layout.
    """
    return _DECODERS[data_type](payload)


def infer_data_type(value: Any) -> DataType:
    """Pick the data type tag for a Python value.

    Raises:
        KeystashValueError: If no data type covers the value.
    """
    if isinstance(value, bool):
        return DataType.BOOL
    if isinstance(value, int):
        return DataType.INT
    if isinstance(value, float):
        return DataType.FLOAT
    if isinstance(value, str):
        return DataType.STRING
    for data_type, model in (
        (DataType.ENUM, EnumValue),
        (DataType.ACTOR, ActorRef),
        (DataType.VECTOR, Vector),
        (DataType.ROTATOR, Rotator),
        (DataType.TRANSFORM, Transform),
    ):
        if isinstance(value, model):
            return data_type
    raise KeystashValueError(
        f"Unsupported value type {type(value).__name__}: "
        "store floats, ints, bools, strings or keystash value models."
    )


def _pack(fmt: str, kind: str, *values: Any) -> bytes:
    try:
        return struct.pack(fmt, *values)
    except (struct.error, OverflowError) as error:
        raise KeystashValueError(f"Cannot encode {kind} value {values!r}: {error}.") from error


def _unpack_exact(fmt: str, payload: bytes, kind: str) -> tuple:
    expected = struct.calcsize(fmt)
    if len(payload) != expected:
        raise KeystashValueError(
            f"Invalid {kind} payload: expected {expected} bytes, got {len(payload)}."
        )
    return struct.unpack(fmt, payload)
