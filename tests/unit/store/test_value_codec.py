"""Unit tests for typed value conversion."""

from __future__ import annotations

import pytest

from core.errors import KeystashValueError
from core.types import ActorRef, DataType, EnumValue, Quat, Rotator, Transform, Vector
from store.value_codec import (
    bool_to_bytes,
    bytes_to_bool,
    bytes_to_enum,
    bytes_to_float,
    bytes_to_int,
    bytes_to_text,
    bytes_to_transform,
    decode_value,
    encode_value,
    enum_to_bytes,
    float_to_bytes,
    infer_data_type,
    int_to_bytes,
    text_to_bytes,
    transform_to_bytes,
    vector_to_bytes,
)


def test_float_uses_four_little_endian_bytes() -> None:
    """Floats should encode as float32 and decode exactly."""
    payload = float_to_bytes(75.5)

    assert payload == b"\x00\x00\x97\x42"
    assert bytes_to_float(payload) == 75.5


def test_int_roundtrip_negative() -> None:
    """Signed int32 values should roundtrip."""
    assert bytes_to_int(int_to_bytes(-123456)) == -123456


def test_int_out_of_range_raises() -> None:
    """Values outside int32 should be rejected."""
    with pytest.raises(KeystashValueError):
        int_to_bytes(2**31)


def test_bool_uses_single_byte() -> None:
    """Bools should encode as one 0/1 byte."""
    assert bool_to_bytes(True) == b"\x01"
    assert bytes_to_bool(bool_to_bytes(False)) is False


def test_bool_rejects_other_byte_values() -> None:
    """Only the two encoded states should decode."""
    with pytest.raises(KeystashValueError):
        bytes_to_bool(b"\x02")


def test_text_is_length_prefixed() -> None:
    """Text should encode as a u32 byte count followed by UTF-8."""
    payload = text_to_bytes("héllo")

    assert payload[:4] == b"\x06\x00\x00\x00"
    assert bytes_to_text(payload) == "héllo"


def test_text_with_trailing_bytes_raises() -> None:
    """A text payload longer than its prefix declares should fail."""
    with pytest.raises(KeystashValueError):
        bytes_to_text(text_to_bytes("abc") + b"\x00")


@pytest.mark.parametrize("width", [8, 16, 32, 64])
def test_enum_width_is_preserved(width: int) -> None:
    """Enum payloads should be exactly width / 8 bytes and keep their width."""
    payload = enum_to_bytes(3, width)

    assert len(payload) == width // 8
    assert bytes_to_enum(payload) == EnumValue(value=3, width=width)


def test_enum_rejects_unsupported_width() -> None:
    """Only 8/16/32/64-bit enums should be accepted."""
    with pytest.raises(KeystashValueError):
        enum_to_bytes(1, 24)


def test_enum_rejects_value_wider_than_width() -> None:
    """Values that do not fit the width should be rejected."""
    with pytest.raises(KeystashValueError):
        enum_to_bytes(256, 8)


def test_vector_components_in_xyz_order() -> None:
    """Vector payload should be x, y, z float32 values."""
    assert vector_to_bytes(Vector(1.0, 0.0, 0.0))[:4] == float_to_bytes(1.0)


def test_transform_roundtrip() -> None:
    """Transforms should roundtrip through rotation, translation and scale."""
    transform = Transform(
        rotation=Quat(0.0, 0.0, 0.5, 0.5),
        translation=Vector(10.0, -2.25, 3.5),
        scale=Vector(1.0, 2.0, 0.5),
    )

    payload = transform_to_bytes(transform)

    assert len(payload) == 40
    assert bytes_to_transform(payload) == transform


def test_fixed_width_payload_length_is_checked() -> None:
    """Decoding a payload of the wrong size should fail."""
    with pytest.raises(KeystashValueError):
        bytes_to_float(b"\x00\x00")


@pytest.mark.parametrize(
    ("data_type", "value"),
    [
        (DataType.FLOAT, -0.25),
        (DataType.BOOL, True),
        (DataType.INT, 42),
        (DataType.STRING, "checkpoint-3"),
        (DataType.ENUM, EnumValue(value=7, width=16)),
        (DataType.ACTOR, ActorRef("/Game/Maps/Level1.Level1:PersistentLevel.Door_2")),
        (DataType.VECTOR, Vector(1.5, -2.0, 8.0)),
        (DataType.ROTATOR, Rotator(90.0, 45.0, -180.0)),
        (DataType.TRANSFORM, Transform()),
    ],
)
def test_tag_dispatch_roundtrip(data_type: DataType, value: object) -> None:
    """decode_value should invert encode_value for every data type."""
    assert decode_value(data_type, encode_value(data_type, value)) == value


def test_encode_value_rejects_mismatched_type() -> None:
    """A value of the wrong kind for the tag should be rejected."""
    with pytest.raises(KeystashValueError):
        encode_value(DataType.VECTOR, "not a vector")


def test_encode_value_rejects_bool_as_int() -> None:
    """Bools should not be silently stored as integers."""
    with pytest.raises(KeystashValueError):
        encode_value(DataType.INT, True)


def test_infer_data_type_distinguishes_bool_from_int() -> None:
    """Bool inference should win over its int base class."""
    assert infer_data_type(True) is DataType.BOOL
    assert infer_data_type(1) is DataType.INT
    assert infer_data_type(Rotator()) is DataType.ROTATOR


def test_infer_data_type_rejects_unknown_values() -> None:
    """Unsupported Python values should raise."""
    with pytest.raises(KeystashValueError):
        infer_data_type([1, 2, 3])
