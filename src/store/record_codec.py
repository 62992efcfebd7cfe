"""Keyed record framing for store files.

This module converts between StoreEntry objects and their on-disk
bytes. A file is a bare concatenation of entries with no header:

    entry := tag:u8 key_len:u32 key:utf8 payload_len:u32 payload

Payload bytes are never interpreted here.
"""

from __future__ import annotations

import struct
from typing import Iterable

from core.constants import TAG_FORMAT
from core.errors import MalformedTagError
from core.types import DataType, StoreEntry
from store.binary_primitives import ByteReader, pack_length_prefixed, pack_text


def encode_entry(entry: StoreEntry) -> bytes:
    """Serialize one entry into its framed byte form.

    Args:
        entry: Entry to encode.

    Returns:
        Tag, length-prefixed key and length-prefixed payload.
    """
    return b"".join(
        [
            struct.pack(TAG_FORMAT, int(entry.data_type)),
            pack_text(entry.key),
            pack_length_prefixed(bytes(entry.payload)),
        ]
    )


def decode_entry(reader: ByteReader) -> StoreEntry:
    """Decode one entry at the reader's current position.

    Args:
        reader: Cursor positioned at the start of an entry.

    Returns:
        Decoded entry; the reader is advanced past it.

    Raises:
        TruncatedRecordError: If a declared length overruns the buffer.
        MalformedTagError: If the tag byte is not a known data type.
    """
    tag_offset = reader.offset
    (tag,) = reader.read_struct(TAG_FORMAT)
    data_type = _parse_tag(tag, tag_offset)
    key = reader.read_text()
    payload = reader.read_length_prefixed()
    return StoreEntry(data_type=data_type, key=key, payload=payload)


def encode_entries(entries: Iterable[StoreEntry]) -> bytes:
    """Serialize an ordered entry sequence into a full file buffer.

    An empty sequence produces an empty buffer.
    """
    return b"".join(encode_entry(entry) for entry in entries)


def decode_entries(buffer: bytes) -> list[StoreEntry]:
    """Decode a full file buffer into its ordered entries.

    Args:
        buffer: Entire file content.

    Returns:
        Entries in file byte order.

    Raises:
        TruncatedRecordError: If the final entry is cut short.
        MalformedTagError: If any tag byte is unknown.
    """
    reader = ByteReader(buffer)
    entries: list[StoreEntry] = []
    while not reader.at_end():
        entries.append(decode_entry(reader))
    return entries


def _parse_tag(tag: int, offset: int) -> DataType:
    try:
        return DataType(tag)
    except ValueError as error:
        raise MalformedTagError(
            f"Unknown entry tag {tag} at byte offset {offset}. "
            "The file is not a keystash store or was written by an incompatible build."
        ) from error
