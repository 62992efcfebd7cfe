"""Keyed upsert, lookup and delete over a single store file.

Every operation reads the whole file, decodes all entries, works on
the in-memory list and, for mutations, rewrites the whole file. There
is no caching and no locking; callers serialize access to a path.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from core.errors import CorruptStoreError, KeystashIoError
from core.logging_config import get_logger
from core.types import DataType, StoreEntry
from store.file_io import read_all, write_all
from store.record_codec import decode_entries, encode_entries
from store.value_codec import decode_value, encode_value, infer_data_type

_LOGGER = get_logger(__name__)


def save_data(key: str, payload: bytes, data_type: DataType, path: Path) -> bool:
    """Insert or replace the entry stored under a key.

    The previous entry for the key, if any, is removed and the new one
    is appended, so an updated key moves to the end of the file.

    Args:
        key: Entry key.
        payload: Encoded value bytes.
        data_type: Tag describing the payload.
        path: Store file path; created when missing.

    Returns:
        True when the file was written, False on read or write failure.

    Raises:
        CorruptStoreError: If the existing file does not decode.
    """
    try:
        entries = _read_entries(path)
    except KeystashIoError as error:
        _LOGGER.error("store_read_failed", path=str(path), error=str(error))
        return False
    if entries is None:
        entries = []
    remaining = _without_key(entries, key, path)
    remaining.append(StoreEntry(data_type=DataType(data_type), key=key, payload=bytes(payload)))
    if not write_all(path, encode_entries(remaining)):
        return False
    _LOGGER.info(
        "store_entry_saved",
        path=str(path),
        key=key,
        data_type=DataType(data_type).name,
        entry_count=len(remaining),
    )
    return True


def load_data(key: str, path: Path) -> StoreEntry | None:
    """Look up the entry stored under a key.

    Args:
        key: Entry key.
        path: Store file path.

    Returns:
        The first entry with the key in file order, or None when the
        file or the key is absent.

    Raises:
        CorruptStoreError: If the file does not decode.
        KeystashIoError: If the file exists but cannot be read.
    """
    entries = _read_entries(path)
    if entries is None:
        _LOGGER.warning("store_file_missing", path=str(path))
        return None
    for entry in entries:
        if entry.key == key:
            return entry
    return None


def delete_data(key: str, path: Path) -> bool:
    """Remove every entry stored under a key.

    Deleting a key that is not present in an existing, readable file
    still rewrites the file and succeeds.

    Args:
        key: Entry key.
        path: Store file path.

    Returns:
        True when the file was rewritten; False when the file is missing
        or cannot be read or written.

    Raises:
        CorruptStoreError: If the file does not decode.
    """
    try:
        entries = _read_entries(path)
    except KeystashIoError as error:
        _LOGGER.error("store_read_failed", path=str(path), error=str(error))
        return False
    if entries is None:
        _LOGGER.warning("store_file_missing", path=str(path))
        return False
    remaining = _without_key(entries, key, path)
    if not write_all(path, encode_entries(remaining)):
        return False
    _LOGGER.info(
        "store_entry_deleted",
        path=str(path),
        key=key,
        removed=len(entries) - len(remaining),
        entry_count=len(remaining),
    )
    return True


def save_value(key: str, value: Any, path: Path, data_type: DataType | None = None) -> bool:
    """Encode a typed value and save it under a key.

    Args:
        key: Entry key.
        value: Value to store.
        path: Store file path.
        data_type: Explicit tag; inferred from the value when omitted.

    Returns:
        Same outcome as save_data.

    Raises:
        KeystashValueError: If the value cannot be encoded.
        CorruptStoreError: If the existing file does not decode.
    """
    resolved_type = infer_data_type(value) if data_type is None else data_type
    return save_data(key, encode_value(resolved_type, value), resolved_type, path)


def load_value(key: str, path: Path) -> Any | None:
    """Load and decode the value stored under a key.

    The stored tag selects the decoder. Returns None when the file or
    key is absent.
    """
    entry = load_data(key, path)
    if entry is None:
        return None
    return decode_value(entry.data_type, entry.payload)


def _read_entries(path: Path) -> list[StoreEntry] | None:
    """Read and decode a store file, returning None when it is missing."""
    buffer = read_all(path)
    if buffer is None:
        return None
    try:
        return decode_entries(buffer)
    except CorruptStoreError as error:
        _LOGGER.error("store_corrupt", path=str(path), error=str(error))
        raise


def _without_key(entries: list[StoreEntry], key: str, path: Path) -> list[StoreEntry]:
    remaining = [entry for entry in entries if entry.key != key]
    removed = len(entries) - len(remaining)
    if removed > 1:
        _LOGGER.warning("store_duplicate_keys_removed", path=str(path), key=key, removed=removed)
    return remaining
