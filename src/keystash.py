"""Public SDK surface for Keystash.

This module provides a stable import path for users.
It re-exports the client, store operations and typed value models.
"""

from __future__ import annotations

from core.config import KeystashConfig
from core.errors import (
    CorruptStoreError,
    KeystashError,
    KeystashIoError,
    KeystashValueError,
    MalformedTagError,
    TruncatedRecordError,
)
from core.types import (
    ActorRef,
    DataType,
    EnumValue,
    Quat,
    Rotator,
    SaveFileFormat,
    StoreEntry,
    Transform,
    Vector,
)
from store.keyed_store import delete_data, load_data, load_value, save_data, save_value
from store.keystash_client import KeystashClient
from store.value_codec import decode_value, encode_value

__all__ = [
    "ActorRef",
    "CorruptStoreError",
    "DataType",
    "EnumValue",
    "KeystashClient",
    "KeystashConfig",
    "KeystashError",
    "KeystashIoError",
    "KeystashValueError",
    "MalformedTagError",
    "Quat",
    "Rotator",
    "SaveFileFormat",
    "StoreEntry",
    "Transform",
    "TruncatedRecordError",
    "Vector",
    "decode_value",
    "delete_data",
    "encode_value",
    "load_data",
    "load_value",
    "save_data",
    "save_value",
]
