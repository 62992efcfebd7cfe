"""Python SDK for keyed save files.

This module exposes high-level save, load and delete APIs bound to
a runtime config, so callers pass a file name instead of a full path.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from core.config import KeystashConfig
from core.types import DataType, SaveFileFormat, StoreEntry
from store.file_io import delete_file, does_file_exist, prepare_path
from store.keyed_store import delete_data, load_data, load_value, save_data, save_value


class KeystashClient:
    """Primary SDK entry point for keyed save files."""

    def __init__(self, config: KeystashConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or KeystashConfig.from_env()

    @property
    def config(self) -> KeystashConfig:
        return self._config

    def file_path(
        self,
        file_name: str | None = None,
        file_format: SaveFileFormat | None = None,
    ) -> Path:
        """Resolve a save file path, falling back to configured defaults.

        Args:
            file_name: Optional file name without extension.
            file_format: Optional save file format.

        Returns:
            Full save file path.
        """
        return prepare_path(
            self._config.save_root,
            file_name or self._config.default_file_name,
            file_format or self._config.default_format,
        )

    def exists(self, file_name: str | None = None) -> bool:
        return does_file_exist(self.file_path(file_name))

    def save(
        self,
        key: str,
        payload: bytes,
        data_type: DataType,
        file_name: str | None = None,
    ) -> bool:
        """Save raw payload bytes under a key.

        Raises:
            CorruptStoreError: If the existing file does not decode.
        """
        return save_data(key, payload, data_type, self.file_path(file_name))

    def load(self, key: str, file_name: str | None = None) -> StoreEntry | None:
        """Load the raw entry stored under a key.

        Raises:
            CorruptStoreError: If the file does not decode.
            KeystashIoError: If the file cannot be read.
        """
        return load_data(key, self.file_path(file_name))

    def delete(self, key: str, file_name: str | None = None) -> bool:
        """Delete the entry stored under a key."""
        return delete_data(key, self.file_path(file_name))

    def save_value(
        self,
        key: str,
        value: Any,
        file_name: str | None = None,
        data_type: DataType | None = None,
    ) -> bool:
        """Encode and save a typed value under a key.

        Raises:
            KeystashValueError: If the value cannot be encoded.
            CorruptStoreError: If the existing file does not decode.
        """
        return save_value(key, value, self.file_path(file_name), data_type)

    def load_value(self, key: str, file_name: str | None = None) -> Any | None:
        """Load and decode the typed value stored under a key."""
        return load_value(key, self.file_path(file_name))

    def delete_file(self, file_name: str | None = None) -> None:
        """Delete a whole save file."""
        delete_file(self.file_path(file_name))
