"""Whole-file IO for store files.

This module resolves save paths and wraps the read/write/delete
primitives the store operations are built on. Reads distinguish a
missing file from a failing one; writes and deletes report through
return values and logs rather than raising.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import (
    BINARY_FILE_EXTENSION,
    DATA_FILE_EXTENSION,
    SAVE_FILE_EXTENSION,
    SAVED_GAMES_DIR_NAME,
)
from core.errors import KeystashIoError
from core.logging_config import get_logger
from core.types import SaveFileFormat

_LOGGER = get_logger(__name__)

_FILE_EXTENSIONS = {
    SaveFileFormat.BIN: BINARY_FILE_EXTENSION,
    SaveFileFormat.SAV: SAVE_FILE_EXTENSION,
    SaveFileFormat.DAT: DATA_FILE_EXTENSION,
}


def prepare_path(save_root: Path, file_name: str, file_format: SaveFileFormat) -> Path:
    """Build the full path of a save file, creating its directory.

    Args:
        save_root: Root directory holding the saved-games folder.
        file_name: File name without extension.
        file_format: Format selecting the extension; unmapped formats use `.bin`.

    Returns:
        Path of the save file.
    """
    save_dir = save_root / SAVED_GAMES_DIR_NAME
    save_dir.mkdir(parents=True, exist_ok=True)
    extension = _FILE_EXTENSIONS.get(file_format, BINARY_FILE_EXTENSION)
    return save_dir / f"{file_name}{extension}"


def does_file_exist(path: Path) -> bool:
    return path.is_file()


def read_all(path: Path) -> bytes | None:
    """Read a whole file into memory.

    Args:
        path: File to read.

    Returns:
        File bytes, or None when the file does not exist.

    Raises:
        KeystashIoError: If the file exists but cannot be read.
    """
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as error:
        raise KeystashIoError(
            f"Failed to read store file at {path}: {error.strerror or error}. "
            "Check file permissions and that the path is a regular file."
        ) from error


def write_all(path: Path, data: bytes) -> bool:
    """Overwrite a file with the given bytes.

    Returns:
        True when the write completed, False otherwise.
    """
    try:
        path.write_bytes(data)
    except OSError as error:
        _LOGGER.error("store_write_failed", path=str(path), error=str(error))
        return False
    return True


def delete_file(path: Path) -> None:
    """Delete a store file, logging the outcome instead of raising."""
    if not path.exists():
        _LOGGER.info("store_file_missing", path=str(path))
        return
    try:
        path.unlink()
    except OSError as error:
        _LOGGER.error("store_delete_failed", path=str(path), error=str(error))
        return
    _LOGGER.info("store_file_deleted", path=str(path))
