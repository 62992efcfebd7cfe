"""Runtime configuration model for Keystash.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_SAVE_FILE_FORMAT,
    DEFAULT_SAVE_FILE_NAME,
    DEFAULT_SAVE_ROOT,
)
from core.errors import KeystashConfigError
from core.types import SaveFileFormat


@dataclass(frozen=True)
class KeystashConfig:
    """Validated runtime configuration.

    Attributes:
        save_root: Local root directory holding the saved-games folder.
        default_file_name: File name used when a caller passes none.
        default_format: File format used when a caller passes none.
    """

    save_root: Path
    default_file_name: str
    default_format: SaveFileFormat

    @classmethod
    def from_env(cls) -> "KeystashConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            KeystashConfigError: If environment values are invalid.
        """
        save_root_value = os.getenv("KEYSTASH_SAVE_ROOT", str(DEFAULT_SAVE_ROOT))
        file_name_value = os.getenv("KEYSTASH_FILE_NAME", DEFAULT_SAVE_FILE_NAME)
        format_value = os.getenv("KEYSTASH_FILE_FORMAT", DEFAULT_SAVE_FILE_FORMAT)
        return cls(
            save_root=Path(save_root_value).expanduser().resolve(),
            default_file_name=_parse_file_name(file_name_value),
            default_format=_parse_file_format(format_value),
        )


def _parse_file_name(raw_value: str) -> str:
    """Validate the default file name environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Stripped file name.

    Raises:
        KeystashConfigError: If the name is blank.
    """
    file_name = raw_value.strip()
    if not file_name:
        raise KeystashConfigError(
            "Invalid KEYSTASH_FILE_NAME value: expected a non-empty name. "
            "Unset the variable or set it to a file name without extension."
        )
    return file_name


def _parse_file_format(raw_value: str) -> SaveFileFormat:
    """Parse the file format environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed save file format.

    Raises:
        KeystashConfigError: If value is not a known format.
    """
    try:
        return SaveFileFormat(raw_value.strip().lower())
    except ValueError as error:
        supported = ", ".join(item.value for item in SaveFileFormat)
        raise KeystashConfigError(
            "Invalid KEYSTASH_FILE_FORMAT value: "
            f"expected one of {supported}, got '{raw_value}'."
        ) from error
