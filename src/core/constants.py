"""Core constants used across Keystash modules.

This module centralizes file layout and wire-format constants.
Keeping values here avoids magic literals in codec logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_SAVE_ROOT = Path(".keystash")
DEFAULT_SAVE_FILE_NAME = "GameSave"
DEFAULT_SAVE_FILE_FORMAT = "bin"
SAVED_GAMES_DIR_NAME = "SavedGames"
BINARY_FILE_EXTENSION = ".bin"
SAVE_FILE_EXTENSION = ".sav"
DATA_FILE_EXTENSION = ".dat"

# Little-endian, fixed width.
TAG_FORMAT = "<B"
LENGTH_FORMAT = "<I"
FLOAT_FORMAT = "<f"
INT_FORMAT = "<i"
BOOL_FORMAT = "<B"
ENUM_FORMATS = {8: "<B", 16: "<H", 32: "<I", 64: "<Q"}
VECTOR_COMPONENT_COUNT = 3
QUAT_COMPONENT_COUNT = 4
TRANSFORM_COMPONENT_COUNT = 10
TEXT_ENCODING = "utf-8"
