"""Unit tests for the config-bound keystash client."""

from __future__ import annotations

from dataclasses import replace

from core.config import KeystashConfig
from core.types import DataType, SaveFileFormat, StoreEntry, Transform
from store.keystash_client import KeystashClient


def _client(tmp_path) -> KeystashClient:
    config = replace(KeystashConfig.from_env(), save_root=tmp_path)
    return KeystashClient(config)


def test_file_path_uses_configured_defaults(tmp_path) -> None:
    """Client paths should default to the configured name and format."""
    config = replace(
        KeystashConfig.from_env(),
        save_root=tmp_path,
        default_file_name="Profile",
        default_format=SaveFileFormat.SAV,
    )
    client = KeystashClient(config)

    assert client.file_path() == tmp_path / "SavedGames" / "Profile.sav"


def test_save_and_load_in_default_file(tmp_path) -> None:
    """Raw saves should land in the default file."""
    client = _client(tmp_path)

    assert client.save("flag", b"\x01", DataType.BOOL) is True

    assert client.load("flag") == StoreEntry(DataType.BOOL, "flag", b"\x01")
    assert client.exists()


def test_named_files_are_isolated(tmp_path) -> None:
    """Keys saved to one file should not appear in another."""
    client = _client(tmp_path)
    client.save_value("score", 10, file_name="SlotA")

    assert client.load_value("score", file_name="SlotB") is None
    assert client.load_value("score", file_name="SlotA") == 10


def test_typed_value_roundtrip(tmp_path) -> None:
    """Typed values should roundtrip through the client."""
    client = _client(tmp_path)

    client.save_value("player", Transform())

    assert client.load_value("player") == Transform()


def test_delete_and_delete_file(tmp_path) -> None:
    """Key deletion and whole-file deletion should both take effect."""
    client = _client(tmp_path)
    client.save_value("a", "x")

    assert client.delete("a") is True
    assert client.load("a") is None

    client.delete_file()

    assert not client.exists()
    assert client.delete("a") is False
