"""Keystash exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Store corruption has dedicated subtypes so callers can tell a damaged
file apart from a missing key.
"""

from __future__ import annotations


class KeystashError(Exception):
    """Base exception for all Keystash failures."""


class KeystashConfigError(KeystashError):
    """Raised for invalid runtime configuration."""


class KeystashIoError(KeystashError):
    """Raised when the underlying file read primitive fails."""


class KeystashValueError(KeystashError):
    """Raised when a typed value cannot be encoded or decoded."""


class CorruptStoreError(KeystashError):
    """Raised when store file bytes do not decode as an entry sequence."""


class TruncatedRecordError(CorruptStoreError):
    """Raised when a declared length overruns the remaining buffer."""


class MalformedTagError(CorruptStoreError):
    """Raised when an entry tag is not a known data type."""
