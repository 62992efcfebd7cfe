"""Fixed-width binary packing helpers.

This module owns the little-endian primitives shared by the record
codec and the typed value codec, plus a bounds-checked read cursor.
"""

from __future__ import annotations

import struct

from core.constants import LENGTH_FORMAT, TEXT_ENCODING
from core.errors import CorruptStoreError, TruncatedRecordError

_MAX_LENGTH = 2**32 - 1


def pack_length_prefixed(data: bytes) -> bytes:
    """Frame a byte sequence with its u32 length.

    Args:
        data: Raw bytes to frame.

    Returns:
        Length prefix followed by the bytes.

    Raises:
        ValueError: If the data does not fit a u32 length.
    """
    if len(data) > _MAX_LENGTH:
        raise ValueError(f"Field of {len(data)} bytes exceeds the u32 length prefix.")
    return struct.pack(LENGTH_FORMAT, len(data)) + data


def pack_text(text: str) -> bytes:
    """Encode text as a length-prefixed UTF-8 sequence."""
    return pack_length_prefixed(text.encode(TEXT_ENCODING))


class ByteReader:
    """Forward-only cursor over an immutable byte buffer.

    Every read checks the remaining length first and raises
    TruncatedRecordError instead of returning a short slice.
    """

    def __init__(self, buffer: bytes) -> None:
        self._view = memoryview(buffer)
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return len(self._view) - self._offset

    def at_end(self) -> bool:
        """Return whether every byte has been consumed."""
        return self._offset >= len(self._view)

    def read_bytes(self, size: int) -> bytes:
        """Read exactly `size` bytes.

        Args:
            size: Number of bytes to consume.

        Returns:
            Copied bytes.

        Raises:
            TruncatedRecordError: If fewer than `size` bytes remain.
        """
        if size > self.remaining:
            raise TruncatedRecordError(
                f"Truncated record at byte offset {self._offset}: "
                f"expected {size} bytes, only {self.remaining} remain. "
                "The file was cut short or overwritten; restore it from a backup."
            )
        start = self._offset
        self._offset += size
        return bytes(self._view[start : self._offset])

    def read_struct(self, fmt: str) -> tuple:
        """Read and unpack one fixed-width struct."""
        return struct.unpack(fmt, self.read_bytes(struct.calcsize(fmt)))

    def read_length_prefixed(self) -> bytes:
        """Read a u32 length followed by that many bytes."""
        (size,) = self.read_struct(LENGTH_FORMAT)
        return self.read_bytes(size)

    def read_text(self) -> str:
        """Read a length-prefixed UTF-8 string.

        Raises:
            TruncatedRecordError: If the declared length overruns the buffer.
            CorruptStoreError: If the bytes are not valid UTF-8.
        """
        start = self._offset
        raw = self.read_length_prefixed()
        try:
            return raw.decode(TEXT_ENCODING)
        except UnicodeDecodeError as error:
            raise CorruptStoreError(
                f"Invalid UTF-8 text at byte offset {start}: {error.reason}."
            ) from error
