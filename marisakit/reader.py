"""Sequential reader for little-endian binary data."""

from __future__ import annotations

import io
import os
import struct
from typing import Any, BinaryIO

from .base import ErrorCode, MarisaError

_BYTE_ORDER_CHARS = "@=<>!"
_SKIP_CHUNK = 1024


def _struct_for(fmt: str) -> struct.Struct:
    if not fmt or fmt[0] not in _BYTE_ORDER_CHARS:
        fmt = "<" + fmt
    return struct.Struct(fmt)


class Reader:
    """Reads typed values from a binary stream.

    Formats are :mod:`struct` format strings; without an explicit byte-order
    prefix they are read little-endian with no padding.
    """

    def __init__(self, stream: BinaryIO | None = None) -> None:
        self._stream = stream
        self._owns_stream = False

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> Reader:
        """Open a file for reading."""
        try:
            stream = open(path, "rb")
        except OSError as exc:
            raise MarisaError(ErrorCode.IO_ERROR, f"cannot open {path}: {exc}") from exc
        reader = cls(stream)
        reader._owns_stream = True
        return reader

    @classmethod
    def from_bytes(cls, data: bytes) -> Reader:
        """Create a reader over a copy of ``data``."""
        reader = cls(io.BytesIO(bytes(data)))
        reader._owns_stream = True
        return reader

    def _require_stream(self) -> BinaryIO:
        if self._stream is None:
            raise MarisaError(ErrorCode.STATE_ERROR, "reader not open")
        return self._stream

    def _read_exact(self, size: int) -> bytes:
        stream = self._require_stream()
        chunks = []
        remaining = size
        while remaining > 0:
            chunk = stream.read(remaining)
            if not chunk:
                raise MarisaError(
                    ErrorCode.IO_ERROR,
                    f"unexpected end of data: wanted {size} bytes, got {size - remaining}",
                )
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def read(self, fmt: str) -> Any:
        """Read one value described by the single-item format ``fmt``."""
        packer = _struct_for(fmt)
        values = packer.unpack(self._read_exact(packer.size))
        return values[0] if len(values) == 1 else values

    def read_values(self, fmt: str, count: int) -> list[Any]:
        """Read ``count`` consecutive values of format ``fmt``."""
        if count == 0:
            return []
        packer = _struct_for(fmt)
        data = self._read_exact(packer.size * count)
        return [
            item[0] if len(item) == 1 else item for item in packer.iter_unpack(data)
        ]

    def read_bytes(self, size: int) -> bytes:
        """Read exactly ``size`` raw bytes."""
        if size == 0:
            return b""
        return self._read_exact(size)

    def seek(self, size: int) -> None:
        """Skip ``size`` bytes forward by reading and discarding them."""
        if size == 0:
            return
        remaining = size
        while remaining > 0:
            count = min(remaining, _SKIP_CHUNK)
            self._read_exact(count)
            remaining -= count

    def is_open(self) -> bool:
        """Return whether the reader has an underlying stream."""
        return self._stream is not None

    def close(self) -> None:
        """Release the underlying stream."""
        if self._stream is not None and self._owns_stream:
            self._stream.close()
        self._stream = None
        self._owns_stream = False

    def __enter__(self) -> Reader:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()