"""Sequential writer for little-endian binary data."""

from __future__ import annotations

import io
import os
from typing import Any, BinaryIO, Iterable

from .base import ErrorCode, MarisaError
from .reader import _struct_for

_ZERO_CHUNK = bytes(1024)


class Writer:
    """Writes typed values to a binary stream.

    Formats are :mod:`struct` format strings; without an explicit byte-order
    prefix they are written little-endian with no padding.
    """

    def __init__(self, stream: BinaryIO | None = None) -> None:
        self._stream = stream
        self._owns_stream = False
        self._buffer: io.BytesIO | None = None

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> Writer:
        """Create or truncate a file for writing."""
        try:
            stream = open(path, "wb")
        except OSError as exc:
            raise MarisaError(ErrorCode.IO_ERROR, f"cannot open {path}: {exc}") from exc
        writer = cls(stream)
        writer._owns_stream = True
        return writer

    @classmethod
    def in_memory(cls) -> Writer:
        """Create a writer that collects its output in memory."""
        buffer = io.BytesIO()
        writer = cls(buffer)
        writer._owns_stream = True
        writer._buffer = buffer
        return writer

    def _emit(self, data: bytes) -> None:
        if self._stream is None:
            raise MarisaError(ErrorCode.STATE_ERROR, "writer not open")
        try:
            self._stream.write(data)
            if self._buffer is None:
                self._stream.flush()
        except OSError as exc:
            raise MarisaError(ErrorCode.IO_ERROR, str(exc)) from exc

    def write(self, fmt: str, value: Any) -> None:
        """Write one value with format ``fmt``."""
        self._emit(_struct_for(fmt).pack(value))

    def write_values(self, fmt: str, values: Iterable[Any]) -> None:
        """Write a sequence of values that share format ``fmt``."""
        items = list(values)
        if not items:
            return
        packer = _struct_for(fmt)
        self._emit(b"".join(packer.pack(item) for item in items))

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        if not data:
            return
        self._emit(bytes(data))

    def seek(self, size: int) -> None:
        """Advance by writing ``size`` zero bytes."""
        if size == 0:
            return
        remaining = size
        while remaining > 0:
            count = min(remaining, len(_ZERO_CHUNK))
            self._emit(_ZERO_CHUNK[:count])
            remaining -= count

    def is_open(self) -> bool:
        """Return whether the writer has an underlying stream."""
        return self._stream is not None

    def close(self) -> None:
        """Release the underlying stream and any collected output."""
        if self._stream is not None and self._owns_stream:
            self._stream.close()
        self._stream = None
        self._buffer = None
        self._owns_stream = False

    def getvalue(self) -> bytes:
        """Return everything written by an in-memory writer."""
        if self._buffer is None:
            raise MarisaError(ErrorCode.STATE_ERROR, "writer does not have a buffer")
        return self._buffer.getvalue()

    def __enter__(self) -> Writer:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()