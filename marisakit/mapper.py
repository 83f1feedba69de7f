"""Read-only access to serialized data held in memory or mapped from a file."""

from __future__ import annotations

import mmap
import os
from typing import Any

from .base import ErrorCode, MarisaError
from .reader import _struct_for


class Mapper:
    """Maps typed values out of a block of bytes, advancing a read position.

    The bytes come either from a memory-mapped file (:meth:`open_file`) or
    from an in-memory buffer (:meth:`open_memory`). Formats are :mod:`struct`
    format strings; without an explicit byte-order prefix they are read
    little-endian with no padding.
    """

    def __init__(self, data: bytes | None = None) -> None:
        self._data: bytes | mmap.mmap | None = None if data is None else bytes(data)
        self._mmap: mmap.mmap | None = None
        self._position = 0

    @classmethod
    def open_file(cls, filename: str | os.PathLike[str]) -> Mapper:
        """Memory-map ``filename`` read-only."""
        try:
            with open(filename, "rb") as handle:
                if os.fstat(handle.fileno()).st_size == 0:
                    return cls(b"")
                mapped = mmap.mmap(handle.fileno(), 0, access=mmap.ACCESS_READ)
        except OSError as exc:
            raise MarisaError(
                ErrorCode.IO_ERROR, f"cannot map {filename}: {exc}"
            ) from exc
        mapper = cls()
        mapper._mmap = mapped
        mapper._data = mapped
        return mapper

    @classmethod
    def open_memory(cls, data: bytes) -> Mapper:
        """Create a mapper over ``data``."""
        return cls(data)

    def _require(self, size: int) -> bytes | mmap.mmap:
        data = self._data
        if data is None or len(data) == 0:
            raise MarisaError(ErrorCode.STATE_ERROR, "mapper not open")
        if self._position + size > len(data):
            raise MarisaError(
                ErrorCode.IO_ERROR,
                f"insufficient data: wanted {size} bytes at offset "
                f"{self._position} of {len(data)}",
            )
        return data

    def map(self, fmt: str) -> Any:
        """Map one value described by ``fmt`` and advance past it."""
        packer = _struct_for(fmt)
        data = self._require(packer.size)
        values = packer.unpack_from(data, self._position)
        self._position += packer.size
        return values[0] if len(values) == 1 else values

    def map_values(self, fmt: str, count: int) -> list[Any]:
        """Map ``count`` consecutive values of format ``fmt``."""
        if count == 0:
            return []
        packer = _struct_for(fmt)
        total = packer.size * count
        data = self._require(total)
        start = self._position
        values = [
            packer.unpack_from(data, start + index * packer.size)
            for index in range(count)
        ]
        self._position += total
        return [item[0] if len(item) == 1 else item for item in values]

    def map_bytes(self, size: int) -> bytes:
        """Map ``size`` raw bytes."""
        if size == 0:
            return b""
        data = self._require(size)
        start = self._position
        self._position += size
        return bytes(data[start:start + size])

    def seek(self, size: int) -> None:
        """Skip ``size`` bytes forward."""
        self._require(size)
        self._position += size

    def is_open(self) -> bool:
        """Return whether the mapper has data attached."""
        return self._data is not None

    def position(self) -> int:
        """Return the current read offset."""
        return self._position

    def size(self) -> int:
        """Return the total number of mapped bytes."""
        return 0 if self._data is None else len(self._data)

    def close(self) -> None:
        """Detach the data, unmapping any file."""
        if self._mmap is not None:
            self._mmap.close()
        self._mmap = None
        self._data = None
        self._position = 0

    def swap(self, other: Mapper) -> None:
        """Exchange contents and positions with ``other``."""
        self._data, other._data = other._data, self._data
        self._mmap, other._mmap = other._mmap, self._mmap
        self._position, other._position = other._position, self._position

    def __enter__(self) -> Mapper:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()