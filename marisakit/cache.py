"""Per-node cache record used while building a trie."""

from __future__ import annotations

import struct

from .base import INVALID_EXTRA, ErrorCode, MarisaError

_UINT32_MAX = 0xFFFFFFFF
_FLOAT32 = struct.Struct("<f")
_UINT32 = struct.Struct("<I")


def _float_to_bits(value: float) -> int:
    return _UINT32.unpack(_FLOAT32.pack(value))[0]


def _bits_to_float(bits: int) -> float:
    return _FLOAT32.unpack(_UINT32.pack(bits))[0]


def _check_u32(name: str, value: int) -> int:
    if not 0 <= value <= _UINT32_MAX:
        raise MarisaError(ErrorCode.SIZE_ERROR, f"{name} out of 32-bit range: {value}")
    return value


# The smallest positive normalized 32-bit float.
_FLOAT32_MIN_POSITIVE = _bits_to_float(0x00800000)


class Cache:
    """Parent/child indices plus a 32-bit cell holding either a link or a weight.

    The link is a base byte (low 8 bits) and an extra value (high 24 bits);
    the weight is a 32-bit float sharing the same storage, so setting one
    overwrites the other.
    """

    __slots__ = ("_parent", "_child", "_cell")

    def __init__(self) -> None:
        self._parent = 0
        self._child = 0
        self._cell = _float_to_bits(_FLOAT32_MIN_POSITIVE)

    @property
    def parent(self) -> int:
        """Parent node index."""
        return self._parent

    @parent.setter
    def parent(self, value: int) -> None:
        self._parent = _check_u32("parent", value)

    @property
    def child(self) -> int:
        """Child node index."""
        return self._child

    @child.setter
    def child(self, value: int) -> None:
        self._child = _check_u32("child", value)

    @property
    def base(self) -> int:
        """Low 8 bits of the link."""
        return self._cell & 0xFF

    @base.setter
    def base(self, value: int) -> None:
        if not 0 <= value <= 0xFF:
            raise MarisaError(ErrorCode.RANGE_ERROR, f"base out of byte range: {value}")
        self._cell = (self._cell & ~0xFF & _UINT32_MAX) | value

    @property
    def extra(self) -> int:
        """High 24 bits of the link."""
        return self._cell >> 8

    @extra.setter
    def extra(self, value: int) -> None:
        if not 0 <= value <= INVALID_EXTRA:
            raise MarisaError(ErrorCode.SIZE_ERROR, f"extra too large: {value}")
        self._cell = (self._cell & 0xFF) | (value << 8)

    @property
    def label(self) -> int:
        """The base byte, used as an edge label."""
        return self.base

    @property
    def link(self) -> int:
        """The full 32-bit link value."""
        return self._cell

    @property
    def weight(self) -> float:
        """The cell read as a 32-bit float."""
        return _bits_to_float(self._cell)

    @weight.setter
    def weight(self, value: float) -> None:
        self._cell = _float_to_bits(value)

    def __copy__(self) -> Cache:
        clone = Cache()
        clone._parent = self._parent
        clone._child = self._child
        clone._cell = self._cell
        return clone

    def __repr__(self) -> str:
        return (
            f"Cache(parent={self._parent}, child={self._child}, "
            f"link={self._cell:#010x})"
        )