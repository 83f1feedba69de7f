"""Keys viewed back to front, as used while building the tail of a trie."""

from __future__ import annotations

import operator

from .base import ErrorCode, MarisaError

_UINT32_MAX = 0xFFFFFFFF


class Entry:
    """A byte string with an ID, indexed from its last byte backwards.

    ``entry[0]`` is the last byte and ``entry[len(entry) - 1]`` the first,
    so sorting entries with :func:`marisakit.sort.sort` orders them by their
    reversed contents.
    """

    __slots__ = ("_data", "_id")

    def __init__(self, data: bytes = b"", id: int = 0) -> None:
        data = bytes(data)
        if len(data) > _UINT32_MAX:
            raise MarisaError(ErrorCode.SIZE_ERROR, "string too long")
        self._data = data
        self._id = 0
        self.id = id

    @property
    def id(self) -> int:
        """The entry's ID."""
        return self._id

    @id.setter
    def id(self, value: int) -> None:
        if not 0 <= value <= _UINT32_MAX:
            raise MarisaError(ErrorCode.SIZE_ERROR, f"ID too large: {value}")
        self._id = value

    def __getitem__(self, index: int) -> int:
        """Return the byte ``index`` positions from the end (0 is the last)."""
        i = operator.index(index)
        length = len(self._data)
        if not 0 <= i < length:
            raise IndexError("Index out of bounds")
        return self._data[length - 1 - i]

    def __len__(self) -> int:
        return len(self._data)

    def as_bytes(self) -> bytes:
        """Return the bytes in their original, forward order."""
        return self._data

    def __repr__(self) -> str:
        return f"Entry({self._data!r}, id={self._id})"


def string_greater(lhs: Entry, rhs: Entry) -> bool:
    """Return whether ``lhs`` is greater than ``rhs`` comparing back to front."""
    rhs_len = len(rhs)
    for i in range(len(lhs)):
        if i == rhs_len:
            return True
        left, right = lhs[i], rhs[i]
        if left != right:
            return left > right
    return len(lhs) > rhs_len


def id_less(lhs: Entry, rhs: Entry) -> bool:
    """Return whether ``lhs`` has a smaller ID than ``rhs``."""
    return lhs.id < rhs.id