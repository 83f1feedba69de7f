"""Fundamental constants, configuration enums and the library error type."""

from __future__ import annotations

import enum
import sys

WORD_SIZE: int = (sys.maxsize.bit_length() + 1)
"""Width of a machine word in bits (32 or 64)."""

_UINT32_MAX = 0xFFFFFFFF

INVALID_LINK_ID: int = _UINT32_MAX
INVALID_KEY_ID: int = _UINT32_MAX
INVALID_EXTRA: int = _UINT32_MAX >> 8

NUM_TRIES_MASK: int = 0x0007F
CACHE_LEVEL_MASK: int = 0x00F80
TAIL_MODE_MASK: int = 0x0F000
NODE_ORDER_MASK: int = 0xF0000
CONFIG_MASK: int = 0xFFFFF


class ErrorCode(enum.Enum):
    """Error categories reported by the library."""

    OK = 0
    STATE_ERROR = 1
    NULL_ERROR = 2
    BOUND_ERROR = 3
    RANGE_ERROR = 4
    CODE_ERROR = 5
    RESET_ERROR = 6
    SIZE_ERROR = 7
    MEMORY_ERROR = 8
    IO_ERROR = 9
    FORMAT_ERROR = 10

    def __str__(self) -> str:
        return self.name


class MarisaError(Exception):
    """Raised when an operation fails; carries an :class:`ErrorCode`."""

    def __init__(self, code: ErrorCode, message: str = "") -> None:
        self.code = code
        self.message = message
        text = str(code) if not message else f"{code}: {message}"
        super().__init__(text)


class TailMode(enum.IntEnum):
    """How suffixes are stored in the tail."""

    TEXT_TAIL = 0x01000
    BINARY_TAIL = 0x02000
    DEFAULT = 0x01000


class CacheLevel(enum.IntEnum):
    """Size of the search cache; larger is faster but uses more space."""

    HUGE = 0x00080
    LARGE = 0x00100
    NORMAL = 0x00200
    SMALL = 0x00400
    TINY = 0x00800
    DEFAULT = 0x00200


class NodeOrder(enum.IntEnum):
    """Arrangement order of sibling nodes."""

    LABEL = 0x10000
    WEIGHT = 0x20000
    DEFAULT = 0x20000


class NumTries(enum.IntEnum):
    """Limits and default for the number of tries in a dictionary."""

    MIN = 0x00001
    DEFAULT = 0x00003
    MAX = 0x0007F


class MapFlags(enum.IntFlag):
    """Flags for memory mapping."""

    POPULATE = 1 << 0