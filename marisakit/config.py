"""Trie-building configuration parsed from packed flag bits."""

from __future__ import annotations

from dataclasses import dataclass

from .base import (
    CACHE_LEVEL_MASK,
    CONFIG_MASK,
    NODE_ORDER_MASK,
    NUM_TRIES_MASK,
    TAIL_MODE_MASK,
    CacheLevel,
    ErrorCode,
    MarisaError,
    NodeOrder,
    NumTries,
    TailMode,
)


def _parse_enum(enum_cls, bits: int, what: str):
    if bits == 0:
        return enum_cls.DEFAULT
    try:
        return enum_cls(bits)
    except ValueError:
        raise MarisaError(ErrorCode.CODE_ERROR, f"Undefined {what}") from None


@dataclass
class Config:
    """Number of tries, cache level, tail mode and node order for a build."""

    num_tries: int = int(NumTries.DEFAULT)
    cache_level: CacheLevel = CacheLevel.DEFAULT
    tail_mode: TailMode = TailMode.DEFAULT
    node_order: NodeOrder = NodeOrder.DEFAULT

    def parse(self, config_flags: int) -> None:
        """Replace all settings with those encoded in ``config_flags``.

        Unset fields take their defaults; on error nothing is changed.
        """
        parsed = Config.from_flags(config_flags)
        self.num_tries = parsed.num_tries
        self.cache_level = parsed.cache_level
        self.tail_mode = parsed.tail_mode
        self.node_order = parsed.node_order

    @classmethod
    def from_flags(cls, config_flags: int) -> Config:
        """Build a configuration from packed flag bits."""
        if config_flags & ~CONFIG_MASK:
            raise MarisaError(ErrorCode.CODE_ERROR, "Invalid configuration flags")
        num_tries = config_flags & NUM_TRIES_MASK
        return cls(
            num_tries=num_tries if num_tries else int(NumTries.DEFAULT),
            cache_level=_parse_enum(
                CacheLevel, config_flags & CACHE_LEVEL_MASK, "cache level"
            ),
            tail_mode=_parse_enum(TailMode, config_flags & TAIL_MODE_MASK, "tail mode"),
            node_order=_parse_enum(
                NodeOrder, config_flags & NODE_ORDER_MASK, "node order"
            ),
        )

    def flags(self) -> int:
        """Return number of tries, tail mode and node order as packed bits."""
        return int(self.num_tries) | int(self.tail_mode) | int(self.node_order)

    def clear(self) -> None:
        """Reset every setting to its default."""
        self.parse(0)

    def swap(self, other: Config) -> None:
        """Exchange all settings with ``other``."""
        self.num_tries, other.num_tries = other.num_tries, self.num_tries
        self.cache_level, other.cache_level = other.cache_level, self.cache_level
        self.tail_mode, other.tail_mode = other.tail_mode, self.tail_mode
        self.node_order, other.node_order = other.node_order, self.node_order