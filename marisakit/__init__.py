"""Building blocks for a static, space-efficient MARISA trie: configuration, sorting, entries, caches and binary I/O."""

__version__ = "0.4.0"

__all__ = ["base", "cache", "config", "entry", "mapper", "reader", "sort", "writer"]