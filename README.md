# marisakit

Building blocks for a static, space-efficient MARISA trie, in pure Python
with no third-party dependencies.

## What is in the package

- `marisakit.base`: the error type `MarisaError` (its `code` attribute is an
  `ErrorCode`), the enums `TailMode`, `CacheLevel`, `NodeOrder`, `NumTries`
  and `MapFlags`, and constants such as `INVALID_KEY_ID`, `INVALID_EXTRA`
  and the configuration masks (`NUM_TRIES_MASK`, `CACHE_LEVEL_MASK`,
  `TAIL_MODE_MASK`, `NODE_ORDER_MASK`, `CONFIG_MASK`).
- `marisakit.config`: `Config`, a dataclass with `num_tries`,
  `cache_level`, `tail_mode` and `node_order`. `Config.from_flags()` and
  `Config.parse()` read a packed configuration word (unset fields take
  their defaults; undefined values raise `MarisaError` with
  `ErrorCode.CODE_ERROR`), `flags()` packs the number of tries, tail mode
  and node order back into one, and `clear()` and `swap()` reset and
  exchange settings.
- `marisakit.sort`: `sort()`, a depth-based three-way string quicksort
  that sorts a mutable sequence in place and returns the number of
  distinct elements, with its helpers `get_label`, `median`, `compare`
  and `insertion_sort`. Elements only need `len()` and integer indexing
  returning byte values, so `bytes` and `Entry` both work.
- `marisakit.entry`: `Entry`, a byte string with an `id`, indexed from its
  last byte backwards (`entry[0]` is the last byte); `as_bytes()` returns
  the bytes in forward order. The comparers `string_greater` and `id_less`
  compare entries back to front and by ID.
- `marisakit.cache`: `Cache`, with `parent` and `child` index properties
  and a 32-bit cell read either as a link (`base`, `extra`, `label`,
  `link`) or as a float `weight`; setting one overwrites the other.
- `marisakit.reader`, `marisakit.writer`, `marisakit.mapper`: sequential
  binary I/O using `struct` format strings, little-endian when no byte
  order is given. `Reader` reads from a file or bytes, `Writer` writes to
  a file or memory (`Writer.in_memory()`, then `getvalue()`), and `Mapper`
  maps values out of an in-memory buffer or a memory-mapped file while
  tracking `position()` and `size()`. All three are context managers.

## Installation

```
pip install marisakit
```

## Examples

Parsing a configuration:

```python
from marisakit.base import CacheLevel, TailMode
from marisakit.config import Config

config = Config.from_flags(5 | CacheLevel.LARGE | TailMode.BINARY_TAIL)
print(config.num_tries, config.tail_mode)
```

Sorting entries by their reversed contents:

```python
from marisakit.entry import Entry
from marisakit.sort import sort

entries = [Entry(word.encode(), i) for i, word in enumerate(["app", "apple", "a"])]
unique = sort(entries)
print(unique, [e.as_bytes() for e in entries])
```

Writing and reading binary data:

```python
from marisakit.reader import Reader
from marisakit.writer import Writer

with Writer.in_memory() as writer:
    writer.write("<I", 42)
    writer.seek(4)
    data = writer.getvalue()

with Reader.from_bytes(data) as reader:
    print(reader.read("<I"))
```

Reading from a closed reader, writer or mapper raises `MarisaError` with
`ErrorCode.STATE_ERROR`; running out of data raises it with
`ErrorCode.IO_ERROR`.

## What it does not do

The package holds the pieces a trie is built from, not the trie itself.
It has no keyset, no trie construction, no lookup, reverse lookup,
common-prefix or predictive search, no dictionary file format, and no
command-line tools.

## Running the tests

```
pip install -e ".[test]"
pytest
```