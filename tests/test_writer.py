import io
import struct

import pytest

from marisakit.base import ErrorCode, MarisaError
from marisakit.writer import Writer


def test_writer_new_is_not_open():
    assert Writer().is_open() is False


def test_in_memory_is_open():
    assert Writer.in_memory().is_open() is True


def test_write_u32():
    writer = Writer.in_memory()
    writer.write("I", 0x04030201)
    assert writer.getvalue() == bytes([0x01, 0x02, 0x03, 0x04])


def test_write_values():
    writer = Writer.in_memory()
    writer.write_values("B", [1, 2, 3, 4])
    assert writer.getvalue() == bytes([1, 2, 3, 4])


def test_write_empty_values():
    writer = Writer.in_memory()
    writer.write_values("B", [])
    assert len(writer.getvalue()) == 0


def test_seek_writes_zeros():
    writer = Writer.in_memory()
    writer.write("B", 42)
    writer.seek(4)
    writer.write("B", 99)
    assert writer.getvalue() == bytes([42, 0, 0, 0, 0, 99])


def test_seek_zero():
    writer = Writer.in_memory()
    writer.write("B", 42)
    writer.seek(0)
    writer.write("B", 99)
    assert writer.getvalue() == bytes([42, 99])


def test_seek_large():
    writer = Writer.in_memory()
    writer.write("B", 1)
    writer.seek(1500)
    writer.write("B", 2)
    data = writer.getvalue()
    assert len(data) == 1502
    assert data[0] == 1
    assert data[1501] == 2
    assert all(b == 0 for b in data[1:1501])


def test_close():
    writer = Writer.in_memory()
    assert writer.is_open()
    writer.close()
    assert writer.is_open() is False


def test_write_not_open_raises():
    with pytest.raises(MarisaError) as info:
        Writer().write("I", 42)
    assert info.value.code is ErrorCode.STATE_ERROR


def test_from_stream():
    target = io.BytesIO()
    writer = Writer(target)
    assert writer.is_open()
    writer.write("I", 0x04030201)
    assert target.getvalue() == bytes([1, 2, 3, 4])
    writer.close()
    assert writer.is_open() is False
    assert target.closed is False


def test_getvalue_without_buffer_raises():
    writer = Writer(io.BytesIO())
    with pytest.raises(MarisaError) as info:
        writer.getvalue()
    assert info.value.code is ErrorCode.STATE_ERROR


def test_write_multiple_types():
    writer = Writer.in_memory()
    writer.write("I", 42)
    writer.write("Q", 100)
    assert writer.getvalue() == struct.pack("<I", 42) + struct.pack("<Q", 100)


def test_multiple_writes():
    writer = Writer.in_memory()
    writer.write("B", 1)
    writer.write("B", 2)
    writer.write("B", 3)
    assert writer.getvalue() == bytes([1, 2, 3])


def test_write_values_multiple():
    writer = Writer.in_memory()
    writer.write_values("B", [1, 2, 3, 4])
    writer.write_values("B", [5, 6, 7, 8])
    assert writer.getvalue() == bytes([1, 2, 3, 4, 5, 6, 7, 8])


def test_write_bytes():
    writer = Writer.in_memory()
    writer.write_bytes(b"ab")
    writer.write_bytes(b"")
    writer.write_bytes(b"cd")
    assert writer.getvalue() == b"abcd"


def test_open_file_round_trip(tmp_path):
    path = tmp_path / "out.bin"
    with Writer.open(path) as writer:
        writer.write("I", 7)
        writer.seek(2)
        writer.write_values("H", [1, 2])
    assert writer.is_open() is False
    assert path.read_bytes() == struct.pack("<I", 7) + b"\x00\x00" + struct.pack("<HH", 1, 2)


def test_open_bad_path_raises(tmp_path):
    with pytest.raises(MarisaError) as info:
        Writer.open(tmp_path / "missing" / "out.bin")
    assert info.value.code is ErrorCode.IO_ERROR