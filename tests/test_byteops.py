from __future__ import annotations

import struct

import pytest

from luac_undump.byteops import ByteReader
from luac_undump.exceptions import TruncatedChunkError


def test_reads_little_endian_primitives() -> None:
    data = b"\x7f" + struct.pack("<I", 0xDEADBEEF) + struct.pack("<Q", 1 << 40) + struct.pack("<d", 0.5)
    reader = ByteReader(data)
    assert reader.read_u8() == 0x7F
    assert reader.read_u32() == 0xDEADBEEF
    assert reader.read_u64() == 1 << 40
    assert reader.read_f64() == 0.5
    assert not reader.has_remaining()
    assert reader.offset == len(data)


def test_require_does_not_consume() -> None:
    reader = ByteReader(b"\x01\x02\x03")
    reader.require(3, "triple")
    assert reader.remaining == 3
    with pytest.raises(TruncatedChunkError) as excinfo:
        reader.require(4, "quad")
    assert excinfo.value.field == "quad"
    assert excinfo.value.offset == 0
    assert reader.remaining == 3


def test_primitive_read_past_end_is_truncation() -> None:
    reader = ByteReader(b"\x01\x02")
    with pytest.raises(TruncatedChunkError, match="truncated u32"):
        reader.read_u32()
    assert reader.offset == 0


def test_read_bytes_and_skip() -> None:
    reader = ByteReader(bytearray(b"abcdef"))
    assert reader.read_bytes(2) == b"ab"
    reader.skip(3)
    assert reader.read_bytes(1) == b"f"
    assert reader.remaining == 0


def test_reader_copies_mutable_input() -> None:
    data = bytearray(b"\x05")
    reader = ByteReader(data)
    data[0] = 0x09
    assert reader.read_u8() == 0x05
