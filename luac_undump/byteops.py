"""Bounds-checked little-endian reads over an in-memory chunk."""

from __future__ import annotations

import struct
from typing import Union

from .exceptions import TruncatedChunkError

BytesLike = Union[bytes, bytearray, memoryview]

_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")
_F64 = struct.Struct("<d")


class ByteReader:
    """Forward-only cursor over ``data``.

    Callers are expected to gate each group of reads with :meth:`require`
    so truncation errors name the field being decoded.  The primitive
    readers still refuse to run past the end of the buffer; in that case the
    error names the primitive instead.
    """

    __slots__ = ("_data", "_offset")

    def __init__(self, data: BytesLike) -> None:
        self._data = memoryview(bytes(data))
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def has_remaining(self) -> bool:
        return self._offset < len(self._data)

    def require(self, size: int, field: str) -> None:
        """Raise :class:`TruncatedChunkError` unless ``size`` bytes remain."""

        if self.remaining < size:
            raise TruncatedChunkError(field, offset=self._offset)

    def _take(self, size: int, field: str) -> memoryview:
        self.require(size, field)
        start = self._offset
        self._offset = start + size
        return self._data[start : self._offset]

    def read_u8(self) -> int:
        return self._take(1, "u8")[0]

    def read_u32(self) -> int:
        return _U32.unpack(self._take(4, "u32"))[0]

    def read_u64(self) -> int:
        return _U64.unpack(self._take(8, "u64"))[0]

    def read_f64(self) -> float:
        return _F64.unpack(self._take(8, "f64"))[0]

    def read_bytes(self, size: int) -> bytes:
        return bytes(self._take(size, "bytes"))

    def skip(self, size: int) -> None:
        self._take(size, "bytes")


__all__ = ["BytesLike", "ByteReader"]
