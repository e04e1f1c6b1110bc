"""Decoder for precompiled Lua 5.1 chunks.

The decoder walks the chunk exactly as ``lundump.c`` writes it: a fixed
12-byte header followed by one serialized function prototype, which in turn
contains its nested prototypes.  Every count and length read from the input
is checked against the bytes that remain before it is trusted, so truncated or
hostile input ends in an :class:`~luac_undump.exceptions.UndumpError` instead
of an oversized allocation or an ``IndexError``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from . import constants as profile
from .byteops import ByteReader, BytesLike
from .exceptions import (
    HeaderMismatchError,
    InvalidConstantTagError,
    NestingDepthError,
    SizeConversionError,
    TrailingDataError,
)
from .model import (
    Boolean,
    Constant,
    ConstantType,
    FunctionPrototype,
    LocalVariableInfo,
    Nil,
    Number,
    String,
)

LOG = logging.getLogger(__name__)

__all__ = [
    "undump",
    "undump_file",
    "read_header",
    "read_string",
    "read_function",
]


def _to_size(reader: ByteReader, value: int) -> int:
    if value > profile.MAX_NATIVE_SIZE:
        raise SizeConversionError(value, offset=reader.offset)
    return value


def _read_count(reader: ByteReader) -> int:
    return _to_size(reader, reader.read_u32())


def read_header(reader: ByteReader) -> None:
    """Validate the fixed chunk header against the accepted profile."""

    reader.require(profile.HEADER_SIZE, "header")
    for field, expected, message in profile.HEADER_LAYOUT:
        offset = reader.offset
        actual = reader.read_bytes(len(expected))
        if actual != expected:
            raise HeaderMismatchError(
                field, message, expected=expected, actual=actual, offset=offset
            )
    LOG.debug("chunk header accepted")


def read_string(reader: ByteReader) -> str:
    """Read a ``size_t``-prefixed, NUL-terminated string.

    A zero length encodes an absent string and yields ``""``.  Otherwise the
    final byte is the terminator and is skipped without being inspected.
    Invalid UTF-8 is replaced rather than rejected.
    """

    reader.require(8, "string length")
    length = _to_size(reader, reader.read_u64())
    reader.require(length, "string contents")
    if length == 0:
        return ""
    text = reader.read_bytes(length - 1).decode("utf-8", errors="replace")
    reader.skip(1)
    return text


def _read_constant(reader: ByteReader) -> Constant:
    reader.require(1, "constants")
    offset = reader.offset
    tag = reader.read_u8()
    if tag == ConstantType.NIL:
        return Nil()
    if tag == ConstantType.BOOLEAN:
        reader.require(1, "boolean constant")
        return Boolean(reader.read_u8() != 0)
    if tag == ConstantType.NUMBER:
        reader.require(8, "number constant")
        return Number(reader.read_f64())
    if tag == ConstantType.STRING:
        return String(read_string(reader))
    raise InvalidConstantTagError(tag, offset=offset)


def read_function(reader: ByteReader) -> FunctionPrototype:
    """Read one function prototype, recursing into its nested functions."""

    source = read_string(reader)

    reader.require(16, "function header")
    line_defined = reader.read_u32()
    last_line_defined = reader.read_u32()
    nups = reader.read_u8()
    num_params = reader.read_u8()
    is_vararg = reader.read_u8()
    maxstacksize = reader.read_u8()

    # The constants count shares the code gate.
    code_len = _read_count(reader)
    reader.require(code_len * 4 + 4, "function code")
    code = tuple(reader.read_u32() for _ in range(code_len))

    const_len = _read_count(reader)
    constants = tuple(_read_constant(reader) for _ in range(const_len))

    reader.require(4, "functions")
    fun_len = _read_count(reader)
    funs: List[FunctionPrototype] = []
    for _ in range(fun_len):
        funs.append(read_function(reader))

    reader.require(4, "debug lineinfo size")
    lineinfo_len = _read_count(reader)
    reader.require(lineinfo_len * 4, "debug lineinfo")
    lineinfo = tuple(reader.read_u32() for _ in range(lineinfo_len))

    reader.require(4, "debug locvars size")
    locvar_len = _read_count(reader)
    locvars: List[LocalVariableInfo] = []
    for _ in range(locvar_len):
        varname = read_string(reader)
        reader.require(8, "debug locvars")
        startpc = reader.read_u32()
        endpc = reader.read_u32()
        locvars.append(LocalVariableInfo(varname, startpc, endpc))

    reader.require(4, "debug upvalues size")
    upvalue_len = _read_count(reader)
    upvalues = tuple(read_string(reader) for _ in range(upvalue_len))

    return FunctionPrototype(
        source=source,
        line_defined=line_defined,
        last_line_defined=last_line_defined,
        nups=nups,
        num_params=num_params,
        is_vararg=is_vararg,
        maxstacksize=maxstacksize,
        code=code,
        constants=constants,
        funs=tuple(funs),
        lineinfo=lineinfo,
        locvars=tuple(locvars),
        upvalues=upvalues,
    )


def undump(data: BytesLike) -> FunctionPrototype:
    """Decode ``data`` into the top-level :class:`FunctionPrototype`.

    The whole buffer must be consumed; leftover bytes raise
    :class:`~luac_undump.exceptions.TrailingDataError`.
    """

    reader = ByteReader(data)
    LOG.debug("decoding chunk (%d bytes)", reader.remaining)
    read_header(reader)
    try:
        main = read_function(reader)
    except RecursionError:
        raise NestingDepthError(
            "nested functions exceed the interpreter recursion limit",
            offset=reader.offset,
        ) from None
    if reader.has_remaining():
        raise TrailingDataError(reader.remaining, offset=reader.offset)
    LOG.debug(
        "decoded chunk %r: %d prototype(s)",
        main.source,
        sum(1 for _ in main.walk()),
    )
    return main


def undump_file(path: Union[str, Path]) -> FunctionPrototype:
    """Read the chunk stored at ``path`` and decode it."""

    data = Path(path).read_bytes()
    LOG.debug("read %d bytes from %s", len(data), path)
    return undump(data)
