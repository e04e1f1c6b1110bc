"""Decode precompiled Lua 5.1 chunks into immutable prototype trees.

Quick start::

    >>> from luac_undump import undump_file
    >>> proto = undump_file("luac.out")
    >>> [type(c).__name__ for c in proto.constants]
    ['Number', 'String']
"""

from __future__ import annotations

from .exceptions import (
    HeaderMismatchError,
    InvalidConstantTagError,
    LuaCompileError,
    NestingDepthError,
    SizeConversionError,
    TrailingDataError,
    TruncatedChunkError,
    UndumpError,
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
from .undump import undump, undump_file

__version__ = "0.1.0"

__all__ = [
    "undump",
    "undump_file",
    # Model
    "Boolean",
    "Constant",
    "ConstantType",
    "FunctionPrototype",
    "LocalVariableInfo",
    "Nil",
    "Number",
    "String",
    # Errors
    "UndumpError",
    "TruncatedChunkError",
    "HeaderMismatchError",
    "InvalidConstantTagError",
    "SizeConversionError",
    "TrailingDataError",
    "NestingDepthError",
    "LuaCompileError",
]
