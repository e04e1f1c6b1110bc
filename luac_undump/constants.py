"""Header profile accepted by the chunk decoder.

Only chunks produced by a stock Lua 5.1 build on a 64-bit little-endian
host are recognised; every other header configuration is rejected.
"""

from __future__ import annotations

import sys
from typing import Tuple

LUA_SIGNATURE = b"\x1bLua"
LUAC_VERSION = 0x51
LUAC_FORMAT = 0  # official format
LITTLE_ENDIAN = 1

SIZEOF_INT = 4
SIZEOF_SIZE_T = 8
SIZEOF_INSTRUCTION = 4
SIZEOF_NUMBER = 8
INTEGRAL_NUMBERS = 0

HEADER_SIZE = 12

# (field, expected bytes, error message) in wire order.
HEADER_LAYOUT: Tuple[Tuple[str, bytes, str], ...] = (
    ("signature", LUA_SIGNATURE, "bad signature"),
    ("version", bytes([LUAC_VERSION]), "bad luac version"),
    ("format", bytes([LUAC_FORMAT]), "bad luac format"),
    ("endianness", bytes([LITTLE_ENDIAN]), "bad endianness"),
    ("sizeof(int)", bytes([SIZEOF_INT]), "bad sizeof(int)"),
    ("sizeof(size_t)", bytes([SIZEOF_SIZE_T]), "bad sizeof(size_t)"),
    ("sizeof(Instruction)", bytes([SIZEOF_INSTRUCTION]), "bad sizeof(Instruction)"),
    ("sizeof(lua_Number)", bytes([SIZEOF_NUMBER]), "bad sizeof(lua_Number)"),
    ("integral", bytes([INTEGRAL_NUMBERS]), "lua_Number must be floating point"),
)

# Largest count or length the decoder will turn into a native size.
MAX_NATIVE_SIZE: int = sys.maxsize

__all__ = [
    "LUA_SIGNATURE",
    "LUAC_VERSION",
    "LUAC_FORMAT",
    "LITTLE_ENDIAN",
    "SIZEOF_INT",
    "SIZEOF_SIZE_T",
    "SIZEOF_INSTRUCTION",
    "SIZEOF_NUMBER",
    "INTEGRAL_NUMBERS",
    "HEADER_SIZE",
    "HEADER_LAYOUT",
    "MAX_NATIVE_SIZE",
]
