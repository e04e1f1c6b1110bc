"""Exception hierarchy raised while decoding precompiled chunks."""

from __future__ import annotations

from typing import Optional


class UndumpError(ValueError):
    """Base class for all chunk decoding errors.

    ``offset`` records the cursor position at which the problem was detected
    (``None`` when the error is not tied to a position).
    """

    def __init__(self, message: str, *, offset: Optional[int] = None) -> None:
        super().__init__(message)
        self.offset = offset


class TruncatedChunkError(UndumpError):
    """Raised when fewer bytes remain than a field requires."""

    def __init__(self, field: str, *, offset: Optional[int] = None) -> None:
        super().__init__(f"truncated {field}", offset=offset)
        self.field = field


class HeaderMismatchError(UndumpError):
    """Raised when a fixed header field does not match the accepted profile."""

    def __init__(
        self,
        field: str,
        message: str,
        *,
        expected: bytes,
        actual: bytes,
        offset: Optional[int] = None,
    ) -> None:
        super().__init__(message, offset=offset)
        self.field = field
        self.expected = expected
        self.actual = actual


class InvalidConstantTagError(UndumpError):
    """Raised for a constant type tag outside the known set."""

    def __init__(self, tag: int, *, offset: Optional[int] = None) -> None:
        super().__init__(f"invalid constant type {tag}", offset=offset)
        self.tag = tag


class SizeConversionError(UndumpError):
    """Raised when a count or length cannot be represented as a native size."""

    def __init__(self, value: int, *, offset: Optional[int] = None) -> None:
        super().__init__(f"length {value} does not fit in a native size", offset=offset)
        self.value = value


class TrailingDataError(UndumpError):
    """Raised when bytes remain after the top-level function."""

    def __init__(self, remaining: int, *, offset: Optional[int] = None) -> None:
        super().__init__(f"extraneous bytes ({remaining})", offset=offset)
        self.remaining = remaining


class NestingDepthError(UndumpError):
    """Raised when nested functions exceed the interpreter's recursion limit."""


class LuaCompileError(RuntimeError):
    """Raised when Lua source cannot be compiled into a chunk."""


__all__ = [
    "UndumpError",
    "TruncatedChunkError",
    "HeaderMismatchError",
    "InvalidConstantTagError",
    "SizeConversionError",
    "TrailingDataError",
    "NestingDepthError",
    "LuaCompileError",
]
