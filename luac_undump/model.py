"""Immutable records describing a decoded Lua 5.1 chunk."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar, Dict, Iterator, List, Tuple, Union


class ConstantType(IntEnum):
    """Wire tags of constant pool entries."""

    NIL = 0
    BOOLEAN = 1
    NUMBER = 3
    STRING = 4


@dataclass(frozen=True)
class Nil:
    tag: ClassVar[ConstantType] = ConstantType.NIL

    def as_dict(self) -> Dict[str, Any]:
        return {"type": "nil", "value": None}


@dataclass(frozen=True)
class Boolean:
    value: bool
    tag: ClassVar[ConstantType] = ConstantType.BOOLEAN

    def as_dict(self) -> Dict[str, Any]:
        return {"type": "boolean", "value": self.value}


@dataclass(frozen=True)
class Number:
    value: float
    tag: ClassVar[ConstantType] = ConstantType.NUMBER

    def as_dict(self) -> Dict[str, Any]:
        # JSON has no NaN or infinity; those are spelled "nan", "inf", "-inf".
        value: Any = self.value if math.isfinite(self.value) else repr(self.value)
        return {"type": "number", "value": value}


@dataclass(frozen=True)
class String:
    value: str
    tag: ClassVar[ConstantType] = ConstantType.STRING

    def as_dict(self) -> Dict[str, Any]:
        return {"type": "string", "value": self.value}


Constant = Union[Nil, Boolean, Number, String]


@dataclass(frozen=True)
class LocalVariableInfo:
    """Debug record for a local variable and its live instruction range."""

    varname: str
    startpc: int
    endpc: int

    def as_dict(self) -> Dict[str, Any]:
        return {"varname": self.varname, "startpc": self.startpc, "endpc": self.endpc}


@dataclass(frozen=True)
class FunctionPrototype:
    """One compiled function, owning its nested prototypes.

    The top-level chunk is itself a prototype.  Sequence fields are tuples in
    wire order; ``lineinfo`` is kept as read and is not required to match
    ``code`` in length.
    """

    source: str
    line_defined: int
    last_line_defined: int
    nups: int
    num_params: int
    is_vararg: int
    maxstacksize: int
    code: Tuple[int, ...] = field(default_factory=tuple)
    constants: Tuple[Constant, ...] = field(default_factory=tuple)
    funs: Tuple["FunctionPrototype", ...] = field(default_factory=tuple)
    lineinfo: Tuple[int, ...] = field(default_factory=tuple)
    locvars: Tuple[LocalVariableInfo, ...] = field(default_factory=tuple)
    upvalues: Tuple[str, ...] = field(default_factory=tuple)

    def walk(self) -> Iterator["FunctionPrototype"]:
        """Yield this prototype and every nested prototype in pre-order."""

        stack = [self]
        while stack:
            proto = stack.pop()
            yield proto
            stack.extend(reversed(proto.funs))

    def _fields_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "line_defined": self.line_defined,
            "last_line_defined": self.last_line_defined,
            "nups": self.nups,
            "num_params": self.num_params,
            "is_vararg": self.is_vararg,
            "maxstacksize": self.maxstacksize,
            "code": list(self.code),
            "constants": [constant.as_dict() for constant in self.constants],
            "funs": [],
            "lineinfo": list(self.lineinfo),
            "locvars": [local.as_dict() for local in self.locvars],
            "upvalues": list(self.upvalues),
        }

    def as_dict(self) -> Dict[str, Any]:
        """Return the tree as nested dicts, built without recursion."""

        pending: List[Tuple["FunctionPrototype", bool]] = [(self, False)]
        built: List[Dict[str, Any]] = []
        while pending:
            proto, children_done = pending.pop()
            if not children_done:
                pending.append((proto, True))
                pending.extend((child, False) for child in reversed(proto.funs))
                continue
            node = proto._fields_dict()
            split = len(built) - len(proto.funs)
            node["funs"] = built[split:]
            del built[split:]
            built.append(node)
        return built[0]


__all__ = [
    "ConstantType",
    "Nil",
    "Boolean",
    "Number",
    "String",
    "Constant",
    "LocalVariableInfo",
    "FunctionPrototype",
]
