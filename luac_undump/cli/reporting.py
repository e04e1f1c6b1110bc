"""Render decoded prototypes for the command line front-end."""

from __future__ import annotations

import json
from typing import List

from ..exceptions import NestingDepthError
from ..model import Boolean, Constant, FunctionPrototype, Nil, Number, String

__all__ = ["render_constant", "render_json", "render_text"]


def render_constant(constant: Constant) -> str:
    if isinstance(constant, Nil):
        return "nil"
    if isinstance(constant, Boolean):
        return "true" if constant.value else "false"
    if isinstance(constant, Number):
        return repr(constant.value)
    if isinstance(constant, String):
        return json.dumps(constant.value, ensure_ascii=False)
    raise TypeError(f"unsupported constant {constant!r}")


def _render_function(proto: FunctionPrototype, depth: int, indent: int, lines: List[str]) -> None:
    pad = " " * (indent * depth)
    inner = " " * (indent * (depth + 1))
    item = " " * (indent * (depth + 2))

    lines.append(
        f"{pad}function <{proto.source}:{proto.line_defined},{proto.last_line_defined}>"
        f" ({len(proto.code)} instructions)"
    )
    lines.append(
        f"{inner}{proto.num_params} params, {proto.nups} upvalues,"
        f" vararg {proto.is_vararg}, {proto.maxstacksize} slots"
    )

    lines.append(f"{inner}code ({len(proto.code)}):")
    for pc, instruction in enumerate(proto.code):
        entry = f"{item}[{pc + 1}] 0x{instruction:08x}"
        if pc < len(proto.lineinfo):
            entry += f"  ; line {proto.lineinfo[pc]}"
        lines.append(entry)

    lines.append(f"{inner}constants ({len(proto.constants)}):")
    for index, constant in enumerate(proto.constants):
        lines.append(f"{item}[{index}] {constant.tag.name.lower()} {render_constant(constant)}")

    lines.append(f"{inner}locals ({len(proto.locvars)}):")
    for index, local in enumerate(proto.locvars):
        lines.append(f"{item}[{index}] {local.varname} {local.startpc + 1}-{local.endpc + 1}")

    lines.append(f"{inner}upvalues ({len(proto.upvalues)}):")
    for index, name in enumerate(proto.upvalues):
        lines.append(f"{item}[{index}] {name}")

    lines.append(f"{inner}functions ({len(proto.funs)}):")
    for child in proto.funs:
        _render_function(child, depth + 2, indent, lines)


def render_text(proto: FunctionPrototype, *, indent: int = 2) -> str:
    """Return an indented listing of ``proto`` and its nested functions.

    Instruction numbers and local ranges are shown 1-based, as ``luac -l``
    prints them.
    """

    lines: List[str] = []
    try:
        _render_function(proto, 0, indent, lines)
    except RecursionError:
        raise NestingDepthError("nested functions too deep to render") from None
    return "\n".join(lines) + "\n"


def render_json(proto: FunctionPrototype, *, indent: int = 2) -> str:
    """Serialize ``proto.as_dict()`` as strict JSON.

    Trees nested deeper than the encoder can follow raise
    :class:`~luac_undump.exceptions.NestingDepthError`.
    """

    try:
        text = json.dumps(proto.as_dict(), ensure_ascii=False, allow_nan=False, indent=indent or None)
    except RecursionError:
        raise NestingDepthError("nested functions too deep to encode as JSON") from None
    return text + "\n"
