from __future__ import annotations

import json
import math
import sys

import pytest

from luac_undump import Boolean, FunctionPrototype, NestingDepthError, Nil, Number, String, undump
from luac_undump.cli import reporting
from luac_undump.cli.reporting import render_constant, render_json, render_text
from tests.fixtures.lua51_chunk_fixture import NESTED_CHUNK, REFERENCE_CHUNK, build_chunk, encode_function

REFERENCE_LISTING = """\
function <@wat.lua:0,0> (4 instructions)
  0 params, 0 upvalues, vararg 2, 2 slots
  code (4):
    [1] 0x00000001  ; line 1
    [2] 0x00004041  ; line 1
    [3] 0x0180001e  ; line 1
    [4] 0x0080001e  ; line 1
  constants (2):
    [0] number 42.0
    [1] string "hello"
  locals (0):
  upvalues (0):
  functions (0):
"""


def test_render_text_reference_listing() -> None:
    assert render_text(undump(REFERENCE_CHUNK)) == REFERENCE_LISTING


def test_render_text_indents_nested_functions() -> None:
    listing = render_text(undump(NESTED_CHUNK), indent=4)
    lines = listing.splitlines()
    assert lines[0] == "function <@nested.lua:0,0> (3 instructions)"
    assert "        [0] a 2-4" in lines
    assert "    functions (1):" in lines
    assert "        function <:2,4> (2 instructions)" in lines
    assert "                [0] a" in lines


def test_render_constant_variants() -> None:
    assert render_constant(Nil()) == "nil"
    assert render_constant(Boolean(True)) == "true"
    assert render_constant(Boolean(False)) == "false"
    assert render_constant(Number(0.25)) == "0.25"
    assert render_constant(String('say "hi"')) == '"say \\"hi\\""'


def test_render_json_round_trips_as_dict() -> None:
    proto = undump(NESTED_CHUNK)
    assert json.loads(render_json(proto)) == proto.as_dict()
    assert "\n" not in render_json(proto, indent=0).rstrip("\n")


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


def test_render_json_is_strict_for_non_finite_numbers() -> None:
    data = build_chunk(
        encode_function(constants=[("number", math.nan), ("number", math.inf), ("number", -math.inf)])
    )
    payload = json.loads(render_json(undump(data)), parse_constant=_reject_constant)
    assert [constant["value"] for constant in payload["constants"]] == ["nan", "inf", "-inf"]


def test_render_json_encoder_recursion_is_a_decode_error(monkeypatch) -> None:
    def _too_deep(*args, **kwargs):
        raise RecursionError("maximum recursion depth exceeded while encoding a JSON object")

    monkeypatch.setattr(reporting.json, "dumps", _too_deep)
    with pytest.raises(NestingDepthError, match="too deep to encode as JSON"):
        render_json(undump(REFERENCE_CHUNK))


def test_render_text_beyond_recursion_limit_is_a_decode_error() -> None:
    proto = FunctionPrototype("leaf", 0, 0, 0, 0, 0, 2)
    for _ in range(sys.getrecursionlimit() + 100):
        proto = FunctionPrototype("=deep", 0, 0, 0, 0, 0, 2, funs=(proto,))
    with pytest.raises(NestingDepthError, match="too deep to render"):
        render_text(proto)
