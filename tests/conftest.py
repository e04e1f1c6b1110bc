"""Test configuration ensuring the project source tree is importable."""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
TESTS = ROOT / "tests"

root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)
else:
    idx = sys.path.index(root_str)
    if idx != 0:
        sys.path.insert(0, sys.path.pop(idx))

# Import the project package eagerly so subsequent imports reuse it
importlib.import_module("luac_undump")


@pytest.fixture
def chunk_path(tmp_path: Path):
    """Return a helper writing chunk bytes to a temporary file."""

    def _write(data: bytes, name: str = "luac.out") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo handler changes made by ``configure_logging`` during a test."""

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
