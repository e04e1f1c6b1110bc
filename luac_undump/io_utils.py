"""Filesystem helpers for reading chunks and emitting reports."""

from __future__ import annotations

import os
import tempfile
from typing import Callable, TextIO

__all__ = [
    "read_chunk",
    "write_text",
]


def _as_fs_path(path: str | os.PathLike[str]) -> str:
    return os.fspath(path)


def _ensure_directory(path: str) -> str:
    directory = os.path.dirname(path)
    if not directory:
        directory = "."
    os.makedirs(directory, exist_ok=True)
    return directory


def _atomic_write_text(
    path: str | os.PathLike[str],
    writer: Callable[[TextIO], None],
    *,
    encoding: str = "utf-8",
) -> None:
    target = _as_fs_path(path)
    directory = _ensure_directory(target)
    fd, temp_path = tempfile.mkstemp(prefix=".tmp-", suffix=".partial", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding=encoding) as handle:
            writer(handle)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_path, target)
    except Exception:
        try:
            os.unlink(temp_path)
        except FileNotFoundError:
            pass
        raise


def read_chunk(path: str | os.PathLike[str]) -> bytes:
    """Return the full contents of ``path``."""

    with open(_as_fs_path(path), "rb") as handle:
        return handle.read()


def write_text(
    path: str | os.PathLike[str],
    content: str,
    *,
    encoding: str = "utf-8",
) -> None:
    """Atomically replace ``path`` with ``content``."""

    def _writer(handle: TextIO) -> None:
        handle.write(content)

    _atomic_write_text(path, _writer, encoding=encoding)
