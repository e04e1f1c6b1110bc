"""Compile Lua 5.1 source into a precompiled chunk through ``lupa``.

``lupa`` ships several embedded Lua runtimes; only the 5.1 one produces
chunks the decoder accepts, so the helper imports :mod:`lupa.lua51`
explicitly.
"""

from __future__ import annotations

import logging
from typing import Union

from .exceptions import LuaCompileError

try:  # pragma: no cover - optional dependency
    from lupa.lua51 import LuaError, LuaRuntime
except ImportError:  # pragma: no cover - lupa missing or built without Lua 5.1
    LuaRuntime = None  # type: ignore[assignment,misc]
    LuaError = Exception  # type: ignore[assignment,misc]

LOG = logging.getLogger(__name__)

_DUMP_FUNCTION = b"""
function(source, chunkname)
  local fn, err = loadstring(source, chunkname)
  if not fn then
    error(err, 0)
  end
  return string.dump(fn)
end
"""

__all__ = ["compile_source", "is_available"]


def is_available() -> bool:
    return LuaRuntime is not None


def _as_bytes(value: Union[str, bytes]) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def compile_source(source: Union[str, bytes], chunkname: Union[str, bytes] = "=stdin") -> bytes:
    """Return the ``string.dump`` output for ``source``.

    ``chunkname`` follows Lua conventions: ``@file.lua`` names a file and
    ``=name`` is used verbatim in messages.  It becomes the ``source`` field
    of the decoded top-level prototype.
    """

    if not is_available():
        raise LuaCompileError(
            "lupa with an embedded Lua 5.1 runtime is required; install lupa>=2.0"
        )
    runtime = LuaRuntime(encoding=None, register_eval=False)
    dump = runtime.eval(_DUMP_FUNCTION)
    try:
        chunk = dump(_as_bytes(source), _as_bytes(chunkname))
    except LuaError as exc:
        message = exc.args[0] if exc.args else exc
        if isinstance(message, bytes):
            message = message.decode("utf-8", errors="replace")
        raise LuaCompileError(f"failed to compile {chunkname!r}: {message}") from exc
    LOG.debug("compiled %r into %d bytes", chunkname, len(chunk))
    return bytes(chunk)
