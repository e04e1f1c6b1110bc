#!/usr/bin/env python3
"""Compat shim that forwards to :mod:`luac_undump.cli`.

Allows ``python main.py luac.out`` from a source checkout without installing
the package; the installed ``luac-undump`` script and ``python -m luac_undump``
share the same code path.
"""

from __future__ import annotations

import sys

from luac_undump import cli as _cli


def main(argv: list[str] | None = None) -> int:
    """Entry point for ``python main.py``.

    Parameters
    ----------
    argv:
        Optional argument vector.  When ``None`` the wrapper forwards the
        current ``sys.argv[1:]`` to :func:`luac_undump.cli.main`.
    """

    return _cli.main(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":  # pragma: no cover - thin CLI shim
    raise SystemExit(main())
