"""Command line entry point for decoding precompiled chunks."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .. import lua_compile
from ..config import OUTPUT_FORMATS, load_config, resolve_config
from ..exceptions import LuaCompileError, UndumpError
from ..io_utils import read_chunk, write_text
from ..logging_config import configure_logging
from ..undump import undump
from .reporting import render_json, render_text

LOG = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="luac-undump",
        description="Decode a precompiled Lua 5.1 chunk and print its function tree",
    )
    parser.add_argument("filename", help="chunk to decode (Lua source with --compile)")
    parser.add_argument("--format", dest="output_format", choices=OUTPUT_FORMATS, default=None)
    parser.add_argument("--indent", type=int, default=None, help="indentation width")
    parser.add_argument("-o", "--output", type=Path, default=None, help="write the report to a file")
    parser.add_argument(
        "--compile",
        action="store_true",
        help="treat FILENAME as Lua 5.1 source and compile it with lupa first",
    )
    parser.add_argument("--chunkname", default=None, help="chunk name used with --compile")
    parser.add_argument("--config", type=Path, default=None, help="JSON config file")
    parser.add_argument("--verbose", action="store_true", default=None, help="enable debug logging")
    parser.add_argument("--log-file", type=Path, default=None)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = resolve_config(
        load_config(args.config),
        {
            "output_format": args.output_format,
            "indent": args.indent,
            "verbose": args.verbose,
            "log_file": args.log_file,
        },
    )
    configure_logging(config.verbose, config.log_file)

    try:
        data = read_chunk(args.filename)
    except OSError as exc:
        parser.error(f"cannot read {args.filename}: {exc.strerror or exc}")

    try:
        if args.compile:
            chunkname = args.chunkname or f"@{args.filename}"
            data = lua_compile.compile_source(data, chunkname)
        proto = undump(data)
        LOG.info("decoded %s (%d bytes)", args.filename, len(data))
        if config.output_format == "json":
            report = render_json(proto, indent=config.indent)
        else:
            report = render_text(proto, indent=config.indent)
    except (UndumpError, LuaCompileError) as exc:
        LOG.debug("decoding %s failed", args.filename, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output is not None:
        write_text(args.output, report)
        LOG.info("wrote report to %s", args.output)
    else:
        sys.stdout.write(report)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI wrapper
    raise SystemExit(main())
