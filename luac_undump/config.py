"""Configuration for the command line front-end."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

LOGGER = logging.getLogger(__name__)

CONFIG_ENV_VAR = "LUAC_UNDUMP_CONFIG"
OUTPUT_FORMATS = ("text", "json")

__all__ = [
    "CONFIG_ENV_VAR",
    "OUTPUT_FORMATS",
    "CliConfig",
    "load_config",
    "resolve_config",
]


@dataclass(frozen=True)
class CliConfig:
    """Rendering and logging options for a CLI run."""

    output_format: str = "text"
    indent: int = 2
    verbose: bool = False
    log_file: Optional[Path] = None


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration overrides from a JSON file.

    ``path`` defaults to the file named by ``$LUAC_UNDUMP_CONFIG``.  A missing
    or malformed file yields an empty mapping.
    """

    if path is None:
        env_value = os.environ.get(CONFIG_ENV_VAR)
        if not env_value:
            return {}
        path = Path(env_value)

    try:
        with open(path, "r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError:
        LOGGER.warning("Config file %s not found, using defaults", path)
        return {}
    except (OSError, json.JSONDecodeError) as exc:
        LOGGER.warning("Invalid config file %s (%s), using defaults", path, exc)
        return {}

    if not isinstance(payload, dict):
        LOGGER.warning("Expected a JSON object in %s; got %s", path, type(payload).__name__)
        return {}
    return payload


def _coerce(overrides: Mapping[str, Any]) -> Dict[str, Any]:
    known = {item.name for item in fields(CliConfig)}
    values: Dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in known:
            LOGGER.warning("Ignoring unknown config key %r", key)
            continue
        if value is None:
            continue
        if key == "output_format" and value not in OUTPUT_FORMATS:
            LOGGER.warning("Ignoring unsupported output format %r", value)
            continue
        if key == "indent":
            try:
                value = max(0, int(value))
            except (TypeError, ValueError):
                LOGGER.warning("Ignoring non-integer indent %r", value)
                continue
        if key == "verbose":
            value = bool(value)
        if key == "log_file":
            value = Path(value)
        values[key] = value
    return values


def resolve_config(
    file_values: Mapping[str, Any],
    cli_values: Mapping[str, Any],
) -> CliConfig:
    """Merge defaults, config-file values and command line flags.

    Flags left unset on the command line (``None``) do not override the
    config file.
    """

    config = replace(CliConfig(), **_coerce(file_values))
    return replace(config, **_coerce(cli_values))
