"""
Settings Loader (``pacioli_config.loader``).

Responsibility
--------------
Loads a YAML settings file and parses it into a frozen
``PacioliSettings``.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML or non-UTF-8 bytes  -> ``ConfigurationError``.
* Unknown keys or invalid values  -> ``ConfigurationError``.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from pacioli_config.schema import LogFormat, PacioliSettings
from pacioli_kernel.exceptions import ConfigurationError

_KNOWN_KEYS = frozenset(f.name for f in fields(PacioliSettings))
_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        ConfigurationError: if the file is not UTF-8 YAML or not a mapping.
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except UnicodeDecodeError as e:
            raise ConfigurationError(str(path), f"not UTF-8 text: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(str(path), f"malformed YAML: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(str(path), "top level must be a mapping")
    return data


def parse_settings(data: dict[str, Any]) -> PacioliSettings:
    """Parse PacioliSettings from a dict, rejecting unknown keys."""
    # Allow the settings to live under a top-level "pacioli" key.
    if set(data) == {"pacioli"} and isinstance(data["pacioli"], dict):
        data = data["pacioli"]

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(unknown[0], "unknown setting")

    kwargs: dict[str, Any] = {}

    if "log_level" in data:
        level = str(data["log_level"]).upper()
        if level not in _LEVEL_NAMES:
            raise ConfigurationError("log_level", f"must be one of {', '.join(_LEVEL_NAMES)}")
        kwargs["log_level"] = level

    if "log_format" in data:
        try:
            kwargs["log_format"] = LogFormat(str(data["log_format"]).lower())
        except ValueError as e:
            raise ConfigurationError("log_format", "must be 'json' or 'plain'") from e

    if data.get("date_format") is not None:
        if not isinstance(data["date_format"], str) or "%" not in data["date_format"]:
            raise ConfigurationError("date_format", "must be a strptime format string")
        kwargs["date_format"] = data["date_format"]

    if data.get("max_lines_per_side") is not None:
        value = data["max_lines_per_side"]
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigurationError("max_lines_per_side", "must be a positive integer")
        kwargs["max_lines_per_side"] = value

    return PacioliSettings(**kwargs)


def level_number(settings: PacioliSettings) -> int:
    """Translate the configured level name into a logging level."""
    return logging.getLevelNamesMapping()[settings.log_level]
