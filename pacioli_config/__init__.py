"""
pacioli_config -- settings for the tooling around the journal core.

Responsibility:
    Provides ``load_settings()``, the single way to obtain settings, and
    ``apply_logging()`` to configure the pacioli_kernel logger hierarchy
    from them.

Architecture position:
    Configuration -- sits above ``pacioli_kernel``. The kernel domain never
    imports from ``pacioli_config``; settings only shape the payload
    mapper and command line tooling.

Failure modes:
    - ``FileNotFoundError`` -- an explicit path (or ``PACIOLI_CONFIG``)
      names a file that does not exist.
    - ``OSError`` -- the path exists but cannot be read (a directory, no
      permission).
    - ``ConfigurationError`` -- malformed or non-UTF-8 YAML, unknown keys,
      bad values.
"""

from __future__ import annotations

import os
from pathlib import Path

from pacioli_config.loader import level_number, load_yaml_file, parse_settings
from pacioli_config.schema import LogFormat, PacioliSettings
from pacioli_kernel.logging_config import configure_logging, get_logger

CONFIG_ENV_VAR = "PACIOLI_CONFIG"

_logger = get_logger("config")


def load_settings(path: Path | str | None = None) -> PacioliSettings:
    """
    Load settings from ``path``, else from ``$PACIOLI_CONFIG``, else defaults.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return PacioliSettings()
        path = env_path

    settings = parse_settings(load_yaml_file(Path(path)))
    _logger.debug(
        "settings_loaded",
        extra={"config_path": str(path), "log_level": settings.log_level},
    )
    return settings


def apply_logging(settings: PacioliSettings) -> None:
    """Configure pacioli_kernel logging from settings (idempotent)."""
    configure_logging(
        level=level_number(settings),
        structured=settings.log_format is LogFormat.JSON,
    )


__all__ = [
    "CONFIG_ENV_VAR",
    "LogFormat",
    "PacioliSettings",
    "apply_logging",
    "load_settings",
]
