"""
Settings schema (``pacioli_config.schema``).

Frozen dataclasses describing the runtime settings of the tooling that
surrounds the journal entry core. The core itself takes no settings:
nothing here can relax a journal invariant.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LogFormat(str, Enum):
    """Log output format."""

    JSON = "json"
    PLAIN = "plain"


@dataclass(frozen=True)
class PacioliSettings:
    """
    Runtime settings.

    Attributes:
        log_level: Standard library level name (``DEBUG``, ``INFO``, ...).
        log_format: ``json`` for StructuredFormatter, ``plain`` for text.
        date_format: strptime format for payload dates; ``None`` means ISO 8601.
        max_lines_per_side: Upper bound on lines per side accepted by the
            payload mapper; ``None`` means unbounded.
    """

    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.JSON
    date_format: str | None = None
    max_lines_per_side: int | None = None
