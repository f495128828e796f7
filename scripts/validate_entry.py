#!/usr/bin/env python3
"""
Validate a journal entry payload file.

Usage:
    python scripts/validate_entry.py entry.yaml [--config settings.yaml]
        [--correlation-id ID] [--quiet]

Reads a YAML or JSON journal entry payload (see pacioli_kernel.mapping),
builds the entry, and prints a JSON verdict on stdout:

    {"valid": true, "entry": {...}}
    {"valid": false, "code": "UNBALANCED_ENTRY", "message": "...", "field": "credits"}

Exit status is 0 for a valid entry, 1 for a rejected one, 2 for a file or
settings problem. YAML amounts must be quoted; JSON numbers are read as
Decimal.
"""

import argparse
import json
import sys
from decimal import Decimal
from pathlib import Path

_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import yaml

from pacioli_config import apply_logging, load_settings
from pacioli_kernel.exceptions import ConfigurationError, JournalEntryError, PayloadError
from pacioli_kernel.logging_config import LogContext, get_logger
from pacioli_kernel.mapping import entry_from_payload, entry_to_payload

logger = get_logger("cli.validate_entry")


def load_payload(path: Path) -> object:
    """Load a payload file; ``.json`` as JSON with Decimal floats, else YAML."""
    with open(path, encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            return json.load(f, parse_float=Decimal)
        return yaml.safe_load(f)


def _rejection(error: PayloadError | JournalEntryError) -> dict:
    field = error.field if isinstance(error, PayloadError) else error.argument
    return {"valid": False, "code": error.code, "message": str(error), "field": field}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Validate a double-entry journal entry payload (YAML or JSON)."
    )
    parser.add_argument("payload", type=Path, help="Path to the journal entry payload file")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Settings YAML (default: $PACIOLI_CONFIG, else built-in defaults)",
    )
    parser.add_argument(
        "--correlation-id",
        default=None,
        help="Id added to every log record of this run",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Print nothing; report the verdict through the exit status only",
    )
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except (OSError, ConfigurationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    apply_logging(settings)

    try:
        payload = load_payload(args.payload)
    except FileNotFoundError:
        print(f"Error: file not found: {args.payload}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Error: cannot read {args.payload}: {e}", file=sys.stderr)
        return 2
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
        print(f"Error: cannot parse {args.payload}: {e}", file=sys.stderr)
        return 2

    with LogContext.bind(
        correlation_id=args.correlation_id, entry_ref=args.payload.name
    ):
        try:
            entry = entry_from_payload(
                payload,
                date_format=settings.date_format,
                max_lines_per_side=settings.max_lines_per_side,
            )
        except (PayloadError, JournalEntryError) as e:
            verdict = _rejection(e)
            status = 1
        else:
            logger.info("journal_entry_valid", extra={"lines": len(entry.lines)})
            rendered = entry_to_payload(entry, date_format=settings.date_format)
            verdict = {"valid": True, "entry": rendered}
            status = 0

    if not args.quiet:
        print(json.dumps(verdict, indent=2))
    return status


if __name__ == "__main__":
    sys.exit(main())
