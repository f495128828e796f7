"""
Payload mapping -- raw request data to and from JournalEntry.

Responsibility:
    Translates the plain mapping an API or import layer receives into the
    JournalEntry constructor arguments, and renders a valid entry back into
    the same shape. This is the outermost layer of the kernel and the only
    one that logs.

Payload shape:
    {
        "date": "2020-02-15",                # ISO 8601 date or datetime
        "description": "Cash sale",          # optional
        "debits":  [{"account": {"name": "Cash", "normal_balance": "debit"},
                     "amount": "100.00"}],
        "credits": [{"account": {"name": "Revenue", "normal_balance": "credit"},
                     "amount": "-100.00"}]
    }

    Credit amounts follow the kernel convention and are negative.
    Amounts must be strings, integers or Decimals; floats are refused.

Failure modes:
    - PayloadError for missing keys, malformed dates, unknown normal
      balances, non-decimal amounts, or too many lines on a side.
    - Any JournalEntryError from construction propagates unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pacioli_kernel.domain.account import Account, NormalBalance
from pacioli_kernel.domain.journal import JournalEntry
from pacioli_kernel.domain.lines import CreditLine, DebitLine, JournalEntryLine, to_decimal
from pacioli_kernel.exceptions import JournalEntryError, PayloadError
from pacioli_kernel.logging_config import get_logger

logger = get_logger("mapping")


def parse_entry_date(value: Any, date_format: str | None = None) -> date:
    """
    Parse an entry date from a payload value.

    Dates and datetimes pass through unchanged. Strings are parsed with
    ``date_format`` when given, else as ISO 8601; a string carrying a time
    component becomes a datetime, otherwise a date.
    """
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise PayloadError("date", f"expected a date string, got {type(value).__name__}")
    text = value.strip()
    try:
        if date_format is not None:
            return datetime.strptime(text, date_format)
        if "T" in text or " " in text:
            return datetime.fromisoformat(text)
        return date.fromisoformat(text)
    except ValueError as e:
        raise PayloadError("date", f"cannot parse {value!r}") from e


def parse_account(data: Any, field: str) -> Account:
    if not isinstance(data, Mapping):
        raise PayloadError(field, "account must be a mapping with name and normal_balance")
    try:
        name = data["name"]
        balance = data["normal_balance"]
    except KeyError as e:
        raise PayloadError(f"{field}.{e.args[0]}", "missing") from e
    if not isinstance(name, str):
        raise PayloadError(f"{field}.name", "must be a string")
    try:
        normal_balance = NormalBalance(str(balance).lower())
    except ValueError as e:
        raise PayloadError(
            f"{field}.normal_balance", f"must be 'debit' or 'credit', got {balance!r}"
        ) from e
    return Account(name=name, normal_balance=normal_balance)


def _parse_amount(value: Any, field: str) -> Decimal:
    if isinstance(value, float):
        raise PayloadError(field, "floats are not accepted; pass the amount as a string")
    try:
        return to_decimal(value)
    except TypeError as e:
        raise PayloadError(field, str(e)) from e


def _parse_lines(
    payload: Mapping[str, Any],
    side: str,
    line_type: type[JournalEntryLine],
    max_lines: int | None,
) -> list[JournalEntryLine] | None:
    if side not in payload:
        raise PayloadError(side, "missing")
    raw = payload[side]
    # None flows through so the entry reports the absent collection itself.
    if raw is None:
        return None
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise PayloadError(side, "must be a list of lines")
    if max_lines is not None and len(raw) > max_lines:
        raise PayloadError(side, f"{len(raw)} lines exceeds the limit of {max_lines}")

    lines: list[JournalEntryLine] = []
    for index, item in enumerate(raw):
        field = f"{side}[{index}]"
        if not isinstance(item, Mapping):
            raise PayloadError(field, "line must be a mapping with account and amount")
        if "account" not in item:
            raise PayloadError(f"{field}.account", "missing")
        if "amount" not in item:
            raise PayloadError(f"{field}.amount", "missing")
        account = parse_account(item["account"], f"{field}.account")
        amount = _parse_amount(item["amount"], f"{field}.amount")
        lines.append(line_type(account, amount))
    return lines


def entry_from_payload(
    payload: Mapping[str, Any],
    *,
    date_format: str | None = None,
    max_lines_per_side: int | None = None,
) -> JournalEntry:
    """
    Map raw request data into a validated JournalEntry.

    Raises:
        PayloadError: the data does not have the payload shape.
        JournalEntryError: the data is well formed but violates an entry
            invariant.
    """
    try:
        if not isinstance(payload, Mapping):
            raise PayloadError("<root>", "payload must be a mapping")
        if "date" not in payload:
            raise PayloadError("date", "missing")
        entry_date = parse_entry_date(payload["date"], date_format)
        description = payload.get("description")
        if description is not None and not isinstance(description, str):
            raise PayloadError("description", "must be a string")
        debits = _parse_lines(payload, "debits", DebitLine, max_lines_per_side)
        credits = _parse_lines(payload, "credits", CreditLine, max_lines_per_side)
        entry = JournalEntry(entry_date, debits, credits, description)
    except (PayloadError, JournalEntryError) as e:
        logger.info(
            "journal_entry_rejected",
            extra={"error_code": e.code, "error_message": str(e)},
        )
        raise

    logger.debug(
        "journal_entry_mapped",
        extra={
            "entry_date": entry.date,
            "debit_lines": len(entry.debits),
            "credit_lines": len(entry.credits),
            "total_debits": entry.total_debits,
        },
    )
    return entry


def _line_to_payload(line: JournalEntryLine) -> dict[str, Any]:
    return {
        "account": {
            "name": line.account.name,
            "normal_balance": line.account.normal_balance.value,
        },
        "amount": str(line.amount),
    }


def entry_to_payload(entry: JournalEntry, *, date_format: str | None = None) -> dict[str, Any]:
    """
    Render a valid entry in the payload shape accepted by entry_from_payload.

    The date is written with ``date_format`` when given, else as ISO 8601,
    so output read back with the same format yields the same date.
    """
    if date_format is not None:
        rendered_date = entry.date.strftime(date_format)
    else:
        rendered_date = entry.date.isoformat()
    payload: dict[str, Any] = {"date": rendered_date}
    if entry.description is not None:
        payload["description"] = entry.description
    payload["debits"] = [_line_to_payload(line) for line in entry.debits]
    payload["credits"] = [_line_to_payload(line) for line in entry.credits]
    return payload
