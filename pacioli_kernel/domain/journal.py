"""
JournalEntry -- Validated, immutable double-entry aggregate.

Responsibility:
    Accepts a date, an optional description and the two line collections,
    and either produces a fully valid entry or rejects the input with a
    typed error naming the failed check.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O, no logging.
    Depends on account, lines and pacioli_kernel.exceptions only.

Invariants enforced (checked in this order):
    1. debits / credits present        -> NullArgumentError
    2. DATED -- real date              -> InvalidDateError
    3. TWO_SIDED -- both sides filled  -> EmptyCollectionError
    4. TWO_SIDED -- lines on own side  -> LineSideMismatchError
    5. SIDE_EXCLUSIVE                  -> NonExclusiveAccountError
    6. ZERO_SUM -- exact Decimal       -> UnbalancedEntryError
    7. FROZEN -- tuple copies of the caller's collections

Failure modes:
    Construction either returns a valid entry or raises; no partially
    built entry is ever observable. build_journal_entry() reports the same
    failures as a JournalEntryResult instead of raising.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from pacioli_kernel.domain.account import Account
from pacioli_kernel.domain.lines import (
    CreditLine,
    DebitLine,
    JournalEntryLine,
    exact_sum,
)
from pacioli_kernel.domain.results import JournalEntryResult
from pacioli_kernel.exceptions import (
    EmptyCollectionError,
    InvalidDateError,
    JournalEntryError,
    LineSideMismatchError,
    NonExclusiveAccountError,
    NullArgumentError,
    UnbalancedEntryError,
)

def is_sentinel_date(value: date) -> bool:
    """True for the minimum date (and midnight of it, for datetimes)."""
    if isinstance(value, datetime):
        return value.replace(tzinfo=None) == datetime.min
    return value == date.min


def _check_date(value: object) -> None:
    if not isinstance(value, date) or is_sentinel_date(value):
        raise InvalidDateError(value)


def _check_sides(
    argument: str,
    lines: tuple[JournalEntryLine, ...],
    line_type: type[JournalEntryLine],
) -> None:
    for index, line in enumerate(lines):
        if not isinstance(line, line_type):
            raise LineSideMismatchError(argument, index, type(line).__name__)


def _check_exclusive(
    debits: tuple[DebitLine, ...],
    credits: tuple[CreditLine, ...],
) -> None:
    debit_accounts = {line.account for line in debits}
    for line in credits:
        if line.account in debit_accounts:
            raise NonExclusiveAccountError(line.account)


def _check_balanced(
    debits: tuple[DebitLine, ...],
    credits: tuple[CreditLine, ...],
) -> None:
    debit_total = exact_sum(line.amount for line in debits)
    credit_total = exact_sum(line.amount for line in credits)
    variance = exact_sum((debit_total, credit_total))
    if variance != 0:
        raise UnbalancedEntryError(debit_total, credit_total, variance)


@dataclass(frozen=True)
class JournalEntry:
    """
    A balanced journal entry.

    Contract:
        Constructing a JournalEntry is the only way to create one and the
        only moment it changes. Once __init__ returns, every invariant in
        pacioli_kernel.invariants holds and keeps holding.

    Guarantees:
        - Immutable (frozen dataclass); debits and credits are tuples
          copied from the caller's collections
        - sum(debits) + sum(credits) == 0 exactly
        - No account appears on both sides
        - Equality is by value, including the accounts' values

    Non-goals:
        - Does NOT compute account balances across entries
        - Does NOT post, persist or convert currencies
    """

    date: date
    debits: tuple[DebitLine, ...]
    credits: tuple[CreditLine, ...]
    description: str | None = None

    def __post_init__(self) -> None:
        if self.debits is None:
            raise NullArgumentError("debits")
        if self.credits is None:
            raise NullArgumentError("credits")

        _check_date(self.date)

        # Copy first so a one-shot iterable or a concurrently mutated list
        # is read exactly once.
        debits = tuple(self.debits)
        credits = tuple(self.credits)
        if not debits:
            raise EmptyCollectionError("debits")
        if not credits:
            raise EmptyCollectionError("credits")

        _check_sides("debits", debits, DebitLine)
        _check_sides("credits", credits, CreditLine)
        _check_exclusive(debits, credits)
        _check_balanced(debits, credits)

        object.__setattr__(self, "debits", debits)
        object.__setattr__(self, "credits", credits)

    @property
    def lines(self) -> tuple[JournalEntryLine, ...]:
        """All lines, debits first."""
        return self.debits + self.credits

    @property
    def total_debits(self) -> Decimal:
        return exact_sum(line.amount for line in self.debits)

    @property
    def total_credits(self) -> Decimal:
        return exact_sum(line.amount for line in self.credits)

    @property
    def variance(self) -> Decimal:
        """Exact sum over all lines; zero for every constructed entry."""
        return exact_sum(line.amount for line in self.lines)

    @property
    def accounts(self) -> frozenset[Account]:
        return frozenset(line.account for line in self.lines)


def build_journal_entry(
    date: date,
    debits: Iterable[DebitLine] | None,
    credits: Iterable[CreditLine] | None,
    description: str | None = None,
) -> JournalEntryResult:
    """
    Non-raising factory for JournalEntry.

    Postconditions:
        - Returns a successful result holding the entry, or a failed result
          holding exactly one ValidationError for the first check that
          failed. Never both.
    """
    try:
        entry = JournalEntry(date, debits, credits, description)
    except JournalEntryError as e:
        return JournalEntryResult.from_error(e)
    return JournalEntryResult.success(entry)
