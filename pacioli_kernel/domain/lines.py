"""
Journal entry lines -- side-typed amount records.

Responsibility:
    Pairs an Account with a Decimal amount. The concrete class of a line
    (DebitLine or CreditLine) is the line's side, so a line can never
    change sides after an entry has validated it.

Architecture position:
    Kernel > Domain -- pure value objects, zero I/O.

Sign convention:
    Debit amounts are the debit-side contribution; credit amounts are
    stored negated. A balanced entry therefore sums to exactly zero over
    all of its lines.

Failure modes:
    - TypeError when an amount is a float or not numeric at all
    - TypeError when the account is not an Account
"""

from __future__ import annotations

from abc import ABC
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Decimal,
    Inexact,
    InvalidOperation,
    localcontext,
)
from enum import Enum
from typing import ClassVar

from pacioli_kernel.domain.account import Account


class LineSide(str, Enum):
    """Which side of the entry a line belongs to."""

    DEBIT = "debit"
    CREDIT = "credit"


def to_decimal(value: Decimal | int | str, name: str = "amount") -> Decimal:
    """
    Coerce a line amount to Decimal.

    Floats are refused outright: binary floating point cannot represent
    most currency amounts exactly.
    """
    if isinstance(value, (bool, float)) or not isinstance(value, (Decimal, int, str)):
        raise TypeError(f"{name} must be Decimal, int or str, not {type(value).__name__}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(value)
    except InvalidOperation as e:
        raise TypeError(f"{name} is not a decimal number: {value!r}") from e
    if not result.is_finite():
        raise TypeError(f"{name} must be finite, got {value!r}")
    return result


def exact_sum(amounts: Iterable[Decimal]) -> Decimal:
    """
    Sum Decimals without rounding, whatever the caller's decimal context.

    The ambient context keeps 28 significant digits; here precision and
    exponent range are widened to their maximum and Inexact is trapped, so
    a result that cannot be represented exactly raises instead of rounding.
    """
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        ctx.traps[Inexact] = True
        return sum(amounts, Decimal("0"))


@dataclass(frozen=True, slots=True)
class JournalEntryLine(ABC):
    """
    Read-only (account, amount) pair on one side of a journal entry.

    Contract:
        Abstract -- instantiate DebitLine or CreditLine. No invariant holds
        for a line in isolation (a zero amount is accepted); all cross-line
        rules belong to JournalEntry.

    Guarantees:
        - Immutable (frozen dataclass with slots)
        - amount is always a Decimal
        - Lines of different sides never compare equal
    """

    side: ClassVar[LineSide]

    account: Account
    amount: Decimal

    def __new__(cls, *args, **kwargs):
        if cls is JournalEntryLine:
            raise TypeError("JournalEntryLine is abstract; use DebitLine or CreditLine")
        return object.__new__(cls)

    def __post_init__(self) -> None:
        if not isinstance(self.account, Account):
            raise TypeError(f"account must be an Account, not {type(self.account).__name__}")
        object.__setattr__(self, "amount", to_decimal(self.amount))


@dataclass(frozen=True, slots=True)
class DebitLine(JournalEntryLine):
    """A line on the debit side."""

    side: ClassVar[LineSide] = LineSide.DEBIT


@dataclass(frozen=True, slots=True)
class CreditLine(JournalEntryLine):
    """A line on the credit side; amount is stored negated."""

    side: ClassVar[LineSide] = LineSide.CREDIT
