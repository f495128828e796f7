"""
Account -- Immutable ledger account value object.

Responsibility:
    Identifies a ledger account by name together with the side that
    increases its balance.

Architecture position:
    Kernel > Domain -- pure value object, zero I/O.

Invariants enforced:
    None on its own. Equality is structural so that the side-exclusivity
    check in JournalEntry compares accounts by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NormalBalance(str, Enum):
    """Normal balance side for an account."""

    DEBIT = "debit"
    CREDIT = "credit"


@dataclass(frozen=True, slots=True)
class Account:
    """
    A ledger account.

    Contract:
        Built by the caller before any entry references it; entries never
        create accounts. Two accounts with the same name and normal
        balance are interchangeable.

    Guarantees:
        - Immutable and hashable (frozen dataclass with slots)
        - Equality and hash over (name, normal_balance)

    Non-goals:
        - Does NOT validate the name (blank names are the caller's concern)
        - Does NOT track a balance
    """

    name: str
    normal_balance: NormalBalance

    def __str__(self) -> str:
        return self.name
