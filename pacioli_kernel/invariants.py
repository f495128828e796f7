"""
Journal Entry Invariants Contract.

These invariants are structural law. They are hardcoded in the
JournalEntry construction boundary. No setting, payload mapping option,
or caller may override them.

This module exists to declare the invariants explicitly. The enforcement
lives in pacioli_kernel.domain.journal, and every rejection names the
invariant it protects (see pacioli_kernel.exceptions).
"""

from enum import Enum, unique


@unique
class JournalInvariant(str, Enum):
    """Non-configurable invariants enforced on every journal entry.

    Each value names one structural guarantee that a constructed
    JournalEntry provides unconditionally.
    """

    DATED = "dated"
    """The entry carries a real date, never None or the minimum sentinel."""

    TWO_SIDED = "two_sided"
    """Both the debit side and the credit side hold at least one line,
    and each line sits on the side its type declares."""

    SIDE_EXCLUSIVE = "side_exclusive"
    """No account (compared by value) appears on both sides."""

    ZERO_SUM = "zero_sum"
    """The exact Decimal sum of every debit and credit amount is zero."""

    FROZEN = "frozen"
    """Lines are copied at construction; the entry is never mutated."""


# All invariants as a frozenset for programmatic checks.
ALL_JOURNAL_INVARIANTS: frozenset[JournalInvariant] = frozenset(JournalInvariant)
