"""
Pure domain layer.

This module contains the journal entry model with NO dependencies on:
- Persistence
- Time/clock
- Logging
- I/O

All domain objects are immutable and deterministic.
"""

from pacioli_kernel.domain.account import Account, NormalBalance
from pacioli_kernel.domain.journal import (
    JournalEntry,
    build_journal_entry,
    is_sentinel_date,
)
from pacioli_kernel.domain.lines import (
    CreditLine,
    DebitLine,
    JournalEntryLine,
    LineSide,
)
from pacioli_kernel.domain.results import JournalEntryResult, ValidationError

__all__ = [
    # Value objects
    "Account",
    "NormalBalance",
    # Lines
    "JournalEntryLine",
    "DebitLine",
    "CreditLine",
    "LineSide",
    # Entry
    "JournalEntry",
    "build_journal_entry",
    "is_sentinel_date",
    # Results
    "JournalEntryResult",
    "ValidationError",
]
