"""
Result values for non-raising journal entry construction.

Pure data, no behaviour beyond the factories. A failed result carries a
ValidationError built from the typed exception, so a caller that prefers
explicit error values sees the same code, field and structured details an
exception handler would.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pacioli_kernel.exceptions import InvalidArgumentError, JournalEntryError

if TYPE_CHECKING:
    from pacioli_kernel.domain.journal import JournalEntry


@dataclass(frozen=True)
class ValidationError:
    """
    A single validation error.

    Contract:
        Carries a machine-readable code, human-readable message, the name of
        the offending argument, and optional details.
    """

    code: str
    message: str
    field: str | None = None
    details: dict[str, Any] | None = None

    @classmethod
    def from_exception(cls, error: JournalEntryError) -> ValidationError:
        details: dict[str, Any] = {
            k: v
            for k, v in vars(error).items()
            if not k.startswith("_") and k != "argument"
        }
        if isinstance(error, InvalidArgumentError) and error.invariant is not None:
            details["invariant"] = error.invariant.value
        return cls(
            code=error.code,
            message=str(error),
            field=error.argument,
            details=details or None,
        )


@dataclass(frozen=True)
class JournalEntryResult:
    """
    Outcome of build_journal_entry().

    Contract:
        Either contains an entry OR an error, never both.
    """

    entry: JournalEntry | None
    error: ValidationError | None = None

    @classmethod
    def success(cls, entry: JournalEntry) -> JournalEntryResult:
        return cls(entry=entry)

    @classmethod
    def from_error(cls, error: JournalEntryError) -> JournalEntryResult:
        return cls(entry=None, error=ValidationError.from_exception(error))

    @property
    def is_valid(self) -> bool:
        return self.entry is not None

    def __bool__(self) -> bool:
        return self.is_valid
