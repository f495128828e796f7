"""
Typed Exception Hierarchy for the Pacioli Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

A rejected journal entry must say precisely which rule it broke. Callers
(an API layer, an import script) translate these failures into their own
responses, and they must be able to do so without parsing message text:

  1. Every error has a TYPED exception class (catch by type, not message)
  2. Every exception has a CODE attribute (machine-readable, API-safe)
  3. Exceptions carry structured DATA (not just a message string)

Example:
    try:
        entry = JournalEntry(date, debits, credits)
    except UnbalancedEntryError as e:
        return {"error": e.code, "variance": str(e.variance)}
    except InvalidArgumentError as e:
        return {"error": e.code, "field": e.argument}

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

All exceptions inherit from PacioliError:

    PacioliError (base)
    |
    +-- JournalEntryError
    |   +-- NullArgumentError
    |   +-- InvalidArgumentError
    |       +-- EmptyCollectionError
    |       +-- InvalidDateError
    |       +-- NonExclusiveAccountError
    |       +-- UnbalancedEntryError
    |       +-- LineSideMismatchError
    |
    +-- PayloadError
    |
    +-- ConfigurationError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                   | When Raised
----------------|------------------------|-------------------------------------
Journal entry   | NULL_ARGUMENT          | debits or credits is None
                | EMPTY_COLLECTION       | debits or credits has no lines
                | INVALID_DATE           | date is None or the minimum sentinel
                | NON_EXCLUSIVE_ACCOUNT  | Account on both sides of the entry
                | UNBALANCED_ENTRY       | Line amounts do not sum to zero
                | LINE_SIDE_MISMATCH     | Credit line among debits (or reverse)
----------------|------------------------|-------------------------------------
Payload         | PAYLOAD_ERROR          | Raw request data cannot be mapped
----------------|------------------------|-------------------------------------
Configuration   | CONFIGURATION_ERROR    | Settings file is malformed

None of these errors is retryable: each is a deterministic consequence of
the input.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from pacioli_kernel.invariants import JournalInvariant

if TYPE_CHECKING:
    from pacioli_kernel.domain.account import Account


class PacioliError(Exception):
    """
    Base exception for all Pacioli kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "PACIOLI_ERROR"


# Journal entry construction exceptions


class JournalEntryError(PacioliError):
    """Base exception for rejected journal entry construction."""

    code: str = "JOURNAL_ENTRY_ERROR"

    def __init__(self, argument: str, message: str):
        self.argument = argument
        super().__init__(message)


class NullArgumentError(JournalEntryError):
    """A required line collection was None."""

    code: str = "NULL_ARGUMENT"

    def __init__(self, argument: str):
        super().__init__(argument, f"{argument} must not be None")


class InvalidArgumentError(JournalEntryError):
    """
    An argument was present but violates a journal invariant.

    Subclasses set `invariant` to the JournalInvariant they protect.
    """

    code: str = "INVALID_ARGUMENT"
    invariant: JournalInvariant | None = None


class EmptyCollectionError(InvalidArgumentError):
    """Debits or credits had zero lines."""

    code: str = "EMPTY_COLLECTION"
    invariant = JournalInvariant.TWO_SIDED

    def __init__(self, argument: str):
        super().__init__(argument, f"{argument} must contain at least one line")


class InvalidDateError(InvalidArgumentError):
    """Entry date was None or the minimum date sentinel."""

    code: str = "INVALID_DATE"
    invariant = JournalInvariant.DATED

    def __init__(self, value: Any):
        self.value = value
        super().__init__("date", f"Invalid entry date: {value!r}")


class NonExclusiveAccountError(InvalidArgumentError):
    """The same account appears on both the debit and the credit side."""

    code: str = "NON_EXCLUSIVE_ACCOUNT"
    invariant = JournalInvariant.SIDE_EXCLUSIVE

    def __init__(self, account: Account):
        self.account = account
        super().__init__(
            "credits",
            f"Account '{account.name}' ({account.normal_balance.value}) "
            f"appears on both the debit and the credit side",
        )


class UnbalancedEntryError(InvalidArgumentError):
    """Debit and credit amounts do not net to zero."""

    code: str = "UNBALANCED_ENTRY"
    invariant = JournalInvariant.ZERO_SUM

    def __init__(self, debits: Decimal, credits: Decimal, variance: Decimal):
        self.debits = debits
        self.credits = credits
        self.variance = variance
        super().__init__(
            "credits",
            f"Unbalanced entry: debits={debits}, credits={credits}, "
            f"variance={self.variance}",
        )


class LineSideMismatchError(InvalidArgumentError):
    """A line was supplied on the side its type does not belong to."""

    code: str = "LINE_SIDE_MISMATCH"
    invariant = JournalInvariant.TWO_SIDED

    def __init__(self, argument: str, index: int, line_type: str):
        self.index = index
        self.line_type = line_type
        super().__init__(
            argument,
            f"{argument}[{index}] is a {line_type}, not a line for this side",
        )


# Payload mapping exceptions


class PayloadError(PacioliError):
    """Raw journal entry data could not be mapped to domain objects."""

    code: str = "PAYLOAD_ERROR"

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid payload field '{field}': {reason}")


# Configuration exceptions


class ConfigurationError(PacioliError):
    """Settings could not be loaded or contain invalid values."""

    code: str = "CONFIGURATION_ERROR"

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid setting '{key}': {reason}")
