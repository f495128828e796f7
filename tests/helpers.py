"""Line builders shared across the test suite."""

from decimal import Decimal

from pacioli_kernel.domain import Account, CreditLine, DebitLine, NormalBalance


def debit(name: str, amount, balance: NormalBalance = NormalBalance.DEBIT) -> DebitLine:
    """Build a debit line for a freshly constructed account."""
    return DebitLine(Account(name, balance), Decimal(str(amount)))


def credit(name: str, amount, balance: NormalBalance = NormalBalance.CREDIT) -> CreditLine:
    """Build a credit line for a freshly constructed account."""
    return CreditLine(Account(name, balance), Decimal(str(amount)))
