"""
Pytest fixtures for the Pacioli kernel test suite.

Provides:
- Structured logging configuration and capture
- Common accounts and dates (line builders live in tests.helpers)
"""

import json
import logging
from datetime import date, datetime
from io import StringIO

import pytest

from pacioli_kernel.domain import Account, NormalBalance
from pacioli_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture pacioli_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs):
            entry_from_payload(payload)
            logs = captured_logs()
            assert any(r["message"] == "journal_entry_mapped" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("pacioli_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def cash() -> Account:
    return Account("Cash", NormalBalance.DEBIT)


@pytest.fixture
def revenue() -> Account:
    return Account("Revenue", NormalBalance.CREDIT)


@pytest.fixture
def entry_date() -> date:
    return date(2020, 2, 15)


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 1, 15, 10, 30)
