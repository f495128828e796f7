"""
Tests for payload mapping (pacioli_kernel.mapping).

Verifies:
- Well-formed payloads map to validated entries and back
- Malformed payloads raise PayloadError naming the field
- Invariant violations propagate as the construction error
- Rejections and successes are logged with structured fields
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from pacioli_kernel.domain import Account, NormalBalance
from pacioli_kernel.exceptions import (
    InvalidDateError,
    NonExclusiveAccountError,
    NullArgumentError,
    PayloadError,
    UnbalancedEntryError,
)
from pacioli_kernel.mapping import (
    entry_from_payload,
    entry_to_payload,
    parse_account,
    parse_entry_date,
)


def _payload(**overrides):
    payload = {
        "date": "2020-02-15",
        "description": "Cash sale",
        "debits": [
            {"account": {"name": "Cash", "normal_balance": "debit"}, "amount": "100.00"}
        ],
        "credits": [
            {"account": {"name": "Revenue", "normal_balance": "credit"}, "amount": "-100.00"}
        ],
    }
    payload.update(overrides)
    return payload


class TestEntryFromPayload:

    def test_maps_valid_payload(self):
        entry = entry_from_payload(_payload())

        assert entry.date == date(2020, 2, 15)
        assert entry.description == "Cash sale"
        assert entry.debits[0].account == Account("Cash", NormalBalance.DEBIT)
        assert entry.debits[0].amount == Decimal("100.00")
        assert entry.credits[0].amount == Decimal("-100.00")

    def test_integer_amounts(self):
        payload = _payload()
        payload["debits"][0]["amount"] = 10_101
        payload["credits"][0]["amount"] = -10_101
        entry = entry_from_payload(payload)
        assert entry.total_debits == Decimal("10101")

    def test_description_optional(self):
        payload = _payload()
        del payload["description"]
        assert entry_from_payload(payload).description is None

    def test_normal_balance_case_insensitive(self):
        payload = _payload()
        payload["debits"][0]["account"]["normal_balance"] = "DEBIT"
        entry = entry_from_payload(payload)
        assert entry.debits[0].account.normal_balance is NormalBalance.DEBIT

    def test_datetime_string(self):
        entry = entry_from_payload(_payload(date="2024-01-15T10:30:00"))
        assert entry.date == datetime(2024, 1, 15, 10, 30)

    def test_custom_date_format(self):
        entry = entry_from_payload(_payload(date="15/02/2020"), date_format="%d/%m/%Y")
        assert entry.date == datetime(2020, 2, 15)


class TestPayloadErrors:

    def test_not_a_mapping(self):
        with pytest.raises(PayloadError):
            entry_from_payload(["not", "a", "mapping"])

    def test_missing_date(self):
        payload = _payload()
        del payload["date"]
        with pytest.raises(PayloadError) as exc_info:
            entry_from_payload(payload)
        assert exc_info.value.field == "date"

    def test_bad_date(self):
        with pytest.raises(PayloadError) as exc_info:
            entry_from_payload(_payload(date="2020-02-30"))
        assert exc_info.value.field == "date"

    def test_missing_side(self):
        payload = _payload()
        del payload["credits"]
        with pytest.raises(PayloadError) as exc_info:
            entry_from_payload(payload)
        assert exc_info.value.field == "credits"

    def test_side_not_a_list(self):
        with pytest.raises(PayloadError):
            entry_from_payload(_payload(debits="Cash 100"))

    def test_missing_amount(self):
        payload = _payload()
        del payload["debits"][0]["amount"]
        with pytest.raises(PayloadError) as exc_info:
            entry_from_payload(payload)
        assert exc_info.value.field == "debits[0].amount"

    def test_float_amount(self):
        payload = _payload()
        payload["debits"][0]["amount"] = 100.0
        with pytest.raises(PayloadError) as exc_info:
            entry_from_payload(payload)
        assert exc_info.value.field == "debits[0].amount"

    def test_non_numeric_amount(self):
        payload = _payload()
        payload["credits"][0]["amount"] = "a hundred"
        with pytest.raises(PayloadError) as exc_info:
            entry_from_payload(payload)
        assert exc_info.value.field == "credits[0].amount"

    def test_unknown_normal_balance(self):
        payload = _payload()
        payload["credits"][0]["account"]["normal_balance"] = "sideways"
        with pytest.raises(PayloadError) as exc_info:
            entry_from_payload(payload)
        assert exc_info.value.field == "credits[0].account.normal_balance"

    def test_account_missing_name(self):
        with pytest.raises(PayloadError) as exc_info:
            parse_account({"normal_balance": "debit"}, "debits[0].account")
        assert exc_info.value.field == "debits[0].account.name"

    def test_too_many_lines(self):
        payload = _payload()
        payload["debits"] = payload["debits"] * 3
        with pytest.raises(PayloadError) as exc_info:
            entry_from_payload(payload, max_lines_per_side=2)
        assert exc_info.value.field == "debits"

    def test_description_must_be_string(self):
        with pytest.raises(PayloadError):
            entry_from_payload(_payload(description=42))


class TestInvariantErrorsPropagate:

    def test_null_side_reaches_entry(self):
        with pytest.raises(NullArgumentError):
            entry_from_payload(_payload(debits=None))

    def test_unbalanced(self):
        payload = _payload()
        payload["credits"][0]["amount"] = "-20"
        with pytest.raises(UnbalancedEntryError):
            entry_from_payload(payload)

    def test_shared_account(self):
        payload = _payload()
        payload["credits"][0]["account"] = {"name": "Cash", "normal_balance": "debit"}
        with pytest.raises(NonExclusiveAccountError):
            entry_from_payload(payload)

    def test_sentinel_date(self):
        with pytest.raises(InvalidDateError):
            entry_from_payload(_payload(date="0001-01-01"))


class TestEntryToPayload:

    def test_renders_payload_shape(self):
        entry = entry_from_payload(_payload())
        assert entry_to_payload(entry) == _payload()

    def test_omits_missing_description(self):
        payload = _payload()
        del payload["description"]
        rendered = entry_to_payload(entry_from_payload(payload))
        assert "description" not in rendered

    def test_custom_date_format_round_trips(self):
        entry = entry_from_payload(_payload(date="15/02/2020"), date_format="%d/%m/%Y")

        rendered = entry_to_payload(entry, date_format="%d/%m/%Y")

        assert rendered["date"] == "15/02/2020"
        assert entry_from_payload(rendered, date_format="%d/%m/%Y") == entry


class TestParseEntryDate:

    def test_date_passes_through(self):
        assert parse_entry_date(date(2020, 2, 15)) == date(2020, 2, 15)

    def test_non_string_rejected(self):
        with pytest.raises(PayloadError):
            parse_entry_date(20200215)


class TestMappingLogs:

    def test_rejection_logged(self, captured_logs):
        payload = _payload()
        payload["credits"][0]["amount"] = "-20"
        with pytest.raises(UnbalancedEntryError):
            entry_from_payload(payload)

        records = [r for r in captured_logs() if r["message"] == "journal_entry_rejected"]
        assert len(records) == 1
        assert records[0]["level"] == "INFO"
        assert records[0]["error_code"] == "UNBALANCED_ENTRY"

    def test_success_logged(self, captured_logs):
        entry_from_payload(_payload())

        records = [r for r in captured_logs() if r["message"] == "journal_entry_mapped"]
        assert len(records) == 1
        assert records[0]["debit_lines"] == 1
        assert records[0]["total_debits"] == "100.00"
        assert records[0]["entry_date"] == "2020-02-15"
