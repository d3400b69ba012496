"""Tests for sink serialization helpers."""

from datetime import date, datetime
from decimal import Decimal

from bank_analytics.models.financial import AccountType, Customer
from bank_analytics.models.reports import BalanceMismatch, DuplicateAccount, OrphanRecord
from bank_analytics.sinks.serialization import field_names, record_key, serialize_value, to_dict


class TestSerializeValue:
    """Tests for serialize_value."""

    def test_decimal_kept_exact(self) -> None:
        """Decimals become strings, never floats."""
        assert serialize_value(Decimal("0.10")) == "0.10"

    def test_dates(self) -> None:
        """Dates and datetimes become ISO strings."""
        assert serialize_value(date(2024, 6, 30)) == "2024-06-30"
        assert serialize_value(datetime(2024, 6, 30, 12, 0)) == "2024-06-30T12:00:00"

    def test_enum(self) -> None:
        """Enums become their value."""
        assert serialize_value(AccountType.CREDIT) == "Credit"

    def test_containers(self) -> None:
        """Dicts, lists and tuples are converted recursively."""
        assert serialize_value({"a": [Decimal("1"), (date(2024, 1, 1),)]}) == {
            "a": ["1", ["2024-01-01"]]
        }

    def test_passthrough(self) -> None:
        """Plain JSON values are unchanged."""
        assert serialize_value(None) is None
        assert serialize_value(3) == 3
        assert serialize_value("x") == "x"


class TestToDict:
    """Tests for to_dict."""

    def test_dataclass_field_order(self) -> None:
        """Keys follow the dataclass definition."""
        data = to_dict(BalanceMismatch("A1", Decimal("100"), None))

        assert list(data) == ["account_id", "stored_balance", "calculated_balance"]
        assert data == {"account_id": "A1", "stored_balance": "100", "calculated_balance": None}

    def test_customer(self) -> None:
        """Entity rows serialise like report rows."""
        data = to_dict(Customer("C1", "Alice", "Smith", None, date(1980, 1, 1), "LS1"))

        assert data["date_of_birth"] == "1980-01-01"
        assert data["address"] is None

    def test_dict(self) -> None:
        """Mappings are serialised value by value."""
        assert to_dict({"amount": Decimal("2.50")}) == {"amount": "2.50"}

    def test_other(self) -> None:
        """Anything else is wrapped."""
        assert to_dict(42) == {"value": "42"}


class TestFieldNamesAndKeys:
    """Tests for field_names and record_key."""

    def test_field_names(self) -> None:
        """Columns come from the first row."""
        assert field_names([DuplicateAccount("C1", "Savings", 2)]) == [
            "customer_id",
            "account_type",
            "number_of_duplicates",
        ]
        assert field_names([]) == []

    def test_record_key_prefers_account(self) -> None:
        """account_id is tried before customer_id."""
        assert record_key(BalanceMismatch("A1", Decimal("1"), None)) == "A1"
        assert record_key(DuplicateAccount("C1", "Savings", 2)) == "C1"

    def test_record_key_falls_back(self) -> None:
        """Rows with only a record id use it; rows without ids have no key."""
        assert record_key(OrphanRecord("transactions", "T9", "A9")) == "T9"
        assert record_key({"transaction_id": "T1"}) == "T1"
        assert record_key({"total": 1}) is None
