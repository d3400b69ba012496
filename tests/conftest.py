"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from bank_analytics.clock import FixedClock
from bank_analytics.models.financial import Account, Customer, Transaction
from bank_analytics.store.financial import FinancialDataStore

TODAY = date(2024, 6, 30)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Reference date every report window is anchored on."""
    return TODAY


@pytest.fixture
def clock() -> FixedClock:
    """Clock pinned to the reference date."""
    return FixedClock(TODAY)


@pytest.fixture
def customers() -> list[Customer]:
    """Four customers: two complete, two with gaps."""
    return [
        Customer("C1", "Alice", "Smith", "1 High St, Leeds", date(1980, 1, 1), "LS1 1AA"),
        Customer("C2", "Bob", "Jones", None, date(1975, 5, 5), "M1 2BB"),
        Customer("C3", "Cara", "Brown", "3 Low Rd, York", None, None),
        Customer("C4", "Dan", "White", "4 Mill Ln, Hull", date(1990, 9, 9), "HU1 3CC"),
    ]


@pytest.fixture
def accounts() -> list[Account]:
    """Accounts covering each audit finding once.

    - A5 stores 100 against a history summing to 80
    - A3 is an overdrawn checking account
    - A6 is C3's second checking account
    - A7 belongs to a customer missing from the customers table
    """
    return [
        Account("A1", "C1", "Checking", Decimal("1200.00"), date(2020, 1, 15)),
        Account("A2", "C1", "Savings", Decimal("5000.00"), date(2024, 3, 1)),
        Account("A3", "C2", "Checking", Decimal("-50.00"), date(2023, 8, 1)),
        Account("A4", "C2", "Credit", Decimal("-300.00"), date(2024, 6, 1)),
        Account("A5", "C3", "Checking", Decimal("100.00"), date(2024, 6, 30)),
        Account("A6", "C3", "Checking", Decimal("0.00"), date(2022, 1, 1)),
        Account("A7", "C9", "Savings", Decimal("10.00"), date(2021, 1, 1)),
    ]


@pytest.fixture
def transactions() -> list[Transaction]:
    """Transactions; T11 has an invalid type and T12 an unknown account."""
    return [
        Transaction("T01", "A1", date(2024, 1, 10), "Deposit", Decimal("1200.00")),
        Transaction("T02", "A1", date(2024, 5, 20), "Deposit", Decimal("700.00")),
        Transaction("T03", "A1", date(2024, 6, 15), "Withdrawal", Decimal("600.00")),
        Transaction("T04", "A1", date(2024, 6, 20), "Payment", Decimal("100.00")),
        Transaction("T05", "A2", date(2024, 3, 1), "Deposit", Decimal("5000.00")),
        Transaction("T06", "A3", date(2024, 6, 10), "Deposit", Decimal("100.00")),
        Transaction("T07", "A3", date(2024, 6, 12), "Withdrawal", Decimal("150.00")),
        Transaction("T08", "A4", date(2024, 6, 5), "Payment", Decimal("300.00")),
        Transaction("T09", "A5", date(2024, 6, 30), "Deposit", Decimal("100.00")),
        Transaction("T10", "A5", date(2024, 6, 30), "Transfer", Decimal("20.00")),
        Transaction("T11", "A5", date(2024, 6, 30), "Refund", Decimal("5.00")),
        Transaction("T12", "A8", date(2024, 6, 1), "Deposit", Decimal("10.00")),
        Transaction("T13", "A2", date(2024, 3, 15), "Withdrawal", Decimal("2000.00")),
        Transaction("T14", "A2", date(2024, 4, 1), "Deposit", Decimal("2000.00")),
    ]


@pytest.fixture
def store(
    customers: list[Customer],
    accounts: list[Account],
    transactions: list[Transaction],
) -> FinancialDataStore:
    """Snapshot loaded from the sample tables."""
    snapshot = FinancialDataStore()
    for customer in customers:
        snapshot.add_customer(customer)
    for account in accounts:
        snapshot.add_account(account)
    for tx in transactions:
        snapshot.add_transaction(tx)
    return snapshot


@pytest.fixture
def empty_store() -> FinancialDataStore:
    """Snapshot with no rows at all."""
    return FinancialDataStore()
