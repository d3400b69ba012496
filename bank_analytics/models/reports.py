"""Row types returned by reports and data quality checks."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


# Aggregation reports


@dataclass(frozen=True)
class CustomerTypeBalance:
    """Total balance for one (customer, account type) group."""

    customer_id: str
    account_type: str
    total_balance: Decimal


@dataclass(frozen=True)
class RecentAccount:
    """Account opened inside the trailing window, with its owner."""

    customer_id: str
    first_name: str
    last_name: str
    account_id: str
    opening_date: date


@dataclass(frozen=True)
class CustomerBalance:
    """Total balance across all accounts of one customer."""

    customer_id: str
    first_name: str
    last_name: str
    total_balance: Decimal


@dataclass(frozen=True)
class CustomerDeposits:
    customer_id: str
    total_deposits: Decimal


# Ledger reports


@dataclass(frozen=True)
class LargeWithdrawal:
    account_id: str
    customer_id: str
    first_name: str
    last_name: str
    transaction_id: str
    transaction_date: date
    amount: Decimal


@dataclass(frozen=True)
class RunningBalanceRow:
    """One transaction with the account balance after applying it."""

    account_id: str
    transaction_id: str
    transaction_date: date
    transaction_type: str
    amount: Decimal
    signed_amount: Decimal
    running_balance: Decimal


@dataclass(frozen=True)
class TransactionBalanceComparison:
    customer_id: str
    avg_transaction_amount: Decimal
    avg_balance: Decimal


@dataclass(frozen=True)
class CustomerActivity:
    customer_id: str
    first_name: str
    last_name: str
    transaction_count: int


# Data quality findings


@dataclass(frozen=True)
class BalanceMismatch:
    """Stored balance that does not match the transaction history.

    ``calculated_balance`` is None when the account has no transactions.
    """

    account_id: str
    stored_balance: Decimal
    calculated_balance: Decimal | None


@dataclass(frozen=True)
class MissingCustomerData:
    customer_id: str
    first_name: str
    last_name: str
    missing_fields: str  # e.g. "Missing Address, Missing ZIP"


@dataclass(frozen=True)
class DuplicateAccount:
    customer_id: str
    account_type: str
    number_of_duplicates: int


@dataclass(frozen=True)
class DuplicateKey:
    """Primary key that occurs on more than one row of a table."""

    table: str
    record_id: str
    occurrences: int


@dataclass(frozen=True)
class InvalidTransactionType:
    transaction_id: str
    account_id: str
    transaction_type: str


@dataclass(frozen=True)
class NegativeBalance:
    account_id: str
    customer_id: str
    account_type: str
    balance: Decimal


@dataclass(frozen=True)
class NegativeAmount:
    transaction_id: str
    account_id: str
    transaction_type: str
    amount: Decimal


@dataclass(frozen=True)
class OrphanRecord:
    """Row whose foreign key points at a row that does not exist."""

    table: str  # "accounts" or "transactions"
    record_id: str
    missing_reference: str
