"""Enumeration types for the banking case-study tables."""

from enum import Enum


class AccountType(str, Enum):
    CHECKING = "Checking"
    SAVINGS = "Savings"
    CREDIT = "Credit"


class TransactionType(str, Enum):
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"
    PAYMENT = "Payment"
    TRANSFER = "Transfer"


# Types that reduce the account balance
DEBIT_TRANSACTION_TYPES = frozenset(
    {TransactionType.WITHDRAWAL.value, TransactionType.PAYMENT.value, TransactionType.TRANSFER.value}
)

VALID_TRANSACTION_TYPES = frozenset(t.value for t in TransactionType)
