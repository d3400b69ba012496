"""Financial domain models."""

from bank_analytics.models.financial.account import Account
from bank_analytics.models.financial.customer import Customer
from bank_analytics.models.financial.enums import (
    DEBIT_TRANSACTION_TYPES,
    VALID_TRANSACTION_TYPES,
    AccountType,
    TransactionType,
)
from bank_analytics.models.financial.transaction import Transaction

__all__ = [
    "Account",
    "AccountType",
    "Customer",
    "DEBIT_TRANSACTION_TYPES",
    "Transaction",
    "TransactionType",
    "VALID_TRANSACTION_TYPES",
]
