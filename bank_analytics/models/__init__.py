"""Domain models and report row types."""

from bank_analytics.models.financial import Account, Customer, Transaction
from bank_analytics.models.reports import (
    BalanceMismatch,
    CustomerActivity,
    CustomerBalance,
    CustomerDeposits,
    CustomerTypeBalance,
    DuplicateAccount,
    DuplicateKey,
    InvalidTransactionType,
    LargeWithdrawal,
    MissingCustomerData,
    NegativeAmount,
    NegativeBalance,
    OrphanRecord,
    RecentAccount,
    RunningBalanceRow,
    TransactionBalanceComparison,
)

__all__ = [
    "Account",
    "BalanceMismatch",
    "Customer",
    "CustomerActivity",
    "CustomerBalance",
    "CustomerDeposits",
    "CustomerTypeBalance",
    "DuplicateAccount",
    "DuplicateKey",
    "InvalidTransactionType",
    "LargeWithdrawal",
    "MissingCustomerData",
    "NegativeAmount",
    "NegativeBalance",
    "OrphanRecord",
    "RecentAccount",
    "RunningBalanceRow",
    "Transaction",
    "TransactionBalanceComparison",
]
