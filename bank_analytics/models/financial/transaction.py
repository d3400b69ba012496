"""Transaction model for the banking case study."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from bank_analytics.models.financial.enums import (
    DEBIT_TRANSACTION_TYPES,
    VALID_TRANSACTION_TYPES,
    TransactionType,
)


@dataclass(frozen=True)
class Transaction:
    """Bank account transaction.

    ``amount`` is a magnitude; the direction comes from
    ``transaction_type`` (see ``signed_amount``).
    """

    transaction_id: str
    account_id: str
    transaction_date: date
    transaction_type: str
    amount: Decimal

    def __post_init__(self) -> None:
        if isinstance(self.transaction_type, Enum):
            object.__setattr__(self, "transaction_type", self.transaction_type.value)
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))

    @property
    def is_valid_type(self) -> bool:
        return self.transaction_type in VALID_TRANSACTION_TYPES

    @property
    def signed_amount(self) -> Decimal:
        """Effect of this transaction on its account balance.

        Deposits add, withdrawals/payments/transfers subtract, and any
        other type contributes nothing.
        """
        if self.transaction_type == TransactionType.DEPOSIT:
            return self.amount
        if self.transaction_type in DEBIT_TRANSACTION_TYPES:
            return -self.amount
        return Decimal("0")
