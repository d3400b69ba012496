"""Account model for the banking case study."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from bank_analytics.models.financial.enums import AccountType


@dataclass(frozen=True)
class Account:
    """Bank account entity.

    Account types seen in the case-study data:
    - Checking: everyday account, balance expected >= 0
    - Savings: balance expected >= 0
    - Credit: credit line, balance may go negative

    ``account_type`` is kept as the raw string from the source so that
    unexpected values survive loading.
    """

    account_id: str
    customer_id: str
    account_type: str
    balance: Decimal
    opening_date: date

    def __post_init__(self) -> None:
        # Enum members hash by name, so keep the plain string value
        if isinstance(self.account_type, Enum):
            object.__setattr__(self, "account_type", self.account_type.value)
        if not isinstance(self.balance, Decimal):
            object.__setattr__(self, "balance", Decimal(str(self.balance)))

    @property
    def is_credit(self) -> bool:
        return self.account_type == AccountType.CREDIT
