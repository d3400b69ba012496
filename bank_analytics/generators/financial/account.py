"""Account generator for the banking case study."""

import random
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from bank_analytics.generators.base import BaseGenerator
from bank_analytics.models.financial import Account, AccountType


class AccountGenerator(BaseGenerator):
    """Generate synthetic bank accounts.

    Account mix:
    - Checking: most common (~55%)
    - Savings: ~30%
    - Credit: ~15%

    Balances start at zero; the scenario sets them from the generated
    transaction history so that they reconcile.
    """

    ID_PREFIX = "ACC"

    ACCOUNT_TYPES = list(AccountType)
    ACCOUNT_TYPE_WEIGHTS = [0.55, 0.30, 0.15]

    def generate(
        self,
        customer_id: str,
        account_type: AccountType | str | None = None,
        opened_between: tuple[date, date] | None = None,
    ) -> Account:
        """Generate a single account for a customer.

        Parameters
        ----------
        customer_id : str
            Customer ID to associate with the account.
        account_type : AccountType | str | None
            Account type; drawn from the type mix when omitted.
        opened_between : tuple[date, date] | None
            Inclusive range for the opening date (default: last 5 years).

        Returns
        -------
        Account
            Generated account with a zero balance.
        """
        if account_type is None:
            account_type = random.choices(
                self.ACCOUNT_TYPES, weights=self.ACCOUNT_TYPE_WEIGHTS, k=1
            )[0]
        if opened_between is None:
            today = date.today()
            opened_between = (today - timedelta(days=5 * 365), today)

        start, end = opened_between
        span = max(0, (end - start).days)
        opening_date = start + timedelta(days=random.randint(0, span))

        return Account(
            account_id=self.next_id(),
            customer_id=customer_id,
            account_type=account_type,
            balance=Decimal("0.00"),
            opening_date=opening_date,
        )

    def generate_for_customer(
        self,
        customer_id: str,
        opened_between: tuple[date, date] | None = None,
    ) -> Iterator[Account]:
        """Generate 1-3 accounts of distinct types for a customer."""
        num_accounts = random.choices([1, 2, 3], weights=[0.5, 0.35, 0.15], k=1)[0]

        types = [AccountType.CHECKING]
        others = [AccountType.SAVINGS, AccountType.CREDIT]
        random.shuffle(others)
        types.extend(others)

        for account_type in types[:num_accounts]:
            yield self.generate(customer_id, account_type, opened_between)
