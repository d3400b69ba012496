"""Data quality defects for realistic case-study data.

Each injector returns new records and leaves its inputs untouched, so the
caller decides what ends up in the store and can label it.
"""

import random
from dataclasses import replace
from datetime import date
from decimal import Decimal

from bank_analytics.models.financial import Account, Customer, Transaction, TransactionType

# Types seen in real feeds that fall outside the valid set
INVALID_TRANSACTION_TYPES = ["Refund", "Chargeback", "Fee", "Interest", "deposit", "WITHDRAWAL"]

OPTIONAL_CUSTOMER_FIELDS = ("address", "date_of_birth", "zip")


class DataQualityPatternGenerator:
    """Inject the defects the data quality audit is meant to catch."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is not None:
            random.seed(seed)

    def inject_missing_fields(
        self,
        customer: Customer,
        fields: tuple[str, ...] | None = None,
    ) -> Customer:
        """Blank out some of a customer's address, date of birth and ZIP.

        Parameters
        ----------
        customer : Customer
            Complete customer record.
        fields : tuple[str, ...] | None
            Fields to clear; a random non-empty subset when omitted.

        Returns
        -------
        Customer
            Copy with the chosen fields set to None.
        """
        if fields is None:
            k = random.randint(1, len(OPTIONAL_CUSTOMER_FIELDS))
            fields = tuple(random.sample(OPTIONAL_CUSTOMER_FIELDS, k))
        return replace(customer, **{field: None for field in fields})

    def inject_duplicate_account(self, account: Account, account_id: str) -> Account:
        """Open a second, empty account of the same type for the same customer."""
        return replace(account, account_id=account_id, balance=Decimal("0.00"))

    def inject_invalid_type(
        self,
        template: Transaction,
        transaction_id: str,
        invalid_type: str | None = None,
    ) -> Transaction:
        """Book a copy of ``template`` under a type outside the valid set.

        Invalid types have no effect on the balance, so adding one never
        breaks reconciliation of the account.
        """
        if invalid_type is None:
            invalid_type = random.choice(INVALID_TRANSACTION_TYPES)
        return replace(template, transaction_id=transaction_id, transaction_type=invalid_type)

    def inject_negative_balance(
        self,
        account: Account,
        transaction_id: str,
        transaction_date: date,
        overdraft: Decimal | None = None,
    ) -> tuple[Account, Transaction]:
        """Overdraw an account with one withdrawal.

        Parameters
        ----------
        account : Account
            Account whose balance already matches its history.
        transaction_id : str
            Id for the overdrawing withdrawal.
        transaction_date : date
            Booking date of the withdrawal.
        overdraft : Decimal | None
            Final negative balance magnitude (random when omitted).

        Returns
        -------
        tuple[Account, Transaction]
            The account with its new negative balance, and the withdrawal
            that explains it. The two still reconcile.
        """
        if overdraft is None:
            overdraft = Decimal(str(round(random.uniform(10, 500), 2)))
        amount = account.balance + overdraft
        withdrawal = Transaction(
            transaction_id=transaction_id,
            account_id=account.account_id,
            transaction_date=transaction_date,
            transaction_type=TransactionType.WITHDRAWAL,
            amount=amount,
        )
        return replace(account, balance=account.balance - amount), withdrawal

    def inject_balance_drift(self, account: Account, delta: Decimal | None = None) -> Account:
        """Shift the stored balance away from the transaction history.

        ``delta`` defaults to a random positive amount so the account never
        turns negative as a side effect.
        """
        if delta is None:
            delta = Decimal(str(round(random.uniform(1, 250), 2)))
        return replace(account, balance=account.balance + delta)
