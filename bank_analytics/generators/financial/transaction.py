"""Transaction generator for the banking case study."""

import random
from datetime import date, timedelta
from decimal import Decimal

from bank_analytics.generators.base import BaseGenerator
from bank_analytics.models.financial import Account, Transaction, TransactionType


class TransactionGenerator(BaseGenerator):
    """Generate synthetic, internally consistent transaction histories."""

    ID_PREFIX = "TXN"

    TRANSACTION_TYPES = list(TransactionType)
    TRANSACTION_WEIGHTS = [0.40, 0.25, 0.20, 0.15]

    # Typical amount ranges per type (GBP)
    AMOUNT_RANGES = {
        TransactionType.DEPOSIT: (50, 3000),
        TransactionType.WITHDRAWAL: (10, 1200),
        TransactionType.PAYMENT: (5, 800),
        TransactionType.TRANSFER: (20, 1500),
    }

    def generate(
        self,
        account_id: str,
        transaction_date: date,
        transaction_type: TransactionType | None = None,
    ) -> Transaction:
        """Generate a single transaction.

        Parameters
        ----------
        account_id : str
            Account ID to associate with the transaction.
        transaction_date : date
            Booking date.
        transaction_type : TransactionType | None
            Type; drawn from the type mix when omitted.

        Returns
        -------
        Transaction
            Generated transaction.
        """
        if transaction_type is None:
            transaction_type = random.choices(
                self.TRANSACTION_TYPES, weights=self.TRANSACTION_WEIGHTS, k=1
            )[0]
        low, high = self.AMOUNT_RANGES[TransactionType(transaction_type)]
        amount = Decimal(str(round(random.uniform(low, high), 2)))

        return Transaction(
            transaction_id=self.next_id(),
            account_id=account_id,
            transaction_date=transaction_date,
            transaction_type=transaction_type,
            amount=amount.quantize(Decimal("0.01")),
        )

    def generate_for_account(
        self,
        account: Account,
        end_date: date,
        count: int,
    ) -> list[Transaction]:
        """Generate a transaction history for an account.

        Dates fall between the account's opening date and ``end_date``.
        A debit that would take a non-credit account below zero is
        booked as a deposit instead, so histories never overdraw.

        Parameters
        ----------
        account : Account
            Account to generate for.
        end_date : date
            Latest booking date.
        count : int
            Number of transactions.

        Returns
        -------
        list[Transaction]
            Transactions in booking order.
        """
        span = max(0, (end_date - account.opening_date).days)
        dates = sorted(
            account.opening_date + timedelta(days=random.randint(0, span)) for _ in range(count)
        )

        balance = Decimal("0")
        history: list[Transaction] = []
        for tx_date in dates:
            tx = self.generate(account.account_id, tx_date)
            if not account.is_credit and balance + tx.signed_amount < 0:
                tx = self.generate(account.account_id, tx_date, TransactionType.DEPOSIT)
            balance += tx.signed_amount
            history.append(tx)
        return history
