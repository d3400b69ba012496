"""Transaction ledger analysis: signed effects, running balances, activity."""

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Iterable

from bank_analytics.clock import Clock, days_before, months_before
from bank_analytics.models.financial import Transaction, TransactionType
from bank_analytics.models.reports import (
    CustomerActivity,
    LargeWithdrawal,
    RunningBalanceRow,
    TransactionBalanceComparison,
)
from bank_analytics.reports.params import require_non_negative_amount, require_non_negative_int
from bank_analytics.store.financial import FinancialDataStore

logger = logging.getLogger(__name__)


def ledger_order(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Sort transactions by (transaction_date, transaction_id)."""
    return sorted(transactions, key=lambda tx: (tx.transaction_date, tx.transaction_id))


def build_running_balance(transactions: Iterable[Transaction]) -> list[RunningBalanceRow]:
    """Prefix sum of signed amounts over one account's transactions.

    Parameters
    ----------
    transactions : Iterable[Transaction]
        Transactions of a single account, in any order.

    Returns
    -------
    list[RunningBalanceRow]
        One row per transaction in ledger order; the last row holds the
        account's calculated balance.
    """
    bal = Decimal("0")
    out: list[RunningBalanceRow] = []
    for tx in ledger_order(transactions):
        signed = tx.signed_amount
        bal += signed
        out.append(
            RunningBalanceRow(
                account_id=tx.account_id,
                transaction_id=tx.transaction_id,
                transaction_date=tx.transaction_date,
                transaction_type=tx.transaction_type,
                amount=tx.amount,
                signed_amount=signed,
                running_balance=bal,
            )
        )
    return out


def calculated_balances(store: FinancialDataStore) -> dict[str, Decimal]:
    """Full-history sum of signed amounts, keyed by account id.

    Only account ids with at least one transaction appear, including ids
    missing from the accounts table.
    """
    balances: dict[str, Decimal] = {}
    for account_id in store.transaction_account_ids():
        balances[account_id] = sum(
            (tx.signed_amount for tx in store.get_account_transactions(account_id)),
            Decimal("0"),
        )
    return balances


def _mean(values: list[Decimal]) -> Decimal:
    return sum(values, Decimal("0")) / len(values)


class TransactionLedgerAnalyzer:
    """Reports built on individual transactions.

    Parameters
    ----------
    store : FinancialDataStore
        Snapshot to report on. Never modified.
    clock : Clock
        Source of "today" for the trailing-window reports.
    """

    def __init__(self, store: FinancialDataStore, clock: Clock) -> None:
        self.store = store
        self.clock = clock

    def large_withdrawals_within(self, threshold: Decimal | int | str, days: int) -> list[LargeWithdrawal]:
        """Withdrawals above ``threshold`` made on or after ``today - days``.

        Parameters
        ----------
        threshold : Decimal | int | str
            Amount a withdrawal must strictly exceed (>= 0).
        days : int
            Size of the trailing window in days (>= 0).

        Returns
        -------
        list[LargeWithdrawal]
            Ordered by transaction_date, then transaction_id. Withdrawals
            whose account or customer is missing are left out.
        """
        limit = require_non_negative_amount("threshold", threshold)
        days = require_non_negative_int("days", days)
        cutoff = days_before(self.clock.today(), days)

        rows = []
        for tx in ledger_order(self.store.transactions):
            if tx.transaction_type != TransactionType.WITHDRAWAL:
                continue
            if tx.amount <= limit or tx.transaction_date < cutoff:
                continue
            account = self.store.accounts.get(tx.account_id)
            customer = self.store.get_account_owner(tx.account_id)
            if account is None or customer is None:
                continue
            rows.append(
                LargeWithdrawal(
                    account_id=account.account_id,
                    customer_id=customer.customer_id,
                    first_name=customer.first_name,
                    last_name=customer.last_name,
                    transaction_id=tx.transaction_id,
                    transaction_date=tx.transaction_date,
                    amount=tx.amount,
                )
            )

        logger.debug(
            "large_withdrawals_within(%s, %d) since %s: %d rows", limit, days, cutoff, len(rows)
        )
        return rows

    def running_balance(self) -> list[RunningBalanceRow]:
        """Running balance for every account that has transactions.

        Accounts come in account_id order; each account's rows are in
        (transaction_date, transaction_id) order.
        """
        rows: list[RunningBalanceRow] = []
        for account_id in sorted(self.store.transaction_account_ids()):
            rows.extend(build_running_balance(self.store.get_account_transactions(account_id)))
        logger.debug("running_balance: %d rows", len(rows))
        return rows

    def calculated_balances(self) -> dict[str, Decimal]:
        """Full-history sum of signed amounts, keyed by account id."""
        return calculated_balances(self.store)

    def avg_transaction_vs_avg_balance(self, months: int) -> list[TransactionBalanceComparison]:
        """Average transaction amount in the window vs average account balance.

        Customers without a transaction in the trailing window are not
        reported (inner join on the windowed transactions).

        Parameters
        ----------
        months : int
            Size of the trailing window in calendar months (>= 0).

        Returns
        -------
        list[TransactionBalanceComparison]
            Ordered by customer_id.
        """
        months = require_non_negative_int("months", months)
        cutoff = months_before(self.clock.today(), months)

        amounts: dict[str, list[Decimal]] = defaultdict(list)
        for tx in self.store.transactions:
            if tx.transaction_date < cutoff:
                continue
            account = self.store.accounts.get(tx.account_id)
            if account is None:
                continue
            amounts[account.customer_id].append(tx.amount)

        rows = []
        for customer_id in sorted(amounts):
            balances = [a.balance for a in self.store.get_customer_accounts(customer_id)]
            rows.append(
                TransactionBalanceComparison(
                    customer_id=customer_id,
                    avg_transaction_amount=_mean(amounts[customer_id]),
                    avg_balance=_mean(balances),
                )
            )
        return rows

    def transaction_counts(self) -> list[CustomerActivity]:
        """Number of transactions per customer across all their accounts.

        Returns
        -------
        list[CustomerActivity]
            Count descending, ties by customer_id. Customers without
            transactions, and transactions that cannot be joined to a
            customer, do not appear.
        """
        counts: dict[str, int] = defaultdict(int)
        for tx in self.store.transactions:
            customer = self.store.get_account_owner(tx.account_id)
            if customer is not None:
                counts[customer.customer_id] += 1

        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return [
            CustomerActivity(
                customer_id=cid,
                first_name=self.store.customers[cid].first_name,
                last_name=self.store.customers[cid].last_name,
                transaction_count=count,
            )
            for cid, count in ranked
        ]

    def most_frequent_customer(self) -> list[CustomerActivity]:
        """The customer with the most transactions (ties by customer_id).

        Returns an empty list when no transaction joins to a customer.
        """
        return self.transaction_counts()[:1]
