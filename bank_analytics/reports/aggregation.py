"""Balance and deposit aggregation reports."""

import logging
from collections import defaultdict
from decimal import Decimal

from bank_analytics.clock import Clock, days_before, months_before
from bank_analytics.models.financial import TransactionType
from bank_analytics.models.reports import (
    CustomerBalance,
    CustomerDeposits,
    CustomerTypeBalance,
    RecentAccount,
)
from bank_analytics.reports.params import require_non_negative_int, require_positive_int
from bank_analytics.store.financial import FinancialDataStore

logger = logging.getLogger(__name__)


class AggregationReporter:
    """Grouped sums over accounts and transactions.

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

    def balance_per_customer_and_type(self) -> list[CustomerTypeBalance]:
        """Sum of balances per (customer_id, account_type).

        Returns
        -------
        list[CustomerTypeBalance]
            Ordered by customer_id, then account_type.
        """
        totals: dict[tuple[str, str], Decimal] = defaultdict(Decimal)
        for account in self.store.accounts.values():
            totals[(account.customer_id, account.account_type)] += account.balance

        rows = [
            CustomerTypeBalance(customer_id=cid, account_type=atype, total_balance=total)
            for (cid, atype), total in sorted(totals.items())
        ]
        logger.debug("balance_per_customer_and_type: %d rows", len(rows))
        return rows

    def accounts_opened_within(self, days: int) -> list[RecentAccount]:
        """Accounts opened on or after ``today - days``, with their owners.

        Parameters
        ----------
        days : int
            Size of the trailing window in days (>= 0).

        Returns
        -------
        list[RecentAccount]
            Ordered by opening_date, then account_id. Accounts whose
            customer is missing are left out.
        """
        days = require_non_negative_int("days", days)
        cutoff = days_before(self.clock.today(), days)

        rows = []
        for account in self.store.accounts.values():
            if account.opening_date < cutoff:
                continue
            customer = self.store.customers.get(account.customer_id)
            if customer is None:
                continue
            rows.append(
                RecentAccount(
                    customer_id=customer.customer_id,
                    first_name=customer.first_name,
                    last_name=customer.last_name,
                    account_id=account.account_id,
                    opening_date=account.opening_date,
                )
            )

        rows.sort(key=lambda r: (r.opening_date, r.account_id))
        logger.debug("accounts_opened_within(%d) since %s: %d rows", days, cutoff, len(rows))
        return rows

    def top_customers_by_balance(self, n: int) -> list[CustomerBalance]:
        """Customers with the largest total balance across their accounts.

        Parameters
        ----------
        n : int
            Number of customers to return (>= 1).

        Returns
        -------
        list[CustomerBalance]
            At most ``n`` rows, total descending, ties by customer_id.
        """
        n = require_positive_int("n", n)

        totals: dict[str, Decimal] = defaultdict(Decimal)
        for account in self.store.accounts.values():
            if account.customer_id in self.store.customers:
                totals[account.customer_id] += account.balance

        ranked = sorted(totals.items(), key=lambda item: (-item[1], item[0]))[:n]
        rows = []
        for customer_id, total in ranked:
            customer = self.store.customers[customer_id]
            rows.append(
                CustomerBalance(
                    customer_id=customer_id,
                    first_name=customer.first_name,
                    last_name=customer.last_name,
                    total_balance=total,
                )
            )
        return rows

    def total_deposits_within(self, months: int) -> list[CustomerDeposits]:
        """Deposits per customer over the trailing ``months`` calendar months.

        Every customer id that owns at least one account is reported, with
        a zero total when none of its deposits fall in the window.

        Parameters
        ----------
        months : int
            Size of the trailing window in calendar months (>= 0).

        Returns
        -------
        list[CustomerDeposits]
            Ordered by customer_id.
        """
        months = require_non_negative_int("months", months)
        cutoff = months_before(self.clock.today(), months)

        totals: dict[str, Decimal] = {}
        for customer_id, accounts in self._accounts_by_customer().items():
            total = Decimal("0")
            for account in accounts:
                for tx in self.store.get_account_transactions(account.account_id):
                    if tx.transaction_type == TransactionType.DEPOSIT and tx.transaction_date >= cutoff:
                        total += tx.amount
            totals[customer_id] = total

        rows = [
            CustomerDeposits(customer_id=cid, total_deposits=total)
            for cid, total in sorted(totals.items())
        ]
        logger.debug("total_deposits_within(%d) since %s: %d rows", months, cutoff, len(rows))
        return rows

    def _accounts_by_customer(self) -> dict[str, list]:
        grouped: dict[str, list] = defaultdict(list)
        for account in self.store.accounts.values():
            grouped[account.customer_id].append(account)
        return grouped
