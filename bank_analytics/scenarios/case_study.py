"""Case-study scenario: a small bank with known data quality defects."""

import logging
import random
from collections import defaultdict
from dataclasses import replace
from datetime import timedelta
from decimal import Decimal
from typing import Any

from bank_analytics.clock import Clock, SystemClock
from bank_analytics.generators.financial import (
    AccountGenerator,
    CustomerGenerator,
    DataQualityPatternGenerator,
    TransactionGenerator,
)
from bank_analytics.models.financial import Account, AccountType, Transaction
from bank_analytics.store.financial import FinancialDataStore

logger = logging.getLogger(__name__)

# Accounts are opened at most this long before "today"
HISTORY_DAYS = 3 * 365


class CaseStudyScenario:
    """Generate customers, accounts and transactions with labelled defects.

    This scenario creates:
    - Customers with complete profiles, 1-3 accounts of distinct types each
    - Transaction histories whose sums match the stored balances
    - Defects at roughly ``issue_rate`` of customers/accounts:
        - Customers missing address, date of birth or ZIP
        - Duplicate accounts of the same type
        - Transactions with an invalid type
        - Overdrawn non-credit accounts
        - Stored balances that drift from the history

    Every injected defect is recorded in ``expected_findings`` so the
    audit can be checked against ground truth.
    """

    def __init__(
        self,
        num_customers: int = 100,
        transactions_per_account: int = 20,
        issue_rate: float = 0.05,
        seed: int | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Initialize case-study scenario.

        Parameters
        ----------
        num_customers : int
            Number of customers to generate.
        transactions_per_account : int
            Transactions generated per clean account.
        issue_rate : float
            Share of customers/accounts given each defect (0.0 to 1.0).
        seed : int | None
            Random seed for reproducibility.
        clock : Clock | None
            Source of "today"; transactions never go past it.
        """
        if not 0.0 <= issue_rate <= 1.0:
            raise ValueError(f"issue_rate must be between 0 and 1, got {issue_rate}")

        self.num_customers = num_customers
        self.transactions_per_account = transactions_per_account
        self.issue_rate = issue_rate
        self.seed = seed
        self.clock = clock or SystemClock()

        if seed is not None:
            random.seed(seed)

        self.store = FinancialDataStore()
        self._customer_gen = CustomerGenerator(seed=seed)
        self._account_gen = AccountGenerator(seed=seed)
        self._transaction_gen = TransactionGenerator(seed=seed)
        self._pattern_gen = DataQualityPatternGenerator(seed=seed)

        self._expected: dict[str, set[Any]] = defaultdict(set)

    def _issue_count(self, population: int) -> int:
        if self.issue_rate == 0 or population == 0:
            return 0
        return min(population, max(1, round(population * self.issue_rate)))

    def generate(self) -> FinancialDataStore:
        """Generate all data for the case study.

        Returns
        -------
        FinancialDataStore
            Store containing all generated data.
        """
        logger.info(
            "Starting case study scenario: %d customers, %.1f%% issue rate",
            self.num_customers,
            self.issue_rate * 100,
        )
        today = self.clock.today()
        opened_between = (today - timedelta(days=HISTORY_DAYS), today)

        customers = list(self._customer_gen.generate_batch(self.num_customers))
        for idx in random.sample(range(len(customers)), self._issue_count(len(customers))):
            customers[idx] = self._pattern_gen.inject_missing_fields(customers[idx])
            self._expected["missing_customer_data"].add(customers[idx].customer_id)

        accounts: dict[str, Account] = {}
        transactions: list[Transaction] = []
        for customer in customers:
            for account in self._account_gen.generate_for_customer(
                customer.customer_id, opened_between
            ):
                history = self._transaction_gen.generate_for_account(
                    account, today, self.transactions_per_account
                )
                balance = sum((tx.signed_amount for tx in history), Decimal("0"))
                accounts[account.account_id] = replace(account, balance=balance)
                transactions.extend(history)

        logger.info(
            "Generated %d customers with %d accounts and %d transactions",
            len(customers),
            len(accounts),
            len(transactions),
        )

        self._inject_account_defects(accounts, transactions)

        for customer in customers:
            self.store.add_customer(customer)
        for account in accounts.values():
            self.store.add_account(account)
        for tx in transactions:
            self.store.add_transaction(tx)

        logger.info(
            "Injected defects: %s",
            ", ".join(f"{name}={len(keys)}" for name, keys in sorted(self._expected.items()))
            or "none",
        )
        return self.store

    def _inject_account_defects(
        self,
        accounts: dict[str, Account],
        transactions: list[Transaction],
    ) -> None:
        # Overdrafts and balance drift go to disjoint accounts so each lands in one check
        today = self.clock.today()
        candidates = sorted(accounts)
        random.shuffle(candidates)
        count = self._issue_count(len(candidates))

        non_credit = [aid for aid in candidates if accounts[aid].account_type != AccountType.CREDIT]
        overdrawn = non_credit[:count]
        for account_id in overdrawn:
            account, withdrawal = self._pattern_gen.inject_negative_balance(
                accounts[account_id], self._transaction_gen.next_id(), today
            )
            accounts[account_id] = account
            transactions.append(withdrawal)
            self._expected["negative_non_credit_balances"].add(account_id)
        remaining = [aid for aid in candidates if aid not in overdrawn]

        for account_id in remaining[:count]:
            accounts[account_id] = self._pattern_gen.inject_balance_drift(accounts[account_id])
            self._expected["balance_mismatch"].add(account_id)
        remaining = remaining[count:]

        by_account: dict[str, list[Transaction]] = defaultdict(list)
        for tx in transactions:
            by_account[tx.account_id].append(tx)
        with_history = [aid for aid in remaining if by_account[aid]]
        for account_id in with_history[:count]:
            template = random.choice(by_account[account_id])
            invalid = self._pattern_gen.inject_invalid_type(
                template, self._transaction_gen.next_id()
            )
            transactions.append(invalid)
            self._expected["invalid_transaction_types"].add(invalid.transaction_id)

        for account_id in remaining[count : 2 * count]:
            original = accounts[account_id]
            duplicate = self._pattern_gen.inject_duplicate_account(
                original, self._account_gen.next_id()
            )
            accounts[duplicate.account_id] = duplicate
            self._expected["duplicate_accounts"].add((original.customer_id, original.account_type))

    @property
    def expected_findings(self) -> dict[str, set[Any]]:
        """Record keys each data quality check should report.

        Keys are account ids, customer ids, transaction ids, or
        ``(customer_id, account_type)`` pairs for duplicate accounts.
        """
        return dict(self._expected)

    def export(self, sinks: list[Any]) -> None:
        """Export generated data to sinks.

        Parameters
        ----------
        sinks : list[Any]
            List of sink instances (JsonFileSink, KafkaSink, etc.).
        """
        for sink in sinks:
            sink.write_batch("customers", list(self.store.customers.values()))
            sink.write_batch("accounts", list(self.store.accounts.values()))
            sink.write_batch("transactions", self.store.transactions)

        logger.info("Exported data to %d sinks", len(sinks))
