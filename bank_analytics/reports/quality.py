"""Data quality audit over the case-study tables.

Each check is a pure function of the snapshot that returns its findings.
Bad data is the subject of the audit, so no check raises on it and one
check never prevents another from running.
"""

import logging
from collections import Counter
from decimal import Decimal
from typing import Callable

from bank_analytics.models.financial import AccountType
from bank_analytics.models.reports import (
    BalanceMismatch,
    DuplicateAccount,
    DuplicateKey,
    InvalidTransactionType,
    MissingCustomerData,
    NegativeAmount,
    NegativeBalance,
    OrphanRecord,
)
from bank_analytics.reports.ledger import calculated_balances
from bank_analytics.store.financial import FinancialDataStore

logger = logging.getLogger(__name__)

# (attribute, label) in reporting order
CUSTOMER_REQUIRED_FIELDS = (
    ("address", "Missing Address"),
    ("date_of_birth", "Missing DOB"),
    ("zip", "Missing ZIP"),
)

# Tables in load order, for ordering primary key findings
TABLE_ORDER = ("customers", "accounts", "transactions")


class DataQualityAuditor:
    """Run data quality checks and collect findings.

    Parameters
    ----------
    store : FinancialDataStore
        Snapshot to audit. Never modified.
    """

    def __init__(self, store: FinancialDataStore) -> None:
        self.store = store

    @property
    def checks(self) -> dict[str, Callable[[], list]]:
        """Check name -> bound check method, in reporting order."""
        return {
            "balance_mismatch": self.balance_mismatch,
            "missing_customer_data": self.missing_customer_data,
            "duplicate_accounts": self.duplicate_accounts,
            "duplicate_primary_keys": self.duplicate_primary_keys,
            "invalid_transaction_types": self.invalid_transaction_types,
            "negative_non_credit_balances": self.negative_non_credit_balances,
            "negative_transaction_amounts": self.negative_transaction_amounts,
            "orphan_accounts": self.orphan_accounts,
            "orphan_transactions": self.orphan_transactions,
        }

    def balance_mismatch(self) -> list[BalanceMismatch]:
        """Accounts whose stored balance differs from their transaction history.

        An account without transactions has no calculated balance; it is
        reported (with ``calculated_balance=None``) only when its stored
        balance is not zero.
        """
        calculated = calculated_balances(self.store)

        findings = []
        for account_id in sorted(self.store.accounts):
            account = self.store.accounts[account_id]
            expected = calculated.get(account_id)
            if expected is None:
                if account.balance != 0:
                    findings.append(BalanceMismatch(account_id, account.balance, None))
            elif account.balance != expected:
                findings.append(BalanceMismatch(account_id, account.balance, expected))
        return findings

    def missing_customer_data(self) -> list[MissingCustomerData]:
        """Customers whose address, date of birth or ZIP code is null.

        Only ``None`` counts as missing. Loaders already turn blank cells
        into ``None``; a blank string set in code is a value.
        """
        findings = []
        for customer_id in sorted(self.store.customers):
            customer = self.store.customers[customer_id]
            missing = [
                label
                for attr, label in CUSTOMER_REQUIRED_FIELDS
                if getattr(customer, attr) is None
            ]
            if missing:
                findings.append(
                    MissingCustomerData(
                        customer_id=customer.customer_id,
                        first_name=customer.first_name,
                        last_name=customer.last_name,
                        missing_fields=", ".join(missing),
                    )
                )
        return findings

    def duplicate_accounts(self) -> list[DuplicateAccount]:
        """Customers holding more than one account of the same type."""
        counts = Counter(
            (account.customer_id, account.account_type) for account in self.store.accounts.values()
        )
        return [
            DuplicateAccount(customer_id=cid, account_type=atype, number_of_duplicates=count)
            for (cid, atype), count in sorted(counts.items())
            if count > 1
        ]

    def duplicate_primary_keys(self) -> list[DuplicateKey]:
        """Customer, account or transaction ids that occur on more than one row.

        Ordered by table (customers, accounts, transactions), then id.
        """
        findings = [
            DuplicateKey(table=table, record_id=key, occurrences=count)
            for (table, key), count in self.store.duplicate_keys().items()
        ]
        return sorted(findings, key=lambda f: (TABLE_ORDER.index(f.table), f.record_id))

    def invalid_transaction_types(self) -> list[InvalidTransactionType]:
        """Transactions whose type is outside Deposit/Withdrawal/Payment/Transfer."""
        findings = [
            InvalidTransactionType(tx.transaction_id, tx.account_id, tx.transaction_type)
            for tx in self.store.transactions
            if not tx.is_valid_type
        ]
        return sorted(findings, key=lambda f: f.transaction_id)

    def negative_non_credit_balances(self) -> list[NegativeBalance]:
        """Non-credit accounts with a balance below zero."""
        findings = [
            NegativeBalance(a.account_id, a.customer_id, a.account_type, a.balance)
            for a in self.store.accounts.values()
            if a.account_type != AccountType.CREDIT and a.balance < 0
        ]
        return sorted(findings, key=lambda f: f.account_id)

    def negative_transaction_amounts(self) -> list[NegativeAmount]:
        """Transactions whose amount is negative (amounts are magnitudes)."""
        findings = [
            NegativeAmount(tx.transaction_id, tx.account_id, tx.transaction_type, tx.amount)
            for tx in self.store.transactions
            if tx.amount < Decimal("0")
        ]
        return sorted(findings, key=lambda f: f.transaction_id)

    def orphan_accounts(self) -> list[OrphanRecord]:
        """Accounts owned by a customer id missing from the customers table."""
        findings = [
            OrphanRecord("accounts", a.account_id, a.customer_id)
            for a in self.store.accounts.values()
            if a.customer_id not in self.store.customers
        ]
        return sorted(findings, key=lambda f: f.record_id)

    def orphan_transactions(self) -> list[OrphanRecord]:
        """Transactions booked on an account id missing from the accounts table."""
        findings = [
            OrphanRecord("transactions", tx.transaction_id, tx.account_id)
            for tx in self.store.transactions
            if tx.account_id not in self.store.accounts
        ]
        return sorted(findings, key=lambda f: f.record_id)

    def run_all(self) -> dict[str, list]:
        """Run every check and return findings keyed by check name."""
        results = {}
        for name, check in self.checks.items():
            results[name] = check()
            logger.debug(
                "Check %s: %d findings",
                name,
                len(results[name]),
                extra={"check": name, "rows": len(results[name])},
            )

        total = sum(len(findings) for findings in results.values())
        if total:
            logger.warning(
                "Data quality audit found %d issues: %s",
                total,
                ", ".join(f"{name}={len(f)}" for name, f in results.items() if f),
            )
        else:
            logger.info("Data quality audit found no issues")
        return results

    def summary(self) -> dict[str, int]:
        """Finding counts per check."""
        return {name: len(findings) for name, findings in self.run_all().items()}
