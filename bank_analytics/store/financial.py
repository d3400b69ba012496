"""Financial snapshot store with relationship indexes."""

import logging
from collections import Counter
from dataclasses import dataclass, field

from bank_analytics.exceptions import DuplicateEntityError, ReferentialIntegrityError
from bank_analytics.models.financial import Account, Customer, Transaction

logger = logging.getLogger(__name__)


@dataclass
class FinancialDataStore:
    """In-memory snapshot of the customers, accounts and transactions tables.

    The store is filled once by a loader and then only read. Rows are never
    corrected: an account pointing at an unknown customer, or a transaction
    pointing at an unknown account, is kept (unless ``strict`` is set) so
    the data quality audit can report it, and joins simply skip it.

    A repeated primary key is recorded for the audit as well. The first
    customer or account row with a given id wins; repeated transaction rows
    are all kept, since every one of them moves the ledger.

    Parameters
    ----------
    strict : bool
        Reject rows with dangling foreign keys or repeated primary keys
        instead of keeping them.
    """

    strict: bool = False

    # Primary entities
    customers: dict[str, Customer] = field(default_factory=dict)
    accounts: dict[str, Account] = field(default_factory=dict)

    # Transactions, in load order
    transactions: list[Transaction] = field(default_factory=list)

    # Relationship indexes
    _customer_accounts: dict[str, list[str]] = field(default_factory=dict)
    _account_transactions: dict[str, list[int]] = field(default_factory=dict)
    _transaction_ids: set[str] = field(default_factory=set)

    # (table, key) -> rows seen beyond the first
    _repeated_keys: Counter[tuple[str, str]] = field(default_factory=Counter)

    def add_customer(self, customer: Customer) -> None:
        """Add a customer to the store."""
        if customer.customer_id in self.customers:
            self._repeated("customers", "Customer", customer.customer_id)
            return

        self.customers[customer.customer_id] = customer
        self._customer_accounts.setdefault(customer.customer_id, [])

    def add_account(self, account: Account) -> None:
        """Add an account to the store."""
        if account.account_id in self.accounts:
            self._repeated("accounts", "Account", account.account_id)
            return

        if account.customer_id not in self.customers:
            if self.strict:
                raise ReferentialIntegrityError(f"Customer {account.customer_id} not found")
            logger.debug(
                "Account %s references unknown customer %s",
                account.account_id,
                account.customer_id,
            )

        self.accounts[account.account_id] = account
        self._customer_accounts.setdefault(account.customer_id, []).append(account.account_id)

    def add_transaction(self, transaction: Transaction) -> None:
        """Add a transaction to the store."""
        if transaction.transaction_id in self._transaction_ids:
            self._repeated("transactions", "Transaction", transaction.transaction_id)

        if transaction.account_id not in self.accounts:
            if self.strict:
                raise ReferentialIntegrityError(f"Account {transaction.account_id} not found")
            logger.debug(
                "Transaction %s references unknown account %s",
                transaction.transaction_id,
                transaction.account_id,
            )

        idx = len(self.transactions)
        self.transactions.append(transaction)
        self._transaction_ids.add(transaction.transaction_id)
        self._account_transactions.setdefault(transaction.account_id, []).append(idx)

    def _repeated(self, table: str, label: str, key: str) -> None:
        if self.strict:
            raise DuplicateEntityError(f"{label} {key} already loaded")
        logger.debug("%s %s loaded more than once", label, key)
        self._repeated_keys[(table, key)] += 1

    # Query methods
    def get_customer_accounts(self, customer_id: str) -> list[Account]:
        """Get all accounts for a customer, in load order."""
        account_ids = self._customer_accounts.get(customer_id, [])
        return [self.accounts[aid] for aid in account_ids]

    def get_account_transactions(self, account_id: str) -> list[Transaction]:
        """Get all transactions booked against an account id, in load order.

        Works for account ids missing from the accounts table as well.
        """
        indices = self._account_transactions.get(account_id, [])
        return [self.transactions[i] for i in indices]

    def get_account_owner(self, account_id: str) -> Customer | None:
        """Get the customer owning an account, or None if either is missing."""
        account = self.accounts.get(account_id)
        if account is None:
            return None
        return self.customers.get(account.customer_id)

    def transaction_account_ids(self) -> list[str]:
        """All account ids that have at least one transaction."""
        return list(self._account_transactions)

    def duplicate_keys(self) -> dict[tuple[str, str], int]:
        """(table, primary key) -> row count, for keys loaded more than once."""
        return {key: extra + 1 for key, extra in self._repeated_keys.items()}

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "customers": len(self.customers),
            "accounts": len(self.accounts),
            "transactions": len(self.transactions),
        }
