"""Row-to-model conversion shared by all table loaders."""

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping

from bank_analytics.exceptions import LoaderError
from bank_analytics.models.financial import Account, Customer, Transaction
from bank_analytics.store.financial import FinancialDataStore

logger = logging.getLogger(__name__)

# Accepted text date layouts, tried in order
DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y")

CUSTOMER_COLUMNS = ("customer_id", "first_name", "last_name", "address", "date_of_birth", "zip")
ACCOUNT_COLUMNS = ("account_id", "customer_id", "account_type", "balance", "opening_date")
TRANSACTION_COLUMNS = ("transaction_id", "account_id", "transaction_date", "transaction_type", "amount")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _text(value: Any) -> str | None:
    if _is_blank(value):
        return None
    return str(value).strip()


def parse_date(value: Any) -> date | None:
    """Parse a date from a date, datetime or text value; blanks become None."""
    if _is_blank(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"unrecognised date {text!r}")


def parse_decimal(value: Any) -> Decimal | None:
    """Parse a Decimal from a number or text value; blanks become None."""
    if _is_blank(value):
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    try:
        # str() keeps floats at their shortest repr (0.1 -> "0.1")
        return Decimal(str(value).strip().replace(",", ""))
    except InvalidOperation as e:
        raise ValueError(f"not a number: {value!r}") from e


def _required(column: str, value: Any) -> Any:
    if value is None:
        raise ValueError(f"{column} is required")
    return value


def parse_customer(row: Mapping[str, Any]) -> Customer:
    """Build a Customer from a source row."""
    return Customer(
        customer_id=_required("customer_id", _text(row.get("customer_id"))),
        first_name=_text(row.get("first_name")) or "",
        last_name=_text(row.get("last_name")) or "",
        address=_text(row.get("address")),
        date_of_birth=parse_date(row.get("date_of_birth")),
        zip=_text(row.get("zip")),
    )


def parse_account(row: Mapping[str, Any]) -> Account:
    """Build an Account from a source row."""
    return Account(
        account_id=_required("account_id", _text(row.get("account_id"))),
        customer_id=_required("customer_id", _text(row.get("customer_id"))),
        account_type=_text(row.get("account_type")) or "",
        balance=_required("balance", parse_decimal(row.get("balance"))),
        opening_date=_required("opening_date", parse_date(row.get("opening_date"))),
    )


def parse_transaction(row: Mapping[str, Any]) -> Transaction:
    """Build a Transaction from a source row."""
    return Transaction(
        transaction_id=_required("transaction_id", _text(row.get("transaction_id"))),
        account_id=_required("account_id", _text(row.get("account_id"))),
        transaction_date=_required("transaction_date", parse_date(row.get("transaction_date"))),
        transaction_type=_text(row.get("transaction_type")) or "",
        amount=_required("amount", parse_decimal(row.get("amount"))),
    )


def build_store(
    customers: Iterable[Mapping[str, Any]],
    accounts: Iterable[Mapping[str, Any]],
    transactions: Iterable[Mapping[str, Any]],
    strict: bool = False,
) -> FinancialDataStore:
    """Parse raw rows of the three tables into a FinancialDataStore.

    Tables are loaded parents first so foreign keys can be checked.

    Parameters
    ----------
    customers, accounts, transactions : Iterable[Mapping[str, Any]]
        Raw rows keyed by column name.
    strict : bool
        Passed to the store; reject dangling foreign keys.

    Returns
    -------
    FinancialDataStore
        Loaded snapshot.

    Raises
    ------
    LoaderError
        If a row has a missing required value or an unparseable field.
    """
    store = FinancialDataStore(strict=strict)

    for table, rows, parse, add in (
        ("customers", customers, parse_customer, store.add_customer),
        ("accounts", accounts, parse_account, store.add_account),
        ("transactions", transactions, parse_transaction, store.add_transaction),
    ):
        count = 0
        for line_no, row in enumerate(rows, start=1):
            try:
                entity = parse(row)
            except ValueError as e:
                raise LoaderError(f"{table} row {line_no}: {e}") from e
            add(entity)
            count += 1
        logger.info("Loaded %d %s", count, table, extra={"table": table, "rows": count})

    return store
