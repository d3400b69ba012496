"""Load the case-study tables from PostgreSQL."""

import logging
from typing import Any

import psycopg
from psycopg import sql
from psycopg.rows import dict_row

from bank_analytics.config import PostgresConfig
from bank_analytics.exceptions import LoaderError
from bank_analytics.loaders.parsing import (
    ACCOUNT_COLUMNS,
    CUSTOMER_COLUMNS,
    TRANSACTION_COLUMNS,
    build_store,
)
from bank_analytics.store.financial import FinancialDataStore

logger = logging.getLogger(__name__)


class PostgresLoader:
    """Read the three tables from a PostgreSQL schema with psycopg.

    Only the columns the reports need are selected, so wider source tables
    load fine.
    """

    def __init__(self, config: PostgresConfig | str, strict: bool = False) -> None:
        """Initialize PostgreSQL loader.

        Parameters
        ----------
        config : PostgresConfig | str
            Connection configuration or a connection string (tables are
            then read from the default schema names).
        strict : bool
            Reject rows with dangling foreign keys.
        """
        if isinstance(config, str):
            self.conninfo = config
            config = PostgresConfig()
        else:
            self.conninfo = config.connection_string
        self.config = config
        self.strict = strict

    def load(self) -> FinancialDataStore:
        """Read all three tables into a new store."""
        logger.info(
            "Loading tables from PostgreSQL %s:%s/%s schema %s",
            self.config.host,
            self.config.port,
            self.config.database,
            self.config.schema,
        )
        try:
            with psycopg.connect(self.conninfo, row_factory=dict_row) as conn:
                with conn.cursor() as cur:
                    customers = self._fetch(cur, self.config.customers_table, CUSTOMER_COLUMNS)
                    accounts = self._fetch(cur, self.config.accounts_table, ACCOUNT_COLUMNS)
                    transactions = self._fetch(cur, self.config.transactions_table, TRANSACTION_COLUMNS)
        except psycopg.Error as e:
            raise LoaderError(f"PostgreSQL read failed: {e}") from e

        return build_store(customers, accounts, transactions, strict=self.strict)

    def _fetch(self, cur: Any, table: str, columns: tuple[str, ...]) -> list[dict[str, Any]]:
        query = sql.SQL("SELECT {fields} FROM {table}").format(
            fields=sql.SQL(", ").join(sql.Identifier(c) for c in columns),
            table=sql.Identifier(self.config.schema, table),
        )
        cur.execute(query)
        rows = cur.fetchall()
        logger.debug("Fetched %d rows from %s.%s", len(rows), self.config.schema, table)
        return rows
