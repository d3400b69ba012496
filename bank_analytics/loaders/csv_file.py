"""Load the case-study tables from a directory of CSV files."""

import csv
import logging
from pathlib import Path
from typing import Any

from bank_analytics.exceptions import LoaderError
from bank_analytics.loaders.parsing import build_store
from bank_analytics.store.financial import FinancialDataStore

logger = logging.getLogger(__name__)


class CsvDirectoryLoader:
    """Read ``customers.csv``, ``accounts.csv`` and ``transactions.csv``.

    Each file needs a header row naming the columns. Empty cells are read
    as nulls.
    """

    def __init__(self, directory: str | Path, strict: bool = False, encoding: str = "utf-8-sig") -> None:
        """Initialize CSV loader.

        Parameters
        ----------
        directory : str | Path
            Directory holding the three CSV files.
        strict : bool
            Reject rows with dangling foreign keys.
        encoding : str
            File encoding (default tolerates a UTF-8 byte order mark).
        """
        self.directory = Path(directory)
        self.strict = strict
        self.encoding = encoding

    def load(self) -> FinancialDataStore:
        """Read all three tables into a new store."""
        logger.info("Loading CSV tables from %s", self.directory)
        return build_store(
            self._read("customers"),
            self._read("accounts"),
            self._read("transactions"),
            strict=self.strict,
        )

    def _read(self, table: str) -> list[dict[str, Any]]:
        path = self.directory / f"{table}.csv"
        try:
            with open(path, newline="", encoding=self.encoding) as f:
                reader = csv.DictReader(f)
                # A file without even a header row holds no rows
                rows = [_normalise_keys(row) for row in reader]
        except OSError as e:
            raise LoaderError(f"Cannot read {path}: {e}") from e
        except csv.Error as e:
            raise LoaderError(f"Malformed CSV in {path}: {e}") from e
        return rows


def _normalise_keys(row: dict[str | None, Any]) -> dict[str, Any]:
    # Header cells may carry stray whitespace or capitals
    return {key.strip().lower(): value for key, value in row.items() if key is not None}
