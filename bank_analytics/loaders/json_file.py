"""Load the case-study tables from JSON files written by JsonFileSink."""

import json
import logging
from pathlib import Path
from typing import Any

from bank_analytics.exceptions import LoaderError
from bank_analytics.loaders.parsing import build_store
from bank_analytics.store.financial import FinancialDataStore

logger = logging.getLogger(__name__)


class JsonFileLoader:
    """Read ``customers.json``, ``accounts.json`` and ``transactions.json``.

    Each file holds a JSON array of objects keyed by column name.
    """

    def __init__(self, directory: str | Path, strict: bool = False) -> None:
        self.directory = Path(directory)
        self.strict = strict

    def load(self) -> FinancialDataStore:
        """Read all three tables into a new store."""
        logger.info("Loading JSON tables from %s", self.directory)
        return build_store(
            self._read("customers"),
            self._read("accounts"),
            self._read("transactions"),
            strict=self.strict,
        )

    def _read(self, table: str) -> list[dict[str, Any]]:
        path = self.directory / f"{table}.json"
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise LoaderError(f"Cannot read {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise LoaderError(f"Malformed JSON in {path}: {e}") from e

        if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
            raise LoaderError(f"{path} must contain a JSON array of objects")
        return data
