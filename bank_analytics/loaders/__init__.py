"""Table loaders producing a FinancialDataStore snapshot."""

from pathlib import Path

from bank_analytics.config import AnalyticsConfig
from bank_analytics.exceptions import ConfigurationError
from bank_analytics.loaders.csv_file import CsvDirectoryLoader
from bank_analytics.loaders.json_file import JsonFileLoader
from bank_analytics.loaders.postgres import PostgresLoader
from bank_analytics.store.financial import FinancialDataStore

__all__ = ["CsvDirectoryLoader", "JsonFileLoader", "PostgresLoader", "load_snapshot"]


def load_snapshot(
    config: AnalyticsConfig,
    path: str | Path | None = None,
    strict: bool = False,
) -> FinancialDataStore:
    """Load the tables from the source named in ``config``.

    Parameters
    ----------
    config : AnalyticsConfig
        Selects the source ("csv", "json" or "postgres") and its settings.
    path : str | Path | None
        Overrides ``config.source_path`` for file sources.
    strict : bool
        Reject accounts and transactions whose parent row is missing.

    Returns
    -------
    FinancialDataStore
        Loaded snapshot.
    """
    source_path = Path(path) if path is not None else config.source_path
    if config.source == "csv":
        return CsvDirectoryLoader(source_path, strict=strict).load()
    if config.source == "json":
        return JsonFileLoader(source_path, strict=strict).load()
    if config.source == "postgres":
        return PostgresLoader(config.postgres, strict=strict).load()
    raise ConfigurationError(f"Unknown data source {config.source!r}")
