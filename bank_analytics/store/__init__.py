"""In-memory snapshot store for the case-study tables."""

from bank_analytics.store.financial import FinancialDataStore

__all__ = ["FinancialDataStore"]
