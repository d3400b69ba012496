"""Tests for ReportCatalog."""

from decimal import Decimal

import pytest

from bank_analytics.clock import FixedClock
from bank_analytics.config import ReportConfig
from bank_analytics.exceptions import InvalidParameterError, UnknownReportError
from bank_analytics.reports import ReportCatalog
from bank_analytics.store.financial import FinancialDataStore

REPORTS = [
    "accounts_opened_within",
    "avg_transaction_vs_avg_balance",
    "balance_per_customer_and_type",
    "large_withdrawals_within",
    "most_frequent_customer",
    "running_balance",
    "top_customers_by_balance",
    "total_deposits_within",
    "transaction_counts",
]

CHECKS = [
    "balance_mismatch",
    "missing_customer_data",
    "duplicate_accounts",
    "duplicate_primary_keys",
    "invalid_transaction_types",
    "negative_non_credit_balances",
    "negative_transaction_amounts",
    "orphan_accounts",
    "orphan_transactions",
]


@pytest.fixture
def catalog(store: FinancialDataStore, clock: FixedClock) -> ReportCatalog:
    """Catalog over the sample snapshot with default parameters."""
    return ReportCatalog(store, clock)


class TestCatalogListing:
    """Tests for the listing methods."""

    def test_available_reports(self, catalog: ReportCatalog) -> None:
        """Every report and check is registered, sorted by name."""
        assert catalog.available_reports() == sorted(REPORTS + CHECKS)

    def test_quality_checks(self, catalog: ReportCatalog) -> None:
        """Checks are listed in reporting order."""
        assert catalog.quality_checks() == CHECKS

    def test_descriptions(self, catalog: ReportCatalog) -> None:
        """Descriptions are the first docstring line."""
        descriptions = catalog.descriptions()

        assert set(descriptions) == set(REPORTS + CHECKS)
        assert descriptions["top_customers_by_balance"].startswith("Customers with the largest")
        assert all(descriptions.values())

    def test_parameters(self, catalog: ReportCatalog) -> None:
        """Parameter defaults come from the report config."""
        assert catalog.parameters("top_customers_by_balance") == {"n": 5}
        assert catalog.parameters("large_withdrawals_within") == {
            "threshold": Decimal("500"),
            "days": 30,
        }
        assert catalog.parameters("running_balance") == {}


class TestCatalogRun:
    """Tests for run and run_all."""

    def test_run_with_defaults(self, catalog: ReportCatalog) -> None:
        """Omitted parameters use the defaults."""
        rows = catalog.run("large_withdrawals_within")

        assert [r.transaction_id for r in rows] == ["T03"]

    def test_run_with_override(self, catalog: ReportCatalog) -> None:
        """Given parameters replace the defaults."""
        rows = catalog.run("large_withdrawals_within", days=365)

        assert [r.transaction_id for r in rows] == ["T13", "T03"]

    def test_run_matches_direct_call(self, catalog: ReportCatalog) -> None:
        """The catalog adds no behaviour of its own."""
        assert catalog.run("top_customers_by_balance", n=2) == (
            catalog.aggregation.top_customers_by_balance(2)
        )
        assert catalog.run("balance_mismatch") == catalog.auditor.balance_mismatch()

    def test_custom_config(self, store: FinancialDataStore, clock: FixedClock) -> None:
        """Defaults follow the ReportConfig handed in."""
        catalog = ReportCatalog(store, clock, ReportConfig(top_customers=1))

        assert len(catalog.run("top_customers_by_balance")) == 1

    def test_unknown_report(self, catalog: ReportCatalog) -> None:
        """Unknown names raise UnknownReportError listing the choices."""
        with pytest.raises(UnknownReportError, match="running_balance"):
            catalog.run("net_worth")

    def test_unknown_parameter(self, catalog: ReportCatalog) -> None:
        """Parameters a report does not take are rejected."""
        with pytest.raises(InvalidParameterError, match="limit"):
            catalog.run("top_customers_by_balance", limit=3)

    def test_invalid_parameter_value(self, catalog: ReportCatalog) -> None:
        """Out-of-range values are rejected by the report."""
        with pytest.raises(InvalidParameterError):
            catalog.run("top_customers_by_balance", n=0)

    def test_run_all(self, catalog: ReportCatalog) -> None:
        """Every registered name produces a result list."""
        results = catalog.run_all()

        assert set(results) == set(REPORTS + CHECKS)
        assert results["most_frequent_customer"][0].customer_id == "C1"
        assert len(results["running_balance"]) == 14
