"""Named, parameterised access to every report and data quality check."""

import inspect
import logging
from typing import Any, Callable

from bank_analytics.clock import Clock
from bank_analytics.config import ReportConfig
from bank_analytics.exceptions import InvalidParameterError, UnknownReportError
from bank_analytics.reports.aggregation import AggregationReporter
from bank_analytics.reports.ledger import TransactionLedgerAnalyzer
from bank_analytics.reports.quality import DataQualityAuditor
from bank_analytics.store.financial import FinancialDataStore

logger = logging.getLogger(__name__)


class ReportCatalog:
    """Dispatch reports by name against one snapshot.

    All reports share the same store and clock, so results from one
    catalog are consistent with each other. Parameters left out of a
    ``run`` call fall back to ``ReportConfig``.

    Usage::

        catalog = ReportCatalog(store, FixedClock(date(2024, 6, 30)))
        catalog.run("top_customers_by_balance", n=3)
        catalog.run("balance_mismatch")

    Parameters
    ----------
    store : FinancialDataStore
        Snapshot every report reads from.
    clock : Clock
        Source of "today" for trailing windows.
    config : ReportConfig | None
        Default report parameters.
    """

    def __init__(
        self,
        store: FinancialDataStore,
        clock: Clock,
        config: ReportConfig | None = None,
    ) -> None:
        self.store = store
        self.clock = clock
        self.config = config or ReportConfig()
        self.aggregation = AggregationReporter(store, clock)
        self.ledger = TransactionLedgerAnalyzer(store, clock)
        self.auditor = DataQualityAuditor(store)
        self._reports = self._build_registry()

    def _build_registry(self) -> dict[str, tuple[Callable[..., list], dict[str, Any]]]:
        cfg = self.config
        registry: dict[str, tuple[Callable[..., list], dict[str, Any]]] = {
            "balance_per_customer_and_type": (self.aggregation.balance_per_customer_and_type, {}),
            "accounts_opened_within": (
                self.aggregation.accounts_opened_within,
                {"days": cfg.recent_account_days},
            ),
            "top_customers_by_balance": (
                self.aggregation.top_customers_by_balance,
                {"n": cfg.top_customers},
            ),
            "total_deposits_within": (
                self.aggregation.total_deposits_within,
                {"months": cfg.deposit_months},
            ),
            "large_withdrawals_within": (
                self.ledger.large_withdrawals_within,
                {"threshold": cfg.large_withdrawal_threshold, "days": cfg.large_withdrawal_days},
            ),
            "running_balance": (self.ledger.running_balance, {}),
            "avg_transaction_vs_avg_balance": (
                self.ledger.avg_transaction_vs_avg_balance,
                {"months": cfg.average_months},
            ),
            "most_frequent_customer": (self.ledger.most_frequent_customer, {}),
            "transaction_counts": (self.ledger.transaction_counts, {}),
        }
        for name, check in self.auditor.checks.items():
            registry[name] = (check, {})
        return registry

    def available_reports(self) -> list[str]:
        """Names accepted by ``run``, sorted."""
        return sorted(self._reports)

    def quality_checks(self) -> list[str]:
        """Names of the data quality checks, in reporting order."""
        return list(self.auditor.checks)

    def descriptions(self) -> dict[str, str]:
        """Report name -> first line of its docstring, sorted by name."""
        out = {}
        for name in self.available_reports():
            doc = inspect.getdoc(self._reports[name][0]) or ""
            out[name] = doc.splitlines()[0] if doc else ""
        return out

    def parameters(self, name: str) -> dict[str, Any]:
        """Parameter names of a report with their default values."""
        _, defaults = self._lookup(name)
        return dict(defaults)

    def run(self, name: str, **params: Any) -> list:
        """Run one report and return its rows.

        Parameters
        ----------
        name : str
            Report or check name (see ``available_reports``).
        **params
            Report parameters; omitted ones use the configured defaults.

        Returns
        -------
        list
            Materialised, ordered result rows.

        Raises
        ------
        UnknownReportError
            If ``name`` is not registered.
        InvalidParameterError
            If a parameter is unknown or out of range.
        """
        func, defaults = self._lookup(name)

        unknown = set(params) - set(defaults)
        if unknown:
            raise InvalidParameterError(
                f"Unknown parameter(s) for {name}: {', '.join(sorted(unknown))}"
            )

        kwargs = {**defaults, **params}
        rows = func(**kwargs)
        logger.info(
            "Report %s%s returned %d rows",
            name,
            _format_params(kwargs),
            len(rows),
            extra={"report": name, "params": kwargs, "rows": len(rows)},
        )
        return rows

    def run_all(self) -> dict[str, list]:
        """Run every report and check with default parameters."""
        return {name: self.run(name) for name in self._reports}

    def _lookup(self, name: str) -> tuple[Callable[..., list], dict[str, Any]]:
        try:
            return self._reports[name]
        except KeyError:
            raise UnknownReportError(
                f"Unknown report {name!r}; available: {', '.join(self.available_reports())}"
            ) from None


def _format_params(params: dict[str, Any]) -> str:
    if not params:
        return ""
    return "(" + ", ".join(f"{k}={v}" for k, v in params.items()) + ")"

