"""Tests for the case-study scenario."""

from datetime import date
from pathlib import Path
from typing import Any

import pytest

from bank_analytics.clock import FixedClock
from bank_analytics.loaders import CsvDirectoryLoader, JsonFileLoader
from bank_analytics.reports import DataQualityAuditor
from bank_analytics.reports.ledger import calculated_balances
from bank_analytics.scenarios import CaseStudyScenario
from bank_analytics.sinks import CsvFileSink, JsonFileSink
from bank_analytics.store.financial import FinancialDataStore

# How each check's findings are keyed in expected_findings
FINDING_KEYS = {
    "balance_mismatch": lambda f: f.account_id,
    "missing_customer_data": lambda f: f.customer_id,
    "duplicate_accounts": lambda f: (f.customer_id, f.account_type),
    "duplicate_primary_keys": lambda f: (f.table, f.record_id),
    "invalid_transaction_types": lambda f: f.transaction_id,
    "negative_non_credit_balances": lambda f: f.account_id,
    "negative_transaction_amounts": lambda f: f.transaction_id,
    "orphan_accounts": lambda f: f.record_id,
    "orphan_transactions": lambda f: f.record_id,
}


def _found(store: FinancialDataStore) -> dict[str, set[Any]]:
    results = DataQualityAuditor(store).run_all()
    return {name: {FINDING_KEYS[name](f) for f in findings} for name, findings in results.items()}


@pytest.fixture
def scenario(seed: int, clock: FixedClock) -> CaseStudyScenario:
    """A generated scenario with defects at 10%."""
    scenario = CaseStudyScenario(
        num_customers=40,
        transactions_per_account=10,
        issue_rate=0.1,
        seed=seed,
        clock=clock,
    )
    scenario.generate()
    return scenario


class TestCaseStudyScenario:
    """Tests for CaseStudyScenario."""

    def test_generate_counts(self, scenario: CaseStudyScenario) -> None:
        """Every customer gets at least one account with history."""
        summary = scenario.store.summary()

        assert summary["customers"] == 40
        assert summary["accounts"] >= 40
        assert summary["transactions"] >= summary["customers"] * 10

    def test_audit_matches_injected_defects(self, scenario: CaseStudyScenario) -> None:
        """The audit finds exactly what was injected."""
        found = _found(scenario.store)
        expected = scenario.expected_findings

        for check in FINDING_KEYS:
            assert found[check] == expected.get(check, set()), check

    def test_every_defect_kind_injected(self, scenario: CaseStudyScenario) -> None:
        """Each injected defect kind occurs at least once."""
        expected = scenario.expected_findings

        for check in (
            "balance_mismatch",
            "missing_customer_data",
            "duplicate_accounts",
            "invalid_transaction_types",
            "negative_non_credit_balances",
        ):
            assert expected.get(check), check

    def test_clean_scenario(self, seed: int, clock: FixedClock) -> None:
        """Without defects every account reconciles and nothing is flagged."""
        scenario = CaseStudyScenario(num_customers=20, issue_rate=0.0, seed=seed, clock=clock)
        store = scenario.generate()

        calculated = calculated_balances(store)
        for account in store.accounts.values():
            assert account.balance == calculated.get(account.account_id, 0)
        assert all(not keys for keys in _found(store).values())
        assert scenario.expected_findings == {}

    def test_no_transaction_after_today(self, scenario: CaseStudyScenario, today: date) -> None:
        """Histories stop at the clock's date."""
        assert max(tx.transaction_date for tx in scenario.store.transactions) <= today

    def test_reproducible(self, seed: int, clock: FixedClock) -> None:
        """The same seed gives the same snapshot."""
        first = CaseStudyScenario(num_customers=10, seed=seed, clock=clock).generate()
        second = CaseStudyScenario(num_customers=10, seed=seed, clock=clock).generate()

        assert first.accounts == second.accounts
        assert first.transactions == second.transactions

    def test_invalid_issue_rate(self) -> None:
        """issue_rate is a share between 0 and 1."""
        with pytest.raises(ValueError):
            CaseStudyScenario(issue_rate=1.5)


class TestExportRoundTrip:
    """Exported tables load back into an equivalent snapshot."""

    def test_csv(self, scenario: CaseStudyScenario, tmp_path: Path) -> None:
        """CSV export is readable by CsvDirectoryLoader."""
        scenario.export([CsvFileSink(tmp_path)])

        loaded = CsvDirectoryLoader(tmp_path).load()

        assert loaded.customers == scenario.store.customers
        assert loaded.accounts == scenario.store.accounts
        assert _found(loaded) == _found(scenario.store)

    def test_json(self, scenario: CaseStudyScenario, tmp_path: Path) -> None:
        """JSON export is readable by JsonFileLoader."""
        scenario.export([JsonFileSink(tmp_path)])

        loaded = JsonFileLoader(tmp_path).load()

        assert loaded.transactions == scenario.store.transactions
