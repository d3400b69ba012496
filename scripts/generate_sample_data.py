#!/usr/bin/env python3
"""Generate a case-study snapshot for trying out the reports.

Writes customers, accounts and transactions (CSV by default, JSON with
--format json) into the output folder, with a known set of data quality
defects injected. The injected defects are printed at the end so the audit
output can be checked against them.
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_analytics.clock import FixedClock, SystemClock
from bank_analytics.logging import setup_logging
from bank_analytics.scenarios import CaseStudyScenario
from bank_analytics.sinks import CsvFileSink, JsonFileSink

logger = logging.getLogger(__name__)


def print_summary(scenario: CaseStudyScenario, output_dir: Path) -> None:
    """Print generation summary."""
    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    for name, count in scenario.store.summary().items():
        print(f"{name + ':':18}{count}")
    print("\nInjected defects:")
    findings = scenario.expected_findings
    if not findings:
        print("  none")
    for check, keys in sorted(findings.items()):
        print(f"  {check + ':':32}{len(keys)}")
    print(f"\nAll files saved to: {output_dir}")
    print("=" * 60)


def main() -> None:
    """Generate the sample snapshot."""
    parser = argparse.ArgumentParser(description="Generate case-study banking data")
    parser.add_argument(
        "--customers",
        type=int,
        default=100,
        help="Number of customers to generate (default: 100)",
    )
    parser.add_argument(
        "--transactions-per-account",
        type=int,
        default=20,
        help="Transactions per account (default: 20)",
    )
    parser.add_argument(
        "--issue-rate",
        type=float,
        default=0.05,
        help="Share of records given each data quality defect (default: 0.05)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--as-of",
        type=date.fromisoformat,
        default=None,
        help="Treat this ISO date as today (default: system date)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=project_root / "data",
        help="Folder to write the tables to (default: ./data)",
    )
    parser.add_argument(
        "--format",
        choices=["csv", "json"],
        default="csv",
        help="Output file format (default: csv)",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    args = parser.parse_args()

    setup_logging(args.log_level)

    clock = FixedClock(args.as_of) if args.as_of else SystemClock()
    scenario = CaseStudyScenario(
        num_customers=args.customers,
        transactions_per_account=args.transactions_per_account,
        issue_rate=args.issue_rate,
        seed=args.seed,
        clock=clock,
    )
    scenario.generate()

    sink = CsvFileSink(args.output_dir) if args.format == "csv" else JsonFileSink(args.output_dir, pretty=True)
    scenario.export([sink])
    sink.close()

    print_summary(scenario, args.output_dir)


if __name__ == "__main__":
    main()
