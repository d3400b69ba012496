#!/usr/bin/env python3
"""Run the banking reports and data quality checks over a snapshot.

Settings come from the environment (see bank_analytics.config); command
line flags override the data source, the reference date and where the
results go.

Examples::

    python scripts/run_reports.py --list
    python scripts/run_reports.py --source csv --path data --as-of 2024-06-30
    python scripts/run_reports.py --report top_customers_by_balance --param n=3
    python scripts/run_reports.py --quality --sink json --sink kafka
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_analytics.config import SOURCES, AnalyticsConfig
from bank_analytics.exceptions import BankAnalyticsError
from bank_analytics.loaders import load_snapshot
from bank_analytics.logging import setup_logging
from bank_analytics.reports import ReportCatalog
from bank_analytics.sinks import ConsoleSink, CsvFileSink, JsonFileSink, KafkaSink

logger = logging.getLogger(__name__)

SINK_CHOICES = ["console", "json", "csv", "kafka"]


def parse_params(pairs: list[str]) -> dict[str, Any]:
    """Turn ``key=value`` strings into report keyword arguments.

    Integer-looking values become ints; everything else stays a string
    (amount parameters accept decimal strings).
    """
    params: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"expected key=value, got {pair!r}")
        try:
            params[key] = int(value)
        except ValueError:
            params[key] = value
    return params


def build_sinks(names: list[str], config: AnalyticsConfig, max_records: int | None) -> list[Any]:
    """Create the requested sinks."""
    sinks: list[Any] = []
    for name in names:
        if name == "console":
            sinks.append(ConsoleSink(max_records=max_records))
        elif name == "json":
            sinks.append(JsonFileSink(config.output.output_dir, pretty=config.output.pretty_json))
        elif name == "csv":
            sinks.append(CsvFileSink(config.output.output_dir))
        elif name == "kafka":
            sinks.append(KafkaSink(config.kafka))
    return sinks


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Run banking case-study reports")
    parser.add_argument("--source", choices=SOURCES, default=None, help="Override DATA_SOURCE")
    parser.add_argument("--path", type=Path, default=None, help="Override DATA_PATH")
    parser.add_argument(
        "--as-of",
        type=date.fromisoformat,
        default=None,
        help="Reference date for trailing windows (ISO date; overrides REPORT_AS_OF)",
    )
    parser.add_argument(
        "--report",
        action="append",
        default=[],
        help="Report to run (repeatable; default: all reports and checks)",
    )
    parser.add_argument(
        "--quality",
        action="store_true",
        help="Run only the data quality checks",
    )
    parser.add_argument(
        "--param",
        action="append",
        default=[],
        help="Report parameter as key=value (applies to every --report)",
    )
    parser.add_argument(
        "--sink",
        action="append",
        choices=SINK_CHOICES,
        default=None,
        help="Where results go (repeatable; default: console)",
    )
    parser.add_argument(
        "--max-records",
        type=int,
        default=20,
        help="Rows printed per report by the console sink (default: 20)",
    )
    parser.add_argument("--strict", action="store_true", help="Reject dangling foreign keys")
    parser.add_argument("--list", action="store_true", help="List available reports and exit")
    args = parser.parse_args()

    config = AnalyticsConfig.from_env()
    if args.source:
        config.source = args.source
    if args.as_of:
        config.as_of = args.as_of
    setup_logging(config.log_level, config.log_format)

    try:
        params = parse_params(args.param)
        store = load_snapshot(config, args.path, strict=args.strict)
        catalog = ReportCatalog(store, config.clock(), config.reports)

        if args.list:
            for name, description in catalog.descriptions().items():
                print(f"{name:34}{description}")
            return 0

        if args.report:
            names = args.report
        elif args.quality:
            names = catalog.quality_checks()
        else:
            names = catalog.available_reports()

        logger.info("=" * 60)
        logger.info("Source: %s (%s)", config.source, args.path or config.source_path)
        logger.info("As of: %s", config.clock().today())
        logger.info("Reports: %d", len(names))
        logger.info("=" * 60)

        sinks = build_sinks(args.sink or ["console"], config, args.max_records)
        for name in names:
            rows = catalog.run(name, **params) if args.report else catalog.run(name)
            for sink in sinks:
                sink.write_batch(name, rows)
        for sink in sinks:
            sink.close()
    except (BankAnalyticsError, argparse.ArgumentTypeError) as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
