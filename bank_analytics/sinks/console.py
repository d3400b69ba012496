"""Console sink for printing report rows."""

import json
from typing import Any

from bank_analytics.sinks.serialization import to_dict


class ConsoleSink:
    """Output report rows to stdout as JSON."""

    def __init__(self, pretty: bool = True, max_records: int | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        max_records : int | None
            Maximum records to print per batch (None for all).
        """
        self.pretty = pretty
        self.max_records = max_records
        self._counts: dict[str, int] = {}

    def write_batch(self, name: str, records: list[Any]) -> None:
        """Print one report's rows under a header."""
        print(f"\n{'='*60}")
        print(f"Report: {name} ({len(records)} records)")
        print("=" * 60)

        display_records = records[: self.max_records] if self.max_records else records

        for record in display_records:
            data = to_dict(record)
            if self.pretty:
                print(json.dumps(data, indent=2, ensure_ascii=False))
            else:
                print(json.dumps(data, ensure_ascii=False))

        if self.max_records and len(records) > self.max_records:
            print(f"... and {len(records) - self.max_records} more records")

        self._counts[name] = self._counts.get(name, 0) + len(records)

    def close(self) -> None:
        """Print summary."""
        print(f"\n{'='*60}")
        print("Report Summary")
        print("=" * 60)
        for name, count in self._counts.items():
            print(f"  {name}: {count} records")
