"""CSV file sink: one file per report or table."""

import csv
import logging
from pathlib import Path
from typing import Any

from bank_analytics.exceptions import SinkError
from bank_analytics.sinks.serialization import field_names, to_dict

logger = logging.getLogger(__name__)


class CsvFileSink:
    """Write each batch to ``<output_dir>/<name>.csv`` with a header row.

    Nulls are written as empty cells, which ``CsvDirectoryLoader`` reads
    back as nulls.
    """

    def __init__(self, output_dir: str | Path) -> None:
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self._counts: dict[str, int] = {}

    def write_batch(self, name: str, records: list[Any]) -> None:
        """Write a batch of rows, replacing any earlier file for ``name``."""
        file_path = self.output_dir / f"{name}.csv"
        columns = field_names(records)

        try:
            with open(file_path, "w", newline="", encoding="utf-8") as f:
                writer = csv.DictWriter(f, fieldnames=columns)
                if columns:
                    writer.writeheader()
                for record in records:
                    writer.writerow(to_dict(record))
        except OSError as e:
            raise SinkError(f"Cannot write {file_path}: {e}") from e

        self._counts[name] = len(records)
        logger.debug("Wrote %d records to %s", len(records), file_path)

    def close(self) -> None:
        """Log summary."""
        logger.info("CSV files written to: %s", self.output_dir)
        for name, count in self._counts.items():
            logger.info("  %s: %d records", name, count)
