"""JSON file sink: one file per report or table."""

import json
import logging
from pathlib import Path
from typing import Any

from bank_analytics.exceptions import SinkError
from bank_analytics.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Write each batch to ``<output_dir>/<name>.json`` as a JSON array.

    Files written for the ``customers``, ``accounts`` and ``transactions``
    tables can be read back with ``JsonFileLoader``.
    """

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, name: str, records: list[Any]) -> None:
        """Write a batch of rows, replacing any earlier file for ``name``."""
        file_path = self.output_dir / f"{name}.json"
        data = [to_dict(record) for record in records]

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2 if self.pretty else None, ensure_ascii=False)
        except OSError as e:
            raise SinkError(f"Cannot write {file_path}: {e}") from e

        self._counts[name] = len(records)
        logger.debug("Wrote %d records to %s", len(records), file_path)

    def close(self) -> None:
        """Log summary."""
        logger.info("JSON files written to: %s", self.output_dir)
        for name, count in self._counts.items():
            logger.info("  %s: %d records", name, count)
