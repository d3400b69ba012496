"""Output sinks for report rows and generated tables."""

from bank_analytics.sinks.console import ConsoleSink
from bank_analytics.sinks.csv_file import CsvFileSink
from bank_analytics.sinks.json_file import JsonFileSink
from bank_analytics.sinks.kafka import KafkaSink

__all__ = ["ConsoleSink", "CsvFileSink", "JsonFileSink", "KafkaSink"]
