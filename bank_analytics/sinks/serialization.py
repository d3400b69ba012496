"""Shared serialization utilities for sinks."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Sequence

# Fields tried, in order, when choosing a message key for a row
KEY_FIELDS = ("account_id", "customer_id", "transaction_id", "record_id")


def to_dict(obj: Any) -> dict[str, Any]:
    """Convert a report row (dataclass or mapping) to a JSON-ready dict.

    Field order follows the dataclass definition, so CSV columns and
    JSON keys come out in the same order as the report defines them.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}
    elif isinstance(obj, dict):
        return {k: serialize_value(v) for k, v in obj.items()}
    else:
        return {"value": str(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON/CSV output.

    Decimals become strings so no precision is lost.
    """
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, (datetime, date)):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def field_names(records: Sequence[Any]) -> list[str]:
    """Column names for a batch of rows, taken from the first row."""
    if not records:
        return []
    return list(to_dict(records[0]).keys())


def record_key(record: Any) -> str | None:
    """Pick a partitioning key for a row from its identifying fields."""
    data = record if isinstance(record, dict) else None
    for name in KEY_FIELDS:
        value = data.get(name) if data is not None else getattr(record, name, None)
        if value is not None:
            return str(value)
    return None
