"""Customer model for the banking case study."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Customer:
    """Bank customer entity.

    ``address``, ``date_of_birth`` and ``zip`` are nullable in the source
    table; gaps are reported by the data quality audit.
    """

    customer_id: str
    first_name: str
    last_name: str
    address: str | None = None
    date_of_birth: date | None = None
    zip: str | None = None
