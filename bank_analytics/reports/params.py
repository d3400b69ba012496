"""Validation of report parameters."""

from decimal import Decimal, InvalidOperation

from bank_analytics.exceptions import InvalidParameterError


def require_non_negative_int(name: str, value: object) -> int:
    """Return ``value`` if it is an int >= 0, else raise InvalidParameterError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidParameterError(f"{name} must be >= 0, got {value}")
    return value


def require_positive_int(name: str, value: object) -> int:
    """Return ``value`` if it is an int >= 1, else raise InvalidParameterError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidParameterError(f"{name} must be >= 1, got {value}")
    return value


def require_non_negative_amount(name: str, value: object) -> Decimal:
    """Coerce ``value`` to Decimal and check it is a finite amount >= 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    try:
        amount = Decimal(str(value))
    except InvalidOperation as e:
        raise InvalidParameterError(f"{name} must be a number, got {value!r}") from e
    if not amount.is_finite():
        raise InvalidParameterError(f"{name} must be finite, got {value!r}")
    if amount < 0:
        raise InvalidParameterError(f"{name} must be >= 0, got {value}")
    return amount
