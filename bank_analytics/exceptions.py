"""Custom exception hierarchy for bank-analytics."""


class BankAnalyticsError(Exception):
    """Base exception for all bank-analytics errors."""


class InvalidParameterError(BankAnalyticsError, ValueError):
    """Raised when a report parameter is out of range or of the wrong type."""


class UnknownReportError(BankAnalyticsError, KeyError):
    """Raised when a report name is not registered in the catalog."""

    def __str__(self) -> str:
        # KeyError quotes its message; keep it readable
        return str(self.args[0]) if self.args else ""


class EntityNotFoundError(BankAnalyticsError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a foreign key reference is violated."""


class InvalidEntityStateError(BankAnalyticsError):
    """Raised when an entity is in an invalid state for the operation."""


class DuplicateEntityError(InvalidEntityStateError):
    """Raised when a primary key is added to the store twice."""


class ConfigurationError(BankAnalyticsError):
    """Raised when configuration is invalid or missing."""


class LoaderError(BankAnalyticsError):
    """Raised when source tables cannot be read or parsed."""


class SinkError(BankAnalyticsError):
    """Raised when a sink operation fails."""
