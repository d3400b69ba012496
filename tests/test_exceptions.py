"""Tests for the exception hierarchy."""

import pytest

from bank_analytics.exceptions import (
    BankAnalyticsError,
    ConfigurationError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidEntityStateError,
    InvalidParameterError,
    LoaderError,
    ReferentialIntegrityError,
    SinkError,
    UnknownReportError,
)


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        "exc_class",
        [
            ConfigurationError,
            DuplicateEntityError,
            EntityNotFoundError,
            InvalidEntityStateError,
            InvalidParameterError,
            LoaderError,
            ReferentialIntegrityError,
            SinkError,
            UnknownReportError,
        ],
    )
    def test_all_derive_from_base(self, exc_class: type) -> None:
        """Every error can be caught as BankAnalyticsError."""
        assert issubclass(exc_class, BankAnalyticsError)

    def test_referential_integrity_is_not_found(self) -> None:
        """A dangling foreign key is a missing entity."""
        assert issubclass(ReferentialIntegrityError, EntityNotFoundError)

    def test_duplicate_is_invalid_state(self) -> None:
        """A repeated primary key is an invalid store state."""
        assert issubclass(DuplicateEntityError, InvalidEntityStateError)

    def test_invalid_parameter_is_value_error(self) -> None:
        """Callers can keep catching ValueError."""
        with pytest.raises(ValueError):
            raise InvalidParameterError("n must be >= 1")

    def test_unknown_report_is_key_error(self) -> None:
        """Callers can keep catching KeyError."""
        with pytest.raises(KeyError):
            raise UnknownReportError("Unknown report 'nope'")


class TestUnknownReportError:
    """Tests for UnknownReportError message formatting."""

    def test_str_is_not_quoted(self) -> None:
        """KeyError quoting is dropped from the message."""
        err = UnknownReportError("Unknown report 'nope'")

        assert str(err) == "Unknown report 'nope'"

    def test_str_without_args(self) -> None:
        """An empty error renders as an empty string."""
        assert str(UnknownReportError()) == ""
