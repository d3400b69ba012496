"""Analytical reports and data quality audits over banking case-study tables."""

__version__ = "0.1.0"
