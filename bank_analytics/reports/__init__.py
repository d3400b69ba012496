"""Reports, ledger analysis and data quality checks."""

from bank_analytics.reports.aggregation import AggregationReporter
from bank_analytics.reports.facade import ReportCatalog
from bank_analytics.reports.ledger import TransactionLedgerAnalyzer
from bank_analytics.reports.quality import DataQualityAuditor

__all__ = [
    "AggregationReporter",
    "DataQualityAuditor",
    "ReportCatalog",
    "TransactionLedgerAnalyzer",
]
