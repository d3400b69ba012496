"""Financial domain generators."""

from bank_analytics.generators.financial.account import AccountGenerator
from bank_analytics.generators.financial.customer import CustomerGenerator
from bank_analytics.generators.financial.patterns import DataQualityPatternGenerator
from bank_analytics.generators.financial.transaction import TransactionGenerator

__all__ = [
    "AccountGenerator",
    "CustomerGenerator",
    "DataQualityPatternGenerator",
    "TransactionGenerator",
]
