"""Customer generator for the banking case study."""

from __future__ import annotations

from typing import Iterator

from bank_analytics.generators.base import BaseGenerator
from bank_analytics.models.financial import Customer


class CustomerGenerator(BaseGenerator):
    """Generate synthetic customers with complete profiles.

    Missing fields are never produced here; see
    ``DataQualityPatternGenerator.inject_missing_fields``.
    """

    ID_PREFIX = "CUST"
    ID_WIDTH = 5

    def generate(self) -> Customer:
        """Generate a single customer.

        Returns
        -------
        Customer
            Generated customer.
        """
        return Customer(
            customer_id=self.next_id(),
            first_name=self.fake.first_name(),
            last_name=self.fake.last_name(),
            address=f"{self.fake.street_address()}, {self.fake.city()}".replace("\n", ", "),
            date_of_birth=self.fake.date_of_birth(minimum_age=18, maximum_age=90),
            zip=self.fake.postcode(),
        )

    def generate_batch(self, count: int) -> Iterator[Customer]:
        """Generate multiple customers.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Yields
        ------
        Customer
            Generated customers.
        """
        for _ in range(count):
            yield self.generate()
