"""Base generator class for all data generators."""

from __future__ import annotations

import itertools
import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides common initialization: Faker instance creation,
    seed-based reproducibility and sequential readable ids.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_GB``).
    """

    ID_PREFIX = "ID"
    ID_WIDTH = 6

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_GB",
    ) -> None:
        self.fake = Faker(locale)
        self._sequence = itertools.count(1)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)

    def next_id(self) -> str:
        """Return the next id, e.g. ``TXN-000042``."""
        return f"{self.ID_PREFIX}-{next(self._sequence):0{self.ID_WIDTH}d}"
