"""
Surcharge Base Class

Shared base class for all parcel surcharges. Each surcharge is described twice
from the same reference data: as polars expressions for batch pricing and as a
scalar for a single Parcel.
"""

from abc import ABC, abstractmethod

import polars as pl


class Surcharge(ABC):
    """
    Base class for all surcharges.

    Attributes:
        name    - Short code (e.g., "Overweight"). Batch output columns are
                  surcharge_<name> and cost_<name>, lowercased.
    """

    name: str

    @classmethod
    def flag_column(cls) -> str:
        return f"surcharge_{cls.name.lower()}"

    @classmethod
    def cost_column(cls) -> str:
        return f"cost_{cls.name.lower()}"

    @classmethod
    def conditions(cls) -> pl.Expr:
        """
        Polars expression for when this surcharge triggers.

        Default returns True. Override for surcharges with specific conditions.
        """
        return pl.lit(True)

    @classmethod
    @abstractmethod
    def amount(cls) -> pl.Expr:
        """Polars expression for the charge (cents) on rows where it triggers."""

    @classmethod
    @abstractmethod
    def for_parcel(cls, parcel) -> int:
        """Charge (cents) for a single Parcel, 0 when it does not trigger."""
