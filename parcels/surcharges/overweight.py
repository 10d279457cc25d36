"""
Overweight Surcharge

Applies when a parcel weighs more than the allowance included in its type's
base price. Charged per whole kilogram over the allowance: the floor is taken
of the excess, not of the weight (4.23 kg on a 1 kg allowance is 3 kg over).

Rates and allowances come from the rate card (see data/reference/rates.py).
"""

import math

import polars as pl

from parcels.data import PARCEL_RATES
from .base import Surcharge


class Overweight(Surcharge):
    """Per-kg charge above the parcel type's weight limit."""

    name = "Overweight"

    @classmethod
    def conditions(cls) -> pl.Expr:
        return pl.col("weight_kg") > pl.col("weight_limit_kg")

    @classmethod
    def amount(cls) -> pl.Expr:
        return (
            pl.col("overweight_rate") *
            (pl.col("weight_kg") - pl.col("weight_limit_kg")).floor().cast(pl.Int64)
        )

    @classmethod
    def for_parcel(cls, parcel) -> int:
        rate = PARCEL_RATES[parcel.parcel_type]
        excess_kg = parcel.weight.kg - rate.weight_limit_kg
        if excess_kg <= 0:
            return 0
        return rate.overweight_rate * math.floor(excess_kg)
