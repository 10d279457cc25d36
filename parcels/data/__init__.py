"""
Parcel Data

Reference data for classification, pricing and discounts.

Structure:
    - reference/rates.py: rate card and classification thresholds
    - reference/discounts.py: every-Nth-parcel-free rules
"""

import polars as pl

from parcels.parcel_type import ParcelType
from .reference.rates import (
    HEAVY_WEIGHT_KG,
    SIZE_LIMITS_CM,
    PARCEL_RATES,
    ParcelRate,
)
from .reference.discounts import NTH_PARCEL_FREE


def load_rate_card() -> pl.DataFrame:
    """
    Rate card in long format, ready for joining on parcel_type.

    Returns:
        DataFrame with columns:
            - parcel_type: ParcelType value (e.g. "Small")
            - cost_base: Base price (cents)
            - weight_limit_kg: Weight included in the base price
            - overweight_rate: Price per whole kg over the limit (cents)
            - nth_parcel_free: N for the volume discount (null if none)
    """
    return pl.DataFrame(
        {
            "parcel_type": [t.value for t in PARCEL_RATES],
            "cost_base": [r.base_price for r in PARCEL_RATES.values()],
            "weight_limit_kg": [r.weight_limit_kg for r in PARCEL_RATES.values()],
            "overweight_rate": [r.overweight_rate for r in PARCEL_RATES.values()],
            "nth_parcel_free": [NTH_PARCEL_FREE.get(t) for t in PARCEL_RATES],
        },
        schema={
            "parcel_type": pl.Utf8,
            "cost_base": pl.Int64,
            "weight_limit_kg": pl.Float64,
            "overweight_rate": pl.Int64,
            "nth_parcel_free": pl.Int64,
        },
    )


# =============================================================================
# VALIDATION
# =============================================================================

def validate_reference_data() -> None:
    """
    Validate rate card and discount configuration.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []

    for parcel_type in ParcelType:
        rate = PARCEL_RATES.get(parcel_type)
        if rate is None:
            errors.append(f"{parcel_type.value}: no rate defined")
            continue
        if rate.base_price < 0 or rate.overweight_rate < 0:
            errors.append(f"{parcel_type.value}: prices must be >= 0")
        if rate.weight_limit_kg <= 0:
            errors.append(f"{parcel_type.value}: weight_limit_kg must be > 0")

    limits = [limit for _, limit in SIZE_LIMITS_CM]
    if limits != sorted(limits) or len(set(limits)) != len(limits):
        errors.append(f"SIZE_LIMITS_CM must be strictly increasing, got {limits}")

    size_types = [t for t, _ in SIZE_LIMITS_CM]
    if ParcelType.HEAVY in size_types or ParcelType.XL in size_types:
        errors.append("SIZE_LIMITS_CM must not list Heavy or XL (they have no size limit)")

    if HEAVY_WEIGHT_KG <= 0:
        errors.append("HEAVY_WEIGHT_KG must be > 0")

    for parcel_type, nth in NTH_PARCEL_FREE.items():
        if not isinstance(nth, int) or nth < 1:
            errors.append(f"{parcel_type.value}: nth parcel free must be an integer >= 1, got {nth!r}")

    if errors:
        raise ValueError("Reference data configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_reference_data()

__all__ = [
    "load_rate_card",
    "validate_reference_data",
    "ParcelRate",
    "PARCEL_RATES",
    "HEAVY_WEIGHT_KG",
    "SIZE_LIMITS_CM",
    "NTH_PARCEL_FREE",
]
