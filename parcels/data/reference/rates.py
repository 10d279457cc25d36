"""
Parcel Rate Card

Base price, included weight allowance and overweight rate for each parcel
type, plus the thresholds that decide the type.

All prices are integer cents. Dimensions in cm, weights in kg.
"""

from typing import NamedTuple

from parcels.parcel_type import ParcelType


class ParcelRate(NamedTuple):
    """Pricing for one parcel type."""
    base_price: int
    weight_limit_kg: float
    overweight_rate: int        # Per whole kg above weight_limit_kg


# =============================================================================
# CLASSIFICATION THRESHOLDS
# =============================================================================

# Checked first: weight wins over size
HEAVY_WEIGHT_KG = 50.0

# Checked in order, first match wins: every side strictly below the limit.
# Anything with a side at or above the last limit is XL.
SIZE_LIMITS_CM: list[tuple[ParcelType, float]] = [
    (ParcelType.SMALL, 10.0),
    (ParcelType.MEDIUM, 50.0),
    (ParcelType.LARGE, 100.0),
]


# =============================================================================
# RATES
# =============================================================================

PARCEL_RATES: dict[ParcelType, ParcelRate] = {
    ParcelType.SMALL: ParcelRate(base_price=300, weight_limit_kg=1.0, overweight_rate=200),
    ParcelType.MEDIUM: ParcelRate(base_price=800, weight_limit_kg=3.0, overweight_rate=200),
    ParcelType.LARGE: ParcelRate(base_price=1500, weight_limit_kg=6.0, overweight_rate=200),
    ParcelType.XL: ParcelRate(base_price=2500, weight_limit_kg=10.0, overweight_rate=200),
    ParcelType.HEAVY: ParcelRate(base_price=5000, weight_limit_kg=50.0, overweight_rate=100),
}
