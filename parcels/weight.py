"""
Parcel Weight

Actual weight in kilograms. Ordered, so thresholds can be expressed as
Weight values as well as plain numbers via `kg`.
"""

import math
from dataclasses import dataclass

from .errors import InvalidWeight


@dataclass(frozen=True, order=True)
class Weight:
    """Validated, immutable weight (kg). Must be finite and > 0."""

    kg: float

    def __post_init__(self):
        if not (math.isfinite(self.kg) and self.kg > 0):
            raise InvalidWeight(self.kg)

    def __float__(self) -> float:
        return float(self.kg)

    def __str__(self) -> str:
        return f"{self.kg:g} kg"
