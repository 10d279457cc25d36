"""
Parcel

A single shippable item. Its type and cost are derived from its dimensions
and weight every time they are asked for, so they cannot drift from the
fields.

CLASSIFICATION
--------------
First match wins:
    1. weight >= 50 kg              -> Heavy
    2. every side < 10 cm           -> Small
    3. every side < 50 cm           -> Medium
    4. every side < 100 cm          -> Large
    5. otherwise (a side >= 100 cm) -> XL

COST
----
    cost = base price of the type + surcharges (see surcharges/)
"""

from dataclasses import dataclass

from .data import HEAVY_WEIGHT_KG, SIZE_LIMITS_CM, PARCEL_RATES
from .dimensions import Dimensions
from .parcel_type import ParcelType
from .surcharges import ALL, Overweight
from .weight import Weight


def classify(dimensions: Dimensions, weight: Weight) -> ParcelType:
    """Parcel type for the given (already validated) measurements."""
    if weight.kg >= HEAVY_WEIGHT_KG:
        return ParcelType.HEAVY

    for parcel_type, limit in SIZE_LIMITS_CM:
        if dimensions.all(lambda side: side < limit):
            return parcel_type

    return ParcelType.XL


@dataclass(frozen=True)
class Parcel:
    dimensions: Dimensions
    weight: Weight

    @property
    def parcel_type(self) -> ParcelType:
        return classify(self.dimensions, self.weight)

    def base_price(self) -> int:
        return PARCEL_RATES[self.parcel_type].base_price

    def overweight_surcharge(self) -> int:
        return Overweight.for_parcel(self)

    def cost(self) -> int:
        """Base price plus every applicable surcharge (cents)."""
        return self.base_price() + sum(s.for_parcel(self) for s in ALL)
