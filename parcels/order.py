"""
Order

Parcels shipped together under one shipping speed.

TOTALS
------
    partial_total_cost = sum of parcel costs
    discount           = -(cost of the parcels made free by volume discounts)
    total_cost         = (partial_total_cost + discount) * speed multiplier

The speed multiplier is applied after the volume discount.

VOLUME DISCOUNT
---------------
Parcels are grouped by type. For a type with an every-Nth-free rule
(data/reference/discounts.py) the group is sorted by descending cost and the
floor(count / N) most expensive parcels are free. Equal-cost parcels keep
their order in the Order.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable

from .data import NTH_PARCEL_FREE
from .parcel import Parcel
from .parcel_type import ParcelType
from .shipping_speed import ShippingSpeed


@dataclass(frozen=True)
class Order:
    parcels: tuple[Parcel, ...]
    shipping_speed: ShippingSpeed

    def __init__(self, parcels: Iterable[Parcel], shipping_speed: ShippingSpeed):
        # Frozen: assign through object.__setattr__
        object.__setattr__(self, "parcels", tuple(parcels))
        object.__setattr__(self, "shipping_speed", ShippingSpeed(shipping_speed))

    def partial_total_cost(self) -> int:
        """Sum of every parcel's cost, before discounts and speed."""
        return sum(parcel.cost() for parcel in self.parcels)

    def free_parcels(self) -> list[Parcel]:
        """Parcels made free by volume discounts, in order position."""
        return [self.parcels[i] for i in self.free_positions()]

    def free_positions(self) -> list[int]:
        """Indices into parcels of the parcels made free, ascending."""
        groups: dict[ParcelType, list[int]] = defaultdict(list)
        for index, parcel in enumerate(self.parcels):
            groups[parcel.parcel_type].append(index)

        free_indices = set()
        for parcel_type, indices in groups.items():
            nth = NTH_PARCEL_FREE.get(parcel_type)
            if nth is None:
                continue
            # sorted() is stable: equal costs keep order position
            by_cost = sorted(indices, key=lambda i: self.parcels[i].cost(), reverse=True)
            free_indices.update(by_cost[:len(indices) // nth])

        return sorted(free_indices)

    def discount(self) -> int:
        """Volume discount as a non-positive adjustment (cents)."""
        return -sum(parcel.cost() for parcel in self.free_parcels())

    def total_cost(self) -> int:
        """Discounted total multiplied by the shipping speed multiplier."""
        return (self.partial_total_cost() + self.discount()) * self.shipping_speed.cost_multiplier()
