"""
Parcel Dimensions

Length, width and height of a parcel in centimetres. Classification only asks
whether all (or any) sides pass a threshold, so the three sides are treated as
an unordered set.
"""

import math
from dataclasses import dataclass
from typing import Callable

from .errors import InvalidDimensions


@dataclass(frozen=True)
class Dimensions:
    """Validated, immutable length x width x height (cm). Sides must be finite and > 0."""

    length: float
    width: float
    height: float

    def __post_init__(self):
        if not all(math.isfinite(side) and side > 0 for side in self.as_tuple()):
            raise InvalidDimensions(self.length, self.width, self.height)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.length, self.width, self.height)

    def any(self, predicate: Callable[[float], bool]) -> bool:
        """True if at least one side satisfies predicate."""
        return any(predicate(side) for side in self.as_tuple())

    def all(self, predicate: Callable[[float], bool]) -> bool:
        """True if every side satisfies predicate."""
        return all(predicate(side) for side in self.as_tuple())

    def longest_side(self) -> float:
        return max(self.as_tuple())

    def __str__(self) -> str:
        return f"{self.length:g}x{self.width:g}x{self.height:g} cm"
