"""Parcel size/weight classes."""

from enum import Enum


class ParcelType(str, Enum):
    """Classification bucket controlling base price and weight allowance."""
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    XL = "XL"
    HEAVY = "Heavy"
