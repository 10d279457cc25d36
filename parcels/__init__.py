"""
Parcels

Shipping price calculator for orders of parcels: classification by size and
weight, base price plus overweight surcharge, every-Nth-parcel-free volume
discounts and a shipping speed multiplier.

Two entry points share the same reference data:
    - Value objects: Dimensions, Weight, Parcel, Order
    - Batch pricing: calculate_costs(df) / summarize_orders(df)
"""

from .errors import ParcelError, InvalidDimensions, InvalidWeight
from .dimensions import Dimensions
from .weight import Weight
from .parcel_type import ParcelType
from .shipping_speed import ShippingSpeed
from .parcel import Parcel, classify
from .order import Order
from .calculate_costs import calculate_costs, summarize_orders, orders_to_frame
from .version import VERSION

__all__ = [
    # Errors
    "ParcelError",
    "InvalidDimensions",
    "InvalidWeight",
    # Value objects
    "Dimensions",
    "Weight",
    "ParcelType",
    "ShippingSpeed",
    "Parcel",
    "Order",
    "classify",
    # Batch
    "calculate_costs",
    "summarize_orders",
    "orders_to_frame",
    "VERSION",
]
