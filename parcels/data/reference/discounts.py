"""
Volume Discounts

Every Nth parcel of a type within one order ships free. Within a type the most
expensive parcels are the ones made free: a group of 7 Medium parcels frees
the 2 most expensive.

Types without an entry get no volume discount.
"""

from parcels.parcel_type import ParcelType


NTH_PARCEL_FREE: dict[ParcelType, int] = {
    ParcelType.SMALL: 4,    # Every 4th small parcel free
    ParcelType.MEDIUM: 3,   # Every 3rd medium parcel free
}
