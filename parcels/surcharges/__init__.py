"""
Parcel Surcharges Package

Exports all surcharge classes. Every surcharge in ALL is applied to every
parcel, in both the batch pipeline and Parcel.cost().

Usage:
    from parcels.surcharges import ALL
"""

from .base import Surcharge
from .overweight import Overweight


# All surcharges - add classes here as they are implemented
ALL: list[type[Surcharge]] = [Overweight]


# =============================================================================
# VALIDATION
# =============================================================================

def validate_surcharges() -> None:
    """
    Validate surcharge configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []
    seen = set()

    for s in ALL:
        if not getattr(s, "name", None):
            errors.append(f"{s.__name__}: name is required")
            continue
        key = s.name.lower()
        if key in seen:
            errors.append(f"{s.name}: duplicate surcharge name")
        if key in ("base", "parcel", "discount"):
            errors.append(f"{s.name}: name clashes with cost_{key} column")
        seen.add(key)

    if errors:
        raise ValueError("Surcharge configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_surcharges()

__all__ = [
    "Surcharge",
    "Overweight",
    "ALL",
    "validate_surcharges",
]
