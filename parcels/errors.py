"""
Parcel Validation Errors

Raised when a parcel is described with impossible measurements. Both are
raised at construction time only; nothing downstream of a valid Dimensions or
Weight can fail.
"""


class ParcelError(ValueError):
    """Base class for invalid parcel input."""


class InvalidDimensions(ParcelError):
    """Any of length, width or height is not strictly positive."""

    def __init__(self, length: float, width: float, height: float):
        self.length = length
        self.width = width
        self.height = height
        super().__init__(
            f"Dimensions must all be positive but ({length}, {width}, {height}) "
            f"contains a non-positive dimension"
        )


class InvalidWeight(ParcelError):
    """Weight is not strictly positive."""

    def __init__(self, value: float):
        self.value = value
        super().__init__(
            f"Weight must be positive but {value} is a non-positive weight"
        )


__all__ = [
    "ParcelError",
    "InvalidDimensions",
    "InvalidWeight",
]
