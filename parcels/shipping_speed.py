"""
Shipping Speed

Delivery speed selected for a whole order. Each speed carries an integer
multiplier applied to the discounted order total.
"""

from enum import Enum


class ShippingSpeed(str, Enum):
    """Delivery speed options."""
    NORMAL = "Normal"
    SPEEDY = "Speedy"

    def cost_multiplier(self) -> int:
        return COST_MULTIPLIERS[self]


COST_MULTIPLIERS: dict[ShippingSpeed, int] = {
    ShippingSpeed.NORMAL: 1,
    ShippingSpeed.SPEEDY: 2,
}


def validate_multipliers() -> None:
    """
    Check every speed has a positive integer multiplier.

    Raises ValueError on import so a new speed cannot ship without a price.
    """
    errors = []
    for speed in ShippingSpeed:
        multiplier = COST_MULTIPLIERS.get(speed)
        if multiplier is None:
            errors.append(f"{speed.value}: no cost multiplier defined")
        elif not isinstance(multiplier, int) or multiplier < 1:
            errors.append(f"{speed.value}: multiplier must be an integer >= 1, got {multiplier!r}")

    if errors:
        raise ValueError("Shipping speed configuration errors:\n  " + "\n  ".join(errors))


validate_multipliers()

__all__ = [
    "ShippingSpeed",
    "COST_MULTIPLIERS",
    "validate_multipliers",
]
