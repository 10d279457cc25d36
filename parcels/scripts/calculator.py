"""
Parcel Shipping Cost Calculator
===============================

Interactive CLI tool to price a single order of parcels.

Usage:
    python -m parcels.scripts.calculator
"""

from parcels import (
    Dimensions,
    Order,
    Parcel,
    ParcelError,
    ShippingSpeed,
    Weight,
)
from parcels.version import VERSION


def get_shipping_speed() -> ShippingSpeed:
    """Prompt user for the order's shipping speed."""
    print("Shipping speed:")
    speeds = list(ShippingSpeed)
    for i, speed in enumerate(speeds, start=1):
        print(f"  {i}. {speed.value} (x{speed.cost_multiplier()})")
    choice = input(f"Select (1-{len(speeds)}) [default: 1]: ").strip()

    if choice.isdigit() and 1 <= int(choice) <= len(speeds):
        return speeds[int(choice) - 1]
    return speeds[0]


def get_parcel(number: int) -> Parcel | None:
    """
    Prompt user for one parcel.

    Returns None when the user leaves the length empty (no more parcels).
    Re-prompts until the parcel is valid.
    """
    while True:
        print(f"\nParcel {number} (leave length empty to finish)")
        length = input("  Length (cm): ").strip()
        if not length:
            return None

        try:
            dimensions = Dimensions(
                float(length),
                float(input("  Width (cm): ")),
                float(input("  Height (cm): ")),
            )
            weight = Weight(float(input("  Weight (kg): ")))
        except ParcelError as e:
            print(f"  Invalid parcel: {e}")
            continue
        except ValueError:
            print("  Please enter numbers only.")
            continue

        return Parcel(dimensions, weight)


def get_user_input() -> Order:
    """Prompt user for the whole order."""
    print("\n=== Parcel Shipping Cost Calculator ===")
    print(f"Version: {VERSION}\n")

    speed = get_shipping_speed()

    parcels = []
    while True:
        parcel = get_parcel(len(parcels) + 1)
        if parcel is None:
            break
        parcels.append(parcel)

    return Order(parcels, speed)


def print_results(order: Order) -> None:
    """Print the order receipt."""
    free = set(order.free_positions())

    print("\n" + "=" * 50)
    print("RECEIPT")
    print("=" * 50)

    for i, parcel in enumerate(order.parcels, start=1):
        line = (
            f"{i:>3}. {parcel.parcel_type.value:<6} "
            f"{str(parcel.dimensions):<22} {str(parcel.weight):>10}"
        )
        print(f"{line}  {parcel.cost():>8}")
        if parcel.overweight_surcharge() > 0:
            print(f"       incl. overweight surcharge {parcel.overweight_surcharge():>18}")
        if i - 1 in free:
            print(f"       volume discount (free parcel) {-parcel.cost():>17}")

    print(f"\n{'Partial total:':<20}{order.partial_total_cost():>30}")
    print(f"{'Discount:':<20}{order.discount():>30}")
    speed = f"{order.shipping_speed.value} x{order.shipping_speed.cost_multiplier()}"
    print(f"{'Shipping speed:':<20}{speed:>30}")
    print(f"{'':<20}{'=' * 10:>30}")
    print(f"{'TOTAL:':<20}{order.total_cost():>30}")
    print()


def main():
    """Main entry point."""
    try:
        order = get_user_input()

        if not order.parcels:
            print("\nNo parcels entered.")
            return

        print_results(order)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
