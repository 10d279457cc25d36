"""
Price Orders from CSV
=====================

Prices every parcel in a CSV file and writes the priced parcels, and
optionally one summary row per order, back to CSV.

Input CSV columns:
    order_id, length_cm, width_cm, height_cm, weight_kg, shipping_speed

Usage:
    python -m parcels.scripts.price_orders --input parcels.csv --output priced.csv
    python -m parcels.scripts.price_orders --input parcels.csv --output priced.csv --summary orders.csv
    python -m parcels.scripts.price_orders --input parcels.csv --output priced.csv --verbose
"""

import argparse
import logging
import sys
from pathlib import Path

import polars as pl

from parcels.calculate_costs import calculate_costs, summarize_orders
from parcels.version import VERSION


def load_parcels(path: Path) -> pl.DataFrame:
    """Read the input CSV, keeping order ids as strings."""
    return pl.read_csv(
        path,
        schema_overrides={
            "order_id": pl.Utf8,
            "length_cm": pl.Float64,
            "width_cm": pl.Float64,
            "height_cm": pl.Float64,
            "weight_kg": pl.Float64,
            "shipping_speed": pl.Utf8,
        },
    )


def run_pipeline(input_path: Path) -> tuple[pl.DataFrame, pl.DataFrame]:
    """Price parcels and aggregate orders. Returns (parcels, orders)."""
    print(f"  Loading parcels from {input_path}...")
    df = load_parcels(input_path)
    print(f"  Loaded {len(df):,} parcels")

    print("  Calculating costs...")
    parcels = calculate_costs(df)
    orders = summarize_orders(parcels)

    return parcels, orders


def print_summary(parcels: pl.DataFrame, orders: pl.DataFrame) -> None:
    print("\n" + "=" * 60)
    print("PRICING SUMMARY")
    print("=" * 60)
    print(f"Calculator version: {VERSION}")
    print(f"Parcels: {len(parcels):,}")
    print(f"Orders: {len(orders):,}")

    if len(parcels) == 0:
        return

    print("\nParcels by type:")
    by_type = (
        parcels
        .group_by("parcel_type")
        .agg(pl.len().alias("count"))
        .sort("parcel_type")
    )
    for row in by_type.iter_rows(named=True):
        print(f"  {row['parcel_type']:<8} {row['count']:>8,}")

    print(f"\nFree parcels: {parcels['parcel_free'].sum():,}")
    print(f"Partial total: {orders['partial_total_cost'].sum():,}")
    print(f"Discount: {orders['discount'].sum():,}")
    print(f"Total: {orders['total_cost'].sum():,}")


# =============================================================================
# MAIN
# =============================================================================

def main():
    parser = argparse.ArgumentParser(
        description="Price parcel orders from a CSV file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m parcels.scripts.price_orders --input parcels.csv --output priced.csv
  python -m parcels.scripts.price_orders --input parcels.csv --output priced.csv --summary orders.csv
        """
    )
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="CSV with one row per parcel"
    )
    parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help="Where to write priced parcels"
    )
    parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="Optional: where to write one row per order"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging from the calculator"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        print("=" * 60)
        print("PRICE ORDERS")
        print("=" * 60)

        parcels, orders = run_pipeline(args.input)

        parcels.write_csv(args.output)
        print(f"  Priced parcels saved to: {args.output}")

        if args.summary is not None:
            orders.write_csv(args.summary)
            print(f"  Order summary saved to: {args.summary}")

        print_summary(parcels, orders)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
