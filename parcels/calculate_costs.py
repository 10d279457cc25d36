"""
Parcel Shipping Cost Calculator

DataFrame in, DataFrame out. One row per parcel; parcels are tied to their
order by order_id. The output is the same DataFrame with calculation columns
and costs appended, in the input row order.

REQUIRED INPUT COLUMNS
----------------------
    order_id            - Order the parcel belongs to
    length_cm           - Parcel length in centimetres
    width_cm            - Parcel width in centimetres
    height_cm           - Parcel height in centimetres
    weight_kg           - Actual weight in kilograms
    shipping_speed      - ShippingSpeed value ("Normal", "Speedy"), one per order

OUTPUT COLUMNS ADDED
--------------------
    supplement_shipments() adds:
        - longest_side_cm, parcel_type
        - cost_base, weight_limit_kg, overweight_rate, nth_parcel_free

    calculate() adds:
        - surcharge_* flags (overweight)
        - cost_* amounts (overweight, parcel, discount)
        - parcel_free
        - calculator_version

    summarize_orders() returns one row per order:
        - order_id, shipping_speed, parcel_count
        - partial_total_cost, discount, cost_multiplier, total_cost

USAGE
-----
    from parcels.calculate_costs import calculate_costs, summarize_orders
    parcels = calculate_costs(df)
    orders = summarize_orders(parcels)
"""

import logging
from typing import Mapping

import polars as pl

from .version import VERSION
from .data import HEAVY_WEIGHT_KG, SIZE_LIMITS_CM, load_rate_card
from .errors import InvalidDimensions, InvalidWeight
from .order import Order
from .parcel_type import ParcelType
from .shipping_speed import ShippingSpeed
from .surcharges import ALL

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = [
    "order_id",
    "length_cm",
    "width_cm",
    "height_cm",
    "weight_kg",
    "shipping_speed",
]

DIMENSION_COLUMNS = ["length_cm", "width_cm", "height_cm"]


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate parcel costs and volume discounts for a parcel DataFrame.

    This is the main entry point. Takes raw parcel data and returns the same
    DataFrame with all calculation columns and costs appended.

    Args:
        df: Raw parcel DataFrame with required columns (see module docstring)

    Returns:
        DataFrame with classification, surcharge flags, costs and discounts
    """
    df = supplement_shipments(df)
    df = calculate(df)
    return df


# =============================================================================
# SUPPLEMENT SHIPMENTS
# =============================================================================

def supplement_shipments(df: pl.DataFrame) -> pl.DataFrame:
    """
    Validate parcel data and add classification and rate card columns.

    Args:
        df: Raw parcel DataFrame

    Returns:
        DataFrame with added columns:
            - longest_side_cm, parcel_type
            - cost_base, weight_limit_kg, overweight_rate, nth_parcel_free

    Raises:
        ValueError: missing columns, unknown shipping speed, or an order with
            more than one shipping speed
        InvalidDimensions: a parcel with a missing, non-finite or non-positive side
        InvalidWeight: a parcel with a missing, non-finite or non-positive weight
    """
    _validate_inputs(df)

    df = _add_calculated_dimensions(df)
    df = _classify_parcels(df)
    df = _join_rate_card(df)

    return df


def _not_positive_number(column: str) -> pl.Expr:
    """True for null, NaN, infinite or non-positive cells."""
    value = pl.col(column).cast(pl.Float64)
    return value.is_null() | ~value.is_finite() | (value <= 0)


def _validate_inputs(df: pl.DataFrame) -> None:
    """Reject input that the value objects would refuse to construct."""
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {', '.join(missing)}")

    bad_dimensions = df.filter(pl.any_horizontal([_not_positive_number(c) for c in DIMENSION_COLUMNS]))
    if len(bad_dimensions) > 0:
        row = bad_dimensions.row(0, named=True)
        logger.debug("%d parcel(s) with missing or non-positive dimensions", len(bad_dimensions))
        raise InvalidDimensions(row["length_cm"], row["width_cm"], row["height_cm"])

    bad_weights = df.filter(_not_positive_number("weight_kg"))
    if len(bad_weights) > 0:
        logger.debug("%d parcel(s) with missing or non-positive weight", len(bad_weights))
        raise InvalidWeight(bad_weights["weight_kg"][0])

    known_speeds = {s.value for s in ShippingSpeed}
    unknown_speeds = set(df["shipping_speed"].unique().to_list()) - known_speeds
    if unknown_speeds:
        raise ValueError(
            f"Unknown shipping speed(s): {sorted(map(str, unknown_speeds))}. "
            f"Expected one of {sorted(known_speeds)}"
        )

    mixed = (
        df
        .group_by("order_id")
        .agg(pl.col("shipping_speed").n_unique().alias("_speeds"))
        .filter(pl.col("_speeds") > 1)
    )
    if len(mixed) > 0:
        raise ValueError(
            f"{len(mixed)} order(s) have more than one shipping speed: "
            f"{sorted(map(str, mixed['order_id'].to_list()))}"
        )


def _add_calculated_dimensions(df: pl.DataFrame) -> pl.DataFrame:
    """Add longest side; 'every side < limit' is 'longest side < limit'."""
    return df.with_columns(
        pl.max_horizontal(DIMENSION_COLUMNS).alias("longest_side_cm")
    )


def _classify_parcels(df: pl.DataFrame) -> pl.DataFrame:
    """
    Add parcel_type using the same ordered rules as Parcel.

    Weight is checked first, then size limits smallest to largest. Anything
    left over is XL.
    """
    parcel_type = (
        pl.when(pl.col("weight_kg") >= HEAVY_WEIGHT_KG)
        .then(pl.lit(ParcelType.HEAVY.value))
    )
    for size_type, limit in SIZE_LIMITS_CM:
        parcel_type = (
            parcel_type
            .when(pl.col("longest_side_cm") < limit)
            .then(pl.lit(size_type.value))
        )
    parcel_type = parcel_type.otherwise(pl.lit(ParcelType.XL.value))

    return df.with_columns(parcel_type.alias("parcel_type"))


def _join_rate_card(df: pl.DataFrame) -> pl.DataFrame:
    """Join base price, weight allowance, overweight rate and discount N."""
    rate_card = load_rate_card()

    df = df.with_row_index("_row_id")
    df = df.join(rate_card, on="parcel_type", how="left")
    df = df.sort("_row_id").drop("_row_id")

    return df


# =============================================================================
# CALCULATE COSTS
# =============================================================================

def calculate(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate parcel costs and volume discounts for supplemented parcels.

    Args:
        df: Supplemented parcel DataFrame from supplement_shipments

    Returns:
        DataFrame with surcharge flags, per-parcel costs and discounts

    Processing order:
        1. Surcharges      - flags and amounts for every surcharge in ALL
        2. Parcel cost     - base price plus surcharges
        3. Volume discount - every Nth most expensive parcel of a type free
    """
    logger.debug("Pricing %d parcel(s)", len(df))

    df = _apply_surcharges(df)
    df = _calculate_parcel_cost(df)
    df = _apply_volume_discount(df)
    df = _stamp_version(df)

    return df


def _apply_surcharges(df: pl.DataFrame) -> pl.DataFrame:
    """Apply every surcharge; surcharges stack independently."""
    for surcharge in ALL:
        flag_col = surcharge.flag_column()
        cost_col = surcharge.cost_column()

        df = df.with_columns(surcharge.conditions().alias(flag_col))
        df = df.with_columns(
            pl.when(pl.col(flag_col))
            .then(surcharge.amount())
            .otherwise(pl.lit(0))
            .cast(pl.Int64)
            .alias(cost_col)
        )

    return df


def _calculate_parcel_cost(df: pl.DataFrame) -> pl.DataFrame:
    """Calculate cost_parcel as base price plus all surcharges."""
    cost_cols = ["cost_base"] + [s.cost_column() for s in ALL]
    return df.with_columns(
        pl.sum_horizontal(cost_cols).cast(pl.Int64).alias("cost_parcel")
    )


def _apply_volume_discount(df: pl.DataFrame) -> pl.DataFrame:
    """
    Mark parcels made free by volume discounts.

    Within each (order, parcel type) group, parcels are ranked by descending
    cost; ties rank in row order. The top floor(group size / N) are free.

    Adds columns:
        - parcel_free: True if the parcel ships free
        - cost_discount: -cost_parcel for free parcels, else 0
    """
    group = ["order_id", "parcel_type"]

    df = df.with_columns([
        pl.col("cost_parcel")
        .rank(method="ordinal", descending=True)
        .over(group)
        .cast(pl.Int64)
        .alias("_cost_rank"),

        pl.len().over(group).cast(pl.Int64).alias("_group_size"),
    ])

    df = df.with_columns(
        (
            pl.col("nth_parcel_free").is_not_null() &
            (pl.col("_cost_rank") <= pl.col("_group_size") // pl.col("nth_parcel_free"))
        )
        .fill_null(False)
        .alias("parcel_free")
    )

    df = df.with_columns(
        pl.when(pl.col("parcel_free"))
        .then(-pl.col("cost_parcel"))
        .otherwise(pl.lit(0))
        .cast(pl.Int64)
        .alias("cost_discount")
    )

    return df.drop(["_cost_rank", "_group_size"])


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


# =============================================================================
# ORDER TOTALS
# =============================================================================

def summarize_orders(df: pl.DataFrame) -> pl.DataFrame:
    """
    Aggregate priced parcels into order totals.

    Args:
        df: Output of calculate_costs

    Returns:
        One row per order_id (first-seen order) with columns:
            - shipping_speed, parcel_count
            - partial_total_cost: sum of cost_parcel
            - discount: sum of cost_discount (<= 0)
            - cost_multiplier: from shipping_speed
            - total_cost: (partial_total_cost + discount) * cost_multiplier
    """
    multipliers = {s.value: s.cost_multiplier() for s in ShippingSpeed}

    orders = (
        df
        .group_by("order_id", maintain_order=True)
        .agg([
            pl.col("shipping_speed").first(),
            pl.len().cast(pl.Int64).alias("parcel_count"),
            pl.col("cost_parcel").sum().cast(pl.Int64).alias("partial_total_cost"),
            pl.col("cost_discount").sum().cast(pl.Int64).alias("discount"),
        ])
        .with_columns(
            pl.col("shipping_speed")
            .replace_strict(multipliers, return_dtype=pl.Int64)
            .alias("cost_multiplier")
        )
        .with_columns(
            (
                (pl.col("partial_total_cost") + pl.col("discount")) *
                pl.col("cost_multiplier")
            ).alias("total_cost")
        )
    )

    logger.debug("Summarised %d order(s)", len(orders))
    return orders


# =============================================================================
# VALUE OBJECT BRIDGE
# =============================================================================

def orders_to_frame(orders: Mapping[str, Order]) -> pl.DataFrame:
    """
    Build the calculator input DataFrame from Order objects.

    Args:
        orders: Mapping of order_id -> Order

    Returns:
        One row per parcel with the REQUIRED_COLUMNS, in order and parcel
        position order.
    """
    rows = [
        {
            "order_id": order_id,
            "length_cm": float(parcel.dimensions.length),
            "width_cm": float(parcel.dimensions.width),
            "height_cm": float(parcel.dimensions.height),
            "weight_kg": float(parcel.weight),
            "shipping_speed": order.shipping_speed.value,
        }
        for order_id, order in orders.items()
        for parcel in order.parcels
    ]
    return pl.DataFrame(
        rows,
        schema={
            "order_id": pl.Utf8,
            "length_cm": pl.Float64,
            "width_cm": pl.Float64,
            "height_cm": pl.Float64,
            "weight_kg": pl.Float64,
            "shipping_speed": pl.Utf8,
        },
    )


__all__ = [
    "calculate_costs",
    "supplement_shipments",
    "calculate",
    "summarize_orders",
    "orders_to_frame",
    "REQUIRED_COLUMNS",
]
