"""
Shipping Quote Cost Calculator

DataFrame in, DataFrame out. The input can come from any source (form,
CSV, manual creation) as long as it contains the required columns. The
output is the same DataFrame with calculation columns and costs appended.

REQUIRED INPUT COLUMNS
----------------------
    weight_kg           - Actual weight in kilograms (0-1000)
    service_tier        - standard / express / overnight
    package_category    - document / package / fragile / hazardous
    insurance_requested - Insurance opt-in flag

OUTPUT COLUMNS ADDED
--------------------
    supplement_shipments() adds:
        - base_fee, per_kg_fee, surcharge_multiplier, transit_days
        - handling_fee, risk_multiplier

    calculate() adds:
        - cost_* amounts (base, weight, handling, subtotal, total)
        - surcharge_* flags and cost_* amounts (ins)
        - calculator_version

Costs are left unrounded; rounding happens once, when a Quote is built.

USAGE
-----
    from quote_engine.calculate_costs import calculate_costs
    result = calculate_costs(df)
"""

import logging

import polars as pl

from .version import VERSION
from .errors import InvalidInput
from .columns import validate_columns
from .data import MIN_WEIGHT_KG, MAX_WEIGHT_KG
from .services import service_table
from .categories import category_table
from .surcharges import ALL


logger = logging.getLogger(__name__)

TRUE_VALUES = ["true", "1", "yes", "y", "on"]


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate quote costs for a shipment DataFrame.

    This is the main entry point. Takes raw shipment data and returns
    the same DataFrame with all calculation columns and costs appended.

    Args:
        df: Raw shipment DataFrame with required columns (see module docstring)

    Returns:
        DataFrame with supplemented data, surcharge flags, and costs

    Raises:
        InvalidInput: Missing columns, bad weights, unknown tiers or categories
    """
    df = supplement_shipments(df)
    df = calculate(df)
    return df


# =============================================================================
# SUPPLEMENT SHIPMENTS
# =============================================================================

def supplement_shipments(df: pl.DataFrame) -> pl.DataFrame:
    """
    Validate shipments and attach service tier and package category rates.

    Args:
        df: Raw shipment DataFrame

    Returns:
        DataFrame with added columns:
            - base_fee, per_kg_fee, surcharge_multiplier, transit_days
            - handling_fee, risk_multiplier
    """
    validate_columns(df)

    df = _normalise_inputs(df)
    _check_weights(df)
    df = _lookup_rates(df)

    return df


def _normalise_inputs(df: pl.DataFrame) -> pl.DataFrame:
    """Cast input columns to the types the pipeline expects."""
    flag = pl.col("insurance_requested")
    if df.schema["insurance_requested"] == pl.Utf8:
        flag = flag.str.strip_chars().str.to_lowercase().is_in(TRUE_VALUES)
    else:
        flag = flag.cast(pl.Boolean)

    return df.with_columns([
        # Non-numeric weights become null and are rejected by _check_weights
        pl.col("weight_kg").cast(pl.Float64, strict=False),
        pl.col("service_tier").cast(pl.Utf8),
        pl.col("package_category").cast(pl.Utf8),
        flag.fill_null(False).alias("insurance_requested"),
    ])


def _check_weights(df: pl.DataFrame) -> None:
    """
    Reject missing, non-finite and out-of-range weights.

    The range is inclusive: 1000 kg is accepted, 1000.0001 kg is not.
    """
    weight = pl.col("weight_kg")
    invalid = (
        df
        .with_row_index("_row")
        .filter(
            weight.is_null() |
            weight.is_nan() |
            weight.is_infinite() |
            (weight < MIN_WEIGHT_KG) |
            (weight > MAX_WEIGHT_KG)
        )
    )

    if len(invalid) > 0:
        rows = invalid["_row"].to_list()
        values = invalid["weight_kg"].to_list()
        raise InvalidInput(
            f"{len(invalid)} shipment(s) have invalid weight_kg "
            f"(rows {rows[:10]}, values {values[:10]}). "
            f"Weight must be a finite number between {MIN_WEIGHT_KG:g} and {MAX_WEIGHT_KG:g} kg.",
            field="weight_kg",
        )


def _lookup_rates(df: pl.DataFrame) -> pl.DataFrame:
    """Join service tier and package category tables; unknown names are errors."""
    df = df.with_row_index("_row_id")

    df = (
        df
        .join(service_table(), on="service_tier", how="left")
        .join(category_table(), on="package_category", how="left")
    )

    unknown_tiers = df.filter(pl.col("base_fee").is_null())["service_tier"].unique().to_list()
    if unknown_tiers:
        raise InvalidInput(
            f"Unknown service tier(s): {sorted(unknown_tiers, key=str)}",
            field="service_tier",
        )

    unknown_categories = (
        df.filter(pl.col("handling_fee").is_null())["package_category"].unique().to_list()
    )
    if unknown_categories:
        raise InvalidInput(
            f"Unknown package category(s): {sorted(unknown_categories, key=str)}",
            field="package_category",
        )

    df = df.sort("_row_id").drop("_row_id")

    return df


# =============================================================================
# CALCULATE COSTS
# =============================================================================

def calculate(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate quote costs for supplemented shipments.

    Args:
        df: Supplemented shipment DataFrame from supplement_shipments

    Returns:
        DataFrame with cost components, surcharge flags, costs and totals

    Processing order:
        1. Cost components - base fee, weight cost, handling fee
        2. Subtotal        - components * category risk_multiplier
        3. Surcharges      - percentage of subtotal (insurance)
        4. Total           - subtotal + surcharges
    """
    df = _calculate_components(df)
    df = _calculate_subtotal(df)
    df = _apply_surcharges(df, ALL)
    df = _calculate_total(df)
    df = _stamp_version(df)

    logger.debug("Calculated costs for %d shipment(s)", len(df))

    return df


def _calculate_components(df: pl.DataFrame) -> pl.DataFrame:
    """Add the three itemised cost components."""
    return df.with_columns([
        pl.col("base_fee").alias("cost_base"),
        (pl.col("weight_kg") * pl.col("per_kg_fee")).alias("cost_weight"),
        pl.col("handling_fee").alias("cost_handling"),
    ])


def _calculate_subtotal(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate cost_subtotal.

    Only the package category's risk_multiplier applies. The service tier's
    surcharge_multiplier is carried on the row but left out of the formula.
    """
    return df.with_columns(
        (
            pl.sum_horizontal(["cost_base", "cost_weight", "cost_handling"]) *
            pl.col("risk_multiplier")
        ).alias("cost_subtotal")
    )


def _apply_surcharges(df: pl.DataFrame, surcharges: list) -> pl.DataFrame:
    """Apply each surcharge: a flag column and a cost column (0.0 when not triggered)."""
    for surcharge in surcharges:
        if surcharge.depends_on is not None and surcharge.depends_on not in df.columns:
            raise ValueError(f"{surcharge.name}: requires column '{surcharge.depends_on}'")

        flag_col = surcharge.flag_col()
        cost_col = surcharge.cost_col()

        df = df.with_columns(surcharge.conditions().alias(flag_col))
        df = df.with_columns(
            pl.when(pl.col(flag_col))
            .then(surcharge.amount())
            .otherwise(pl.lit(0.0))
            .alias(cost_col)
        )

    return df


def _calculate_total(df: pl.DataFrame) -> pl.DataFrame:
    """Calculate cost_total as subtotal plus all surcharges."""
    cost_cols = ["cost_subtotal"] + [s.cost_col() for s in ALL]
    return df.with_columns(pl.sum_horizontal(cost_cols).alias("cost_total"))


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "calculate_costs",
    "supplement_shipments",
    "calculate",
]
