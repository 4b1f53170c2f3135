"""
Column Schema Definitions

Documents all columns at each pipeline stage and provides validation utilities.
"""

import polars as pl

from .errors import InvalidInput
from .surcharges import ALL as ALL_SURCHARGES


# =============================================================================
# REQUIRED INPUT COLUMNS (must be present from any source)
# =============================================================================

REQUIRED_INPUT_COLS = [
    "weight_kg",            # Actual weight (kilograms, 0-1000)
    "service_tier",         # "standard", "express" or "overnight"
    "package_category",     # "document", "package", "fragile" or "hazardous"
    "insurance_requested",  # Boolean, insurance opt-in
]


# =============================================================================
# SUPPLEMENT COLUMNS (added by supplement_shipments)
# =============================================================================

SUPPLEMENT_COLS = [
    # Service tier lookup
    "base_fee",             # Flat fee per shipment
    "per_kg_fee",           # Fee per kilogram
    "surcharge_multiplier", # Published tier multiplier (not applied)
    "transit_days",         # Days to delivery

    # Package category lookup
    "handling_fee",         # Flat handling fee
    "risk_multiplier",      # Applied to base + weight + handling
]


# =============================================================================
# SURCHARGE COLUMNS (added by calculate - surcharge application)
# =============================================================================

SURCHARGE_FLAG_COLS = [s.flag_col() for s in ALL_SURCHARGES]
# surcharge_ins

SURCHARGE_COST_COLS = [s.cost_col() for s in ALL_SURCHARGES]
# cost_ins


# =============================================================================
# COST COLUMNS (added by calculate - cost calculation)
# =============================================================================

COST_COLS = [
    "cost_base",            # Service base fee
    "cost_weight",          # weight_kg * per_kg_fee
    "cost_handling",        # Category handling fee
    "cost_subtotal",        # (base + weight + handling) * risk_multiplier
    "cost_total",           # Subtotal + all surcharges
]


# =============================================================================
# METADATA COLUMNS
# =============================================================================

METADATA_COLS = [
    "calculator_version",   # Version stamp from quote_engine/version.py
]


# =============================================================================
# COLUMN SETS
# =============================================================================

AFTER_SUPPLEMENT = REQUIRED_INPUT_COLS + SUPPLEMENT_COLS

AFTER_CALCULATE = (
    REQUIRED_INPUT_COLS +
    SUPPLEMENT_COLS +
    COST_COLS +
    SURCHARGE_FLAG_COLS +
    SURCHARGE_COST_COLS +
    METADATA_COLS
)


# =============================================================================
# VALIDATION
# =============================================================================

def validate_columns(df: pl.DataFrame, required: list[str] = REQUIRED_INPUT_COLS) -> None:
    """
    Check that all required columns are present.

    Raises:
        InvalidInput: Listing the missing columns
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise InvalidInput(f"Missing required columns: {', '.join(missing)}")
