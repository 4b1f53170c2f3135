"""
Quote Engine

Single-shipment entry point. A validated ShipmentRequest runs through the
same pipeline as batch input (as a one-row DataFrame), and the unrounded
costs are rounded once into a Quote.

Clock and entropy are injected so quotes are reproducible in tests:

    quote = compute_quote(request, clock=lambda: datetime(2026, 10, 18, 9, 30),
                          rng=random.Random(7))
"""

import logging
import math
from datetime import datetime
from decimal import Decimal
from numbers import Real

import polars as pl

from .calculate_costs import calculate_costs
from .categories import get_category
from .data import MIN_WEIGHT_KG, MAX_WEIGHT_KG
from .delivery import delivery_date, format_long_date
from .errors import InvalidInput
from .models import Quote, ShipmentRequest, to_currency
from .services import get_service
from .surcharges import INS
from .tracking import Clock, Entropy, generate_tracking_number


logger = logging.getLogger(__name__)


# =============================================================================
# VALIDATION
# =============================================================================

def validate_weight(weight_kg) -> float:
    """
    Check a weight is a finite number in [0, 1000] kg.

    The engine rejects rather than clamps; clamping is a form concern.

    Raises:
        InvalidInput: Non-numeric, non-finite or out-of-range weight
    """
    if isinstance(weight_kg, bool) or not isinstance(weight_kg, (Real, Decimal)):
        raise InvalidInput(f"Weight must be a number, got {weight_kg!r}", field="weight_kg")

    try:
        weight = float(weight_kg)
    except (OverflowError, ValueError):
        raise InvalidInput(
            f"Weight {weight_kg!r} kg is outside {MIN_WEIGHT_KG:g}-{MAX_WEIGHT_KG:g} kg",
            field="weight_kg",
        )
    if not math.isfinite(weight):
        raise InvalidInput(f"Weight must be finite, got {weight_kg!r}", field="weight_kg")
    if weight < MIN_WEIGHT_KG:
        raise InvalidInput(f"Weight cannot be negative: {weight_kg!r}", field="weight_kg")
    if weight > MAX_WEIGHT_KG:
        raise InvalidInput(
            f"Weight {weight_kg!r} kg exceeds maximum {MAX_WEIGHT_KG:g} kg",
            field="weight_kg",
        )
    return weight


def validate_request(request: ShipmentRequest) -> None:
    """
    Validate a request before pricing.

    Raises:
        InvalidInput: Bad weight, unknown service tier or package category
    """
    validate_weight(request.weight_kg)
    get_service(request.service_tier)
    get_category(request.package_category)


# =============================================================================
# QUOTES
# =============================================================================

def compute_quote(
    request: ShipmentRequest,
    clock: Clock | None = None,
    rng: Entropy | None = None,
) -> Quote:
    """
    Price a single shipment.

    Args:
        request: Shipment to quote
        clock: Returns the quote time (default datetime.now). Read once; the
            same instant dates the delivery estimate and the tracking number.
        rng: Entropy for the tracking number suffix

    Returns:
        Fully itemised Quote

    Raises:
        InvalidInput: If the request fails validation
    """
    validate_request(request)

    df = calculate_costs(pl.DataFrame([request.to_row()]))
    quote = build_quote(df.row(0, named=True), clock=clock, rng=rng)

    logger.debug(
        "Quoted %s/%s %.3f kg (insurance=%s): total %s",
        request.service_tier,
        request.package_category,
        float(request.weight_kg),
        request.insurance_requested,
        quote.total_cost,
    )

    return quote


def quotes_from_frame(
    df: pl.DataFrame,
    clock: Clock | None = None,
    rng: Entropy | None = None,
) -> list[Quote]:
    """
    Build one Quote per shipment row.

    Raw input is run through calculate_costs first; already calculated
    frames (with cost_total) are used as they are.
    """
    if "cost_total" not in df.columns:
        df = calculate_costs(df)

    return [build_quote(row, clock=clock, rng=rng) for row in df.iter_rows(named=True)]


def build_quote(
    row: dict,
    clock: Clock | None = None,
    rng: Entropy | None = None,
) -> Quote:
    """Round a calculated pipeline row into a Quote."""
    clock = clock or datetime.now
    now = clock()
    delivers_on = delivery_date(row["service_tier"], now)

    return Quote(
        base_cost=to_currency(row["cost_base"]),
        weight_cost=to_currency(row["cost_weight"]),
        handling_cost=to_currency(row["cost_handling"]),
        subtotal=to_currency(row["cost_subtotal"]),
        insurance_cost=to_currency(row[INS.cost_col()]),
        total_cost=to_currency(row["cost_total"]),
        estimated_delivery_date=format_long_date(delivers_on),
        delivery_date=delivers_on,
        tracking_number=generate_tracking_number(clock=lambda: now, rng=rng),
        service_tier=row["service_tier"],
        package_category=row["package_category"],
        weight_kg=row["weight_kg"],
        insurance_requested=row["insurance_requested"],
        calculator_version=row["calculator_version"],
    )


__all__ = [
    "compute_quote",
    "quotes_from_frame",
    "build_quote",
    "validate_request",
    "validate_weight",
]
