"""
Quote Value Objects

ShipmentRequest goes in, Quote comes out. Both are immutable and live only
as long as the caller keeps them.
"""

from dataclasses import dataclass, asdict
from datetime import date
from decimal import Decimal

from .data.reference import CURRENCY_PLACES
from .data.reference.billing import ROUNDING


_QUANTUM = Decimal(1).scaleb(-CURRENCY_PLACES)  # Decimal("0.01")


def to_currency(value: float) -> Decimal:
    """
    Round an amount to currency precision.

    Rounds the exact binary value half-up, the same result as two-decimal
    display formatting (33.489999... -> 33.49, 133.482 -> 133.48).
    """
    return Decimal(value).quantize(_QUANTUM, rounding=ROUNDING)


@dataclass(frozen=True)
class ShipmentRequest:
    """
    A shipment to be quoted.

    Attributes:
        weight_kg           - Actual weight, 0 <= weight_kg <= 1000
        service_tier        - "standard", "express" or "overnight"
        package_category    - "document", "package", "fragile" or "hazardous"
        insurance_requested - True to add insurance
        dimensions_cm       - (length, width, height) from the form, not priced
    """
    weight_kg: float
    service_tier: str
    package_category: str
    insurance_requested: bool = False
    dimensions_cm: tuple[int, int, int] | None = None

    def to_row(self) -> dict:
        """Pipeline input row (see pipeline.columns.REQUIRED_INPUT_COLS)."""
        return {
            "weight_kg": float(self.weight_kg),
            "service_tier": self.service_tier,
            "package_category": self.package_category,
            "insurance_requested": bool(self.insurance_requested),
        }


@dataclass(frozen=True)
class Quote:
    """
    An itemised quote.

    Currency fields are rounded once, from the unrounded pipeline values, so
    total_cost can differ by a cent from the sum of the rounded parts.
    """
    base_cost: Decimal
    weight_cost: Decimal
    handling_cost: Decimal
    subtotal: Decimal
    insurance_cost: Decimal
    total_cost: Decimal
    estimated_delivery_date: str
    delivery_date: date
    tracking_number: str
    service_tier: str
    package_category: str
    weight_kg: float
    insurance_requested: bool
    calculator_version: str

    def to_record(self) -> dict:
        """
        Flat key-value record for export.

        Currency values become two-decimal strings and delivery_date an ISO
        date string.
        """
        record = asdict(self)
        for key, value in record.items():
            if isinstance(value, Decimal):
                record[key] = f"{value:.{CURRENCY_PLACES}f}"
        record["delivery_date"] = self.delivery_date.isoformat()
        return record


CURRENCY_FIELDS = (
    "base_cost",
    "weight_cost",
    "handling_cost",
    "subtotal",
    "insurance_cost",
    "total_cost",
)


__all__ = [
    "ShipmentRequest",
    "Quote",
    "CURRENCY_FIELDS",
    "to_currency",
]
