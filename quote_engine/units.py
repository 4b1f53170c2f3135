"""
Shipping Utilities

Weight conversion, dimensional weight and postal code checks.
"""

import re

from .data.reference.units import WEIGHT_UNITS, DIM_DIVISOR, POSTAL_CODE_PATTERNS
from .errors import InvalidInput


def convert_weight(weight: float, from_unit: str, to_unit: str) -> float:
    """
    Convert a weight between kg, lb, g and oz.

    Raises:
        InvalidInput: Unknown unit
    """
    for unit in (from_unit, to_unit):
        if unit not in WEIGHT_UNITS:
            raise InvalidInput(
                f"Unknown weight unit {unit!r}. Expected one of: {', '.join(WEIGHT_UNITS)}"
            )
    weight_kg = weight * WEIGHT_UNITS[from_unit]
    return weight_kg / WEIGHT_UNITS[to_unit]


def dimensional_weight(
    length_cm: float,
    width_cm: float,
    height_cm: float,
    divisor: float = DIM_DIVISOR,
) -> float:
    """Dimensional weight in kg: L x W x H (cm) / divisor."""
    return (length_cm * width_cm * height_cm) / divisor


def validate_postal_code(code: str, country: str = "US") -> bool:
    """
    Basic postal code format check.

    Countries without a pattern are accepted as-is.
    """
    pattern = POSTAL_CODE_PATTERNS.get(country)
    if pattern is None:
        return True
    return re.fullmatch(pattern, code) is not None


__all__ = [
    "convert_weight",
    "dimensional_weight",
    "validate_postal_code",
]
