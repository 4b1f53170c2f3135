"""
Quote Engine Data

Structure:
    - reference/: Static reference data (limits, insurance, tracking, units)
"""

from .reference import (
    MIN_WEIGHT_KG,
    MAX_WEIGHT_KG,
    DIMENSIONS_PATTERN,
    INSURANCE_RATE,
    INSURANCE_MINIMUM,
    TRACKING_PREFIX,
    CURRENCY,
    CURRENCY_PLACES,
)

__all__ = [
    "MIN_WEIGHT_KG",
    "MAX_WEIGHT_KG",
    "DIMENSIONS_PATTERN",
    "INSURANCE_RATE",
    "INSURANCE_MINIMUM",
    "TRACKING_PREFIX",
    "CURRENCY",
    "CURRENCY_PLACES",
]
