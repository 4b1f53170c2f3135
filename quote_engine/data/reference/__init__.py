"""
Quote Engine Reference Data

Static constants used by the pipeline. Service tier and package category
tables live with their classes in quote_engine.services and
quote_engine.categories.
"""

from .limits import MIN_WEIGHT_KG, MAX_WEIGHT_KG, DIMENSIONS_PATTERN
from .insurance import RATE as INSURANCE_RATE, MINIMUM as INSURANCE_MINIMUM
from .tracking import PREFIX as TRACKING_PREFIX, TIMESTAMP_DIGITS, SUFFIX_LENGTH, ALPHABET
from .billing import CURRENCY, CURRENCY_PLACES

__all__ = [
    "MIN_WEIGHT_KG",
    "MAX_WEIGHT_KG",
    "DIMENSIONS_PATTERN",
    "INSURANCE_RATE",
    "INSURANCE_MINIMUM",
    "TRACKING_PREFIX",
    "TIMESTAMP_DIGITS",
    "SUFFIX_LENGTH",
    "ALPHABET",
    "CURRENCY",
    "CURRENCY_PLACES",
]
