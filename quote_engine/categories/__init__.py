"""
Package Categories Package

Exports all package category classes and lookup helpers.
"""

import polars as pl

from ..errors import InvalidInput
from .base import Category
from .document import DOCUMENT
from .package import PACKAGE
from .fragile import FRAGILE
from .hazardous import HAZARDOUS


ALL = [DOCUMENT, PACKAGE, FRAGILE, HAZARDOUS]

NAMES = tuple(c.name for c in ALL)


# =============================================================================
# HELPERS
# =============================================================================

def get_category(name: str) -> type[Category]:
    """
    Look up a package category by name.

    Raises:
        InvalidInput: If name is not a known category
    """
    for category in ALL:
        if category.name == name:
            return category
    raise InvalidInput(
        f"Unknown package category {name!r}. Expected one of: {', '.join(NAMES)}",
        field="package_category",
    )


def category_table() -> pl.DataFrame:
    """
    Package categories as a DataFrame, ready for joining on package_category.

    Returns:
        DataFrame with columns: package_category, handling_fee, risk_multiplier
    """
    return pl.DataFrame({
        "package_category": [c.name for c in ALL],
        "handling_fee": [float(c.handling_fee) for c in ALL],
        "risk_multiplier": [float(c.risk_multiplier) for c in ALL],
    })


# =============================================================================
# VALIDATION
# =============================================================================

def validate_categories() -> None:
    """
    Validate package category configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []

    if len(set(NAMES)) != len(NAMES):
        errors.append(f"Duplicate package category names: {NAMES}")

    for c in ALL:
        if c.handling_fee < 0:
            errors.append(f"{c.name}: handling_fee must be >= 0, got {c.handling_fee}")
        if c.risk_multiplier < 1:
            errors.append(f"{c.name}: risk_multiplier must be >= 1, got {c.risk_multiplier}")

    if errors:
        raise ValueError("Category configuration errors:\n" + "\n".join(errors))


validate_categories()


__all__ = [
    "Category",
    "DOCUMENT",
    "PACKAGE",
    "FRAGILE",
    "HAZARDOUS",
    "ALL",
    "NAMES",
    "get_category",
    "category_table",
    "validate_categories",
]
