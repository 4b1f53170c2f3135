"""
Service Tiers Package

Exports all service tier classes and lookup helpers.

Note: surcharge_multiplier is published on each tier but the pricing formula
only applies the package category's risk_multiplier.
"""

import polars as pl

from ..errors import InvalidInput
from .base import Service
from .standard import STANDARD
from .express import EXPRESS
from .overnight import OVERNIGHT


# All service tiers, fastest last
ALL = [STANDARD, EXPRESS, OVERNIGHT]

NAMES = tuple(s.name for s in ALL)


# =============================================================================
# HELPERS
# =============================================================================

def get_service(name: str) -> type[Service]:
    """
    Look up a service tier by name.

    Raises:
        InvalidInput: If name is not a known tier
    """
    for service in ALL:
        if service.name == name:
            return service
    raise InvalidInput(
        f"Unknown service tier {name!r}. Expected one of: {', '.join(NAMES)}",
        field="service_tier",
    )


def service_table() -> pl.DataFrame:
    """
    Service tiers as a DataFrame, ready for joining on service_tier.

    Returns:
        DataFrame with columns:
            - service_tier, base_fee, per_kg_fee, surcharge_multiplier,
              transit_days
    """
    return pl.DataFrame({
        "service_tier": [s.name for s in ALL],
        "base_fee": [s.base_fee for s in ALL],
        "per_kg_fee": [s.per_kg_fee for s in ALL],
        "surcharge_multiplier": [s.surcharge_multiplier for s in ALL],
        "transit_days": [s.transit_days for s in ALL],
    })


# =============================================================================
# VALIDATION
# =============================================================================

def validate_services() -> None:
    """
    Validate service tier configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []

    if len(set(NAMES)) != len(NAMES):
        errors.append(f"Duplicate service tier names: {NAMES}")

    for s in ALL:
        if s.base_fee < 0:
            errors.append(f"{s.name}: base_fee must be >= 0, got {s.base_fee}")
        if s.per_kg_fee < 0:
            errors.append(f"{s.name}: per_kg_fee must be >= 0, got {s.per_kg_fee}")
        if s.surcharge_multiplier < 1:
            errors.append(
                f"{s.name}: surcharge_multiplier must be >= 1, got {s.surcharge_multiplier}"
            )
        if s.transit_days < 1:
            errors.append(f"{s.name}: transit_days must be >= 1, got {s.transit_days}")
        low, high = s.advertised_days
        if not low <= s.transit_days <= high:
            errors.append(
                f"{s.name}: transit_days {s.transit_days} outside advertised range {low}-{high}"
            )

    if errors:
        raise ValueError("Service configuration errors:\n" + "\n".join(errors))


validate_services()


__all__ = [
    "Service",
    "STANDARD",
    "EXPRESS",
    "OVERNIGHT",
    "ALL",
    "NAMES",
    "get_service",
    "service_table",
    "validate_services",
]
