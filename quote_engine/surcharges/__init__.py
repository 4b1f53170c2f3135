"""
Surcharges Package

Exports all surcharge classes.

All surcharges are applied after cost_subtotal exists and are added to it
to form cost_total.
"""

from shared.surcharges import Surcharge
from .insurance import INS


# All surcharges
ALL = [INS]


# =============================================================================
# VALIDATION
# =============================================================================

def validate_surcharges() -> None:
    """
    Validate surcharge configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    names = [s.name for s in ALL]
    errors = []

    if len(set(names)) != len(names):
        errors.append(f"Duplicate surcharge names: {names}")

    for s in ALL:
        if getattr(s, "rate", None) is None:
            errors.append(f"{s.name}: rate is required")
        elif s.rate < 0:
            errors.append(f"{s.name}: rate must be >= 0, got {s.rate}")
        if s.minimum < 0:
            errors.append(f"{s.name}: minimum must be >= 0, got {s.minimum}")

    if errors:
        raise ValueError("Surcharge configuration errors:\n" + "\n".join(errors))


validate_surcharges()


__all__ = [
    "Surcharge",
    "INS",
    "ALL",
    "validate_surcharges",
]
