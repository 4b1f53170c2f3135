"""
Standard Service

Advertised as 5-7 business days; quoted at the midpoint.
"""

from .base import Service


class STANDARD(Service):
    """Standard ground service."""

    # Identity
    name = "standard"
    label = "Standard (5-7 days)"

    # Pricing
    base_fee = 5.99
    per_kg_fee = 2.50
    surcharge_multiplier = 1.0

    # Delivery
    transit_days = 6
    advertised_days = (5, 7)
