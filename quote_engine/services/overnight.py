"""
Overnight Service

Next-day delivery.
"""

from .base import Service


class OVERNIGHT(Service):
    """Overnight service."""

    # Identity
    name = "overnight"
    label = "Overnight"

    # Pricing
    base_fee = 25.99
    per_kg_fee = 6.50
    surcharge_multiplier = 2.0

    # Delivery
    transit_days = 1
    advertised_days = (1, 1)
