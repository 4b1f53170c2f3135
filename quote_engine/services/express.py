"""
Express Service

Advertised as 2-3 business days; quoted at the upper end.
"""

from .base import Service


class EXPRESS(Service):
    """Express service."""

    # Identity
    name = "express"
    label = "Express (2-3 days)"

    # Pricing
    base_fee = 12.99
    per_kg_fee = 4.00
    surcharge_multiplier = 1.5

    # Delivery
    transit_days = 3
    advertised_days = (2, 3)
