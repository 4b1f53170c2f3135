"""
Service Tier Base Class

Every tier is a class carrying its rate card as class attributes.
"""

from abc import ABC


class Service(ABC):
    """
    Base class for service tiers.

    Attributes:
        IDENTITY
            name                 - Tier code as submitted by the form

        PRICING
            base_fee             - Flat fee per shipment
            per_kg_fee           - Fee per kilogram of actual weight
            surcharge_multiplier - Tier multiplier (published, not applied)

        DELIVERY
            transit_days         - Days added to the reference date
            advertised_days      - (min, max) range shown to customers
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str
    label: str

    # -------------------------------------------------------------------------
    # PRICING
    # -------------------------------------------------------------------------
    base_fee: float
    per_kg_fee: float
    surcharge_multiplier: float = 1.0

    # -------------------------------------------------------------------------
    # DELIVERY
    # -------------------------------------------------------------------------
    transit_days: int
    advertised_days: tuple[int, int]
