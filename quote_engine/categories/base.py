"""
Package Category Base Class
"""

from abc import ABC


class Category(ABC):
    """
    Base class for package categories.

    Attributes:
        name            - Category code as submitted by the form
        handling_fee    - Flat handling fee per shipment
        risk_multiplier - Applied to base + weight + handling
    """

    name: str
    label: str

    handling_fee: float = 0.0
    risk_multiplier: float = 1.0
