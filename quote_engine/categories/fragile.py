"""
Fragile Goods

Extra packing and handling, with a 30% risk loading on the whole subtotal.
"""

from .base import Category


class FRAGILE(Category):
    """Fragile items - handled manually."""

    name = "fragile"
    label = "Fragile Items"

    handling_fee = 8.00
    risk_multiplier = 1.3
