"""
Hazardous Materials

Dangerous goods need declaration and segregated handling. The 80% risk
loading applies to base, weight and handling costs together.
"""

from .base import Category


class HAZARDOUS(Category):
    """Hazardous materials - declared dangerous goods."""

    name = "hazardous"
    label = "Hazardous Materials"

    handling_fee = 15.00
    risk_multiplier = 1.8
