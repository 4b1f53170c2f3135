"""Regular parcels."""

from .base import Category


class PACKAGE(Category):
    name = "package"
    label = "Package"

    handling_fee = 2.50
    risk_multiplier = 1.0
