"""
Shared Surcharges

Base class for quote surcharges.
"""

from .base import Surcharge

__all__ = [
    "Surcharge",
]
