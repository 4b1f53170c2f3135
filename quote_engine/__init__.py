"""
Shipping Quote Engine

Quote calculator for standard, express and overnight shipments: itemised
costs, delivery estimate and tracking number.
"""

from .calculate_costs import calculate_costs
from .engine import compute_quote
from .errors import InvalidInput
from .models import Quote, ShipmentRequest
from .version import VERSION

__all__ = ["calculate_costs", "compute_quote", "InvalidInput", "Quote", "ShipmentRequest", "VERSION"]
