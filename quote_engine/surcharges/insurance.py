"""
Insurance Surcharge (INS)

OPT-IN PERCENTAGE SURCHARGE
---------------------------
Charged only when the customer ticks the insurance box. The amount is a
percentage of the subtotal (after the package risk multiplier) with a fixed
floor:

    cost = max(cost_subtotal * RATE, MINIMUM)

With a 3% rate and $5.00 floor, the floor wins for subtotals below $166.67.
"""

import polars as pl
from shared.surcharges import Surcharge

from ..data.reference.insurance import RATE, MINIMUM


class INS(Surcharge):
    """Insurance - 3% of subtotal, minimum $5.00."""

    # Identity
    name = "INS"

    # Pricing
    rate = RATE
    minimum = MINIMUM
    base_col = "cost_subtotal"

    # Ordering
    depends_on = "cost_subtotal"

    @classmethod
    def conditions(cls) -> pl.Expr:
        return pl.col("insurance_requested")
