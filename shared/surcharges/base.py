"""
Surcharge Base Class

Shared base class for all quote surcharges.
"""

from abc import ABC
import polars as pl


# =============================================================================
# BASE CLASS
# =============================================================================

class Surcharge(ABC):
    """
    Base class for all surcharges.

    Attributes:
        IDENTITY
            name            - Short code (e.g., "INS")

        PRICING
            rate            - Share of base_col charged (0.03 = 3%)
            minimum         - Floor applied to the percentage amount
            base_col        - Column the percentage is taken of

        ORDERING
            depends_on      - Column that must exist before this surcharge
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str

    # -------------------------------------------------------------------------
    # PRICING
    # -------------------------------------------------------------------------
    rate: float
    minimum: float = 0.0
    base_col: str = "cost_subtotal"

    # -------------------------------------------------------------------------
    # ORDERING
    # -------------------------------------------------------------------------
    depends_on: str | None = None

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def flag_col(cls) -> str:
        return f"surcharge_{cls.name.lower()}"

    @classmethod
    def cost_col(cls) -> str:
        return f"cost_{cls.name.lower()}"

    @classmethod
    def amount(cls) -> pl.Expr:
        """
        Polars expression for the surcharge amount when triggered.

        Takes rate * base_col, floored at minimum.
        """
        return pl.max_horizontal(
            pl.col(cls.base_col) * cls.rate,
            pl.lit(cls.minimum),
        )

    @classmethod
    def conditions(cls) -> pl.Expr:
        """
        Polars expression for when this surcharge triggers.

        Default returns True. Override for opt-in or conditional surcharges.
        """
        return pl.lit(True)
