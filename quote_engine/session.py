"""
Quote Session

Holds the most recent quote for one user session, the only state the
calculator keeps. Nothing is persisted.
"""

import logging
from datetime import datetime, timezone
from typing import Mapping

from .data import CURRENCY
from .engine import compute_quote
from .form import parse_form
from .models import Quote, ShipmentRequest
from .tracking import Clock, Entropy


logger = logging.getLogger(__name__)


def utc_timestamp(moment: datetime) -> str:
    """ISO 8601 UTC with millisecond precision and a Z suffix."""
    stamp = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


class QuoteSession:
    """
    Session-scoped quoting: submit a form, keep the last quote, export it.

    Args:
        clock: Returns the current datetime (default datetime.now)
        rng: Entropy for tracking numbers (default system randomness)
    """

    def __init__(self, clock: Clock | None = None, rng: Entropy | None = None):
        self.clock = clock or datetime.now
        self.rng = rng
        self.last_quote: Quote | None = None

    def submit(self, form_data: Mapping[str, str]) -> Quote:
        """Parse form fields and quote them. Raises InvalidInput on bad input."""
        return self.quote(parse_form(form_data))

    def quote(self, request: ShipmentRequest) -> Quote:
        """Quote a request and remember it as the last quote."""
        quote = compute_quote(request, clock=self.clock, rng=self.rng)
        self.last_quote = quote
        logger.info("Quote %s: %s %s", quote.tracking_number, quote.total_cost, CURRENCY)
        return quote

    def reset(self) -> None:
        """Forget the last quote (new quote requested)."""
        self.last_quote = None

    def export_quote(self) -> dict | None:
        """
        Last quote as a flat record with export timestamp and currency.

        Returns None when nothing has been quoted yet.
        """
        if self.last_quote is None:
            return None
        return {
            **self.last_quote.to_record(),
            "timestamp": utc_timestamp(self.clock()),
            "currency": CURRENCY,
        }


__all__ = [
    "QuoteSession",
    "utc_timestamp",
]
