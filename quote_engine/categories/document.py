"""Documents: envelopes and flat paper shipments. No handling fee."""

from .base import Category


class DOCUMENT(Category):
    name = "document"
    label = "Document"

    handling_fee = 0.00
    risk_multiplier = 1.0
