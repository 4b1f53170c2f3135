"""
Quote Engine Errors

A single error kind covers every rejected input: out-of-range or non-finite
weights, unknown service tiers or package categories, malformed form fields.
"""


class InvalidInput(ValueError):
    """Shipment input the engine refuses to price."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


__all__ = [
    "InvalidInput",
]
