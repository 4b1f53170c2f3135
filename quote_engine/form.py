"""
Quote Form Handling

Turns submitted form fields into a ShipmentRequest. These are UI-level
guards: the weight is clamped the way the form input clamps it, and the
dimension string is checked against the LxWxH pattern. The engine still
validates the resulting request on its own.

Form fields:
    weight          - Kilograms, as typed
    dimensions      - "LxWxH" in whole centimetres, optional
    shippingType    - Service tier name
    packageType     - Package category name
    insurance       - "on" when the checkbox is ticked, absent otherwise
"""

import logging
import math
import re
from typing import Mapping

from .data import MIN_WEIGHT_KG, MAX_WEIGHT_KG, DIMENSIONS_PATTERN
from .errors import InvalidInput
from .models import ShipmentRequest


logger = logging.getLogger(__name__)

DIMENSIONS_MESSAGE = "Please enter dimensions in format: LxWxH (e.g., 30x20x15)"
MAX_WEIGHT_MESSAGE = (
    f"Maximum weight is {MAX_WEIGHT_KG:g}kg. Please contact us for heavier shipments."
)

_DIMENSIONS_RE = re.compile(DIMENSIONS_PATTERN, re.ASCII)


def clamp_weight(value: float) -> float:
    """Clamp a typed weight into [0, 1000] kg."""
    if value < MIN_WEIGHT_KG:
        return MIN_WEIGHT_KG
    if value > MAX_WEIGHT_KG:
        logger.warning(MAX_WEIGHT_MESSAGE)
        return MAX_WEIGHT_KG
    return value


def parse_weight(text) -> float:
    """
    Parse and clamp the weight field.

    Raises:
        InvalidInput: Empty, non-numeric or non-finite input
    """
    try:
        value = float(str(text).strip())
    except ValueError:
        raise InvalidInput(f"Weight must be a number, got {text!r}", field="weight_kg")
    if math.isnan(value):
        raise InvalidInput(f"Weight must be a number, got {text!r}", field="weight_kg")
    return clamp_weight(value)


def parse_dimensions(text: str | None) -> tuple[int, int, int] | None:
    """
    Parse "LxWxH" into (length, width, height).

    Empty input means no dimensions were given.

    Raises:
        InvalidInput: Text does not match the LxWxH pattern
    """
    if text is None or not text.strip():
        return None
    text = text.strip()
    if not _DIMENSIONS_RE.fullmatch(text):
        raise InvalidInput(DIMENSIONS_MESSAGE, field="dimensions_cm")
    length, width, height = (int(part) for part in text.split("x"))
    return length, width, height


def parse_form(data: Mapping[str, str]) -> ShipmentRequest:
    """
    Build a ShipmentRequest from submitted form fields.

    Tier and category names are passed through as submitted; unknown names
    are rejected by the engine.

    Raises:
        InvalidInput: Missing or malformed fields
    """
    for field in ("weight", "shippingType", "packageType"):
        if not str(data.get(field) or "").strip():
            raise InvalidInput(f"Missing required field: {field}", field=field)

    return ShipmentRequest(
        weight_kg=parse_weight(data["weight"]),
        service_tier=data["shippingType"].strip(),
        package_category=data["packageType"].strip(),
        insurance_requested=data.get("insurance") == "on",
        dimensions_cm=parse_dimensions(data.get("dimensions")),
    )


__all__ = [
    "clamp_weight",
    "parse_weight",
    "parse_dimensions",
    "parse_form",
    "DIMENSIONS_MESSAGE",
    "MAX_WEIGHT_MESSAGE",
]
