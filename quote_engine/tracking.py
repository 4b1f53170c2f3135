"""
Tracking Number Generation

Display token, not a key: uniqueness rests on the timestamp and random
suffix, and nothing checks for collisions.

Format:
    LC + last 8 digits of epoch milliseconds + 4 base-36 characters
    e.g. LC29384756K3Z0
"""

import random
from datetime import datetime
from typing import Callable, Protocol

from .data.reference.tracking import PREFIX, TIMESTAMP_DIGITS, SUFFIX_LENGTH, ALPHABET


class Entropy(Protocol):
    """Anything with random.Random's randrange, e.g. random.Random(seed)."""

    def randrange(self, stop: int) -> int: ...


Clock = Callable[[], datetime]

_SYSTEM_RANDOM = random.SystemRandom()


def epoch_millis(moment: datetime) -> int:
    """Unix epoch milliseconds. Naive datetimes are read as local time."""
    # Whole seconds are exact as floats; add milliseconds separately
    seconds = int(moment.replace(microsecond=0).timestamp())
    return seconds * 1000 + moment.microsecond // 1000


def generate_tracking_number(
    clock: Clock | None = None,
    rng: Entropy | None = None,
) -> str:
    """
    Generate a tracking number.

    Args:
        clock: Returns the current datetime (default datetime.now)
        rng: Entropy source for the suffix (default system randomness)

    Returns:
        14-character string matching ^[A-Z]{2}\\d{8}[A-Z0-9]{4}$
    """
    clock = clock or datetime.now
    rng = rng or _SYSTEM_RANDOM

    millis = epoch_millis(clock())
    timestamp = str(millis % 10 ** TIMESTAMP_DIGITS).zfill(TIMESTAMP_DIGITS)
    suffix = "".join(ALPHABET[rng.randrange(len(ALPHABET))] for _ in range(SUFFIX_LENGTH))

    return f"{PREFIX}{timestamp}{suffix}"


__all__ = [
    "Clock",
    "Entropy",
    "epoch_millis",
    "generate_tracking_number",
]
