"""
Unit Tests for Delivery Estimates and Tracking Numbers
"""

import random
import re
from datetime import date, datetime, timezone

import pytest

from quote_engine.delivery import delivery_date, estimate_delivery_date, format_long_date
from quote_engine.errors import InvalidInput
from quote_engine.data.reference.tracking import PATTERN
from quote_engine.tracking import epoch_millis, generate_tracking_number


TRACKING_RE = re.compile(PATTERN)


class SequenceRng:
    """Entropy stub returning preset values."""

    def __init__(self, values):
        self.values = list(values)

    def randrange(self, stop):
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value


# =============================================================================
# DELIVERY DATE TESTS
# =============================================================================

class TestDeliveryDate:
    """Reference date + transit days (standard 6, express 3, overnight 1)."""

    REFERENCE = date(2026, 10, 18)  # Sunday

    @pytest.mark.parametrize("tier, expected", [
        ("standard", date(2026, 10, 24)),
        ("express", date(2026, 10, 21)),
        ("overnight", date(2026, 10, 19)),
    ])
    def test_transit_days(self, tier, expected):
        assert delivery_date(tier, self.REFERENCE) == expected

    def test_display_strings(self):
        assert estimate_delivery_date("standard", self.REFERENCE) == "Saturday, October 24, 2026"
        assert estimate_delivery_date("express", self.REFERENCE) == "Wednesday, October 21, 2026"
        assert estimate_delivery_date("overnight", self.REFERENCE) == "Monday, October 19, 2026"

    def test_datetime_reference_uses_calendar_date(self):
        """Late evening still counts from that day."""
        late = datetime(2026, 10, 18, 23, 59)
        assert delivery_date("overnight", late) == date(2026, 10, 19)

    def test_year_rollover(self):
        assert estimate_delivery_date("standard", date(2026, 12, 30)) == "Tuesday, January 5, 2027"

    def test_leap_day(self):
        assert delivery_date("overnight", date(2028, 2, 28)) == date(2028, 2, 29)

    def test_single_digit_day_not_padded(self):
        assert format_long_date(date(2026, 11, 2)) == "Monday, November 2, 2026"

    def test_faster_tiers_deliver_no_later(self):
        dates = [delivery_date(t, self.REFERENCE) for t in ("overnight", "express", "standard")]
        assert dates == sorted(dates)

    def test_unknown_tier(self):
        with pytest.raises(InvalidInput):
            delivery_date("economy", self.REFERENCE)


# =============================================================================
# TRACKING NUMBER TESTS
# =============================================================================

class TestTrackingNumber:
    """LC + last 8 digits of epoch ms + 4 base-36 characters."""

    MOMENT = datetime(2026, 10, 18, 9, 30, tzinfo=timezone.utc)  # 1792315800000 ms

    def test_epoch_millis(self):
        assert epoch_millis(self.MOMENT) == 1792315800000

    def test_format(self):
        number = generate_tracking_number(
            clock=lambda: self.MOMENT,
            rng=SequenceRng([0, 10, 35, 1]),
        )
        assert number == "LC158000000AZ1"
        assert len(number) == 14

    def test_short_timestamp_zero_padded(self):
        moment = datetime.fromtimestamp(5, tz=timezone.utc)  # 5000 ms
        number = generate_tracking_number(clock=lambda: moment, rng=SequenceRng([1, 2, 3, 4]))
        assert number == "LC000050001234"

    def test_sub_second_precision(self):
        moment = datetime(2026, 10, 18, 9, 30, 0, 123000, tzinfo=timezone.utc)
        number = generate_tracking_number(clock=lambda: moment, rng=random.Random(0))
        assert number[2:10] == "15800123"

    def test_deterministic_with_same_seed(self):
        first = generate_tracking_number(clock=lambda: self.MOMENT, rng=random.Random(7))
        second = generate_tracking_number(clock=lambda: self.MOMENT, rng=random.Random(7))
        assert first == second

    def test_pattern_with_default_sources(self):
        for _ in range(200):
            assert TRACKING_RE.match(generate_tracking_number())

    def test_pattern_with_seeded_entropy(self):
        rng = random.Random(2026)
        for _ in range(500):
            assert TRACKING_RE.match(generate_tracking_number(clock=lambda: self.MOMENT, rng=rng))
