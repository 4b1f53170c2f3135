"""
Unit Tests for Form Parsing and Quote Sessions
"""

import logging
import random
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from quote_engine.errors import InvalidInput
from quote_engine.form import (
    DIMENSIONS_MESSAGE,
    clamp_weight,
    parse_dimensions,
    parse_form,
    parse_weight,
)
from quote_engine.session import QuoteSession, utc_timestamp


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def form_data():
    """Submitted form: 10 kg standard package with insurance."""
    return {
        "weight": "10",
        "dimensions": "30x20x15",
        "shippingType": "standard",
        "packageType": "package",
        "insurance": "on",
    }


@pytest.fixture
def session():
    return QuoteSession(
        clock=lambda: datetime(2026, 10, 18, 9, 30, tzinfo=timezone.utc),
        rng=random.Random(3),
    )


# =============================================================================
# FORM TESTS
# =============================================================================

class TestWeightField:
    """The form clamps weights into [0, 1000]."""

    def test_within_range(self):
        assert clamp_weight(12.5) == 12.5

    def test_negative_clamped_to_zero(self):
        assert clamp_weight(-3) == 0.0

    def test_heavy_clamped_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="quote_engine.form"):
            assert clamp_weight(1500) == 1000.0
        assert "contact us for heavier shipments" in caplog.text

    def test_parse_text(self):
        assert parse_weight(" 7.25 ") == 7.25

    @pytest.mark.parametrize("text", ["", "abc", "nan", "10kg"])
    def test_parse_rejects_non_numbers(self, text):
        with pytest.raises(InvalidInput):
            parse_weight(text)


class TestDimensionsField:
    """Dimensions must match LxWxH."""

    def test_valid(self):
        assert parse_dimensions("30x20x15") == (30, 20, 15)

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_empty_is_none(self, text):
        assert parse_dimensions(text) is None

    @pytest.mark.parametrize("text", [
        "30x20", "30*20*15", "30x20x15x5", "3.5x2x1", "30X20X15", "axbxc",
        "\u0663\u0660x\u0662\u0660x\u0661\u0665",
    ])
    def test_invalid(self, text):
        with pytest.raises(InvalidInput, match="LxWxH"):
            parse_dimensions(text)

    def test_message(self):
        with pytest.raises(InvalidInput) as exc:
            parse_dimensions("30-20-15")
        assert str(exc.value) == DIMENSIONS_MESSAGE


class TestParseForm:
    """Tests for building a ShipmentRequest from form fields."""

    def test_full_form(self, form_data):
        request = parse_form(form_data)
        assert request.weight_kg == 10.0
        assert request.service_tier == "standard"
        assert request.package_category == "package"
        assert request.insurance_requested is True
        assert request.dimensions_cm == (30, 20, 15)

    def test_unticked_insurance(self, form_data):
        del form_data["insurance"]
        assert parse_form(form_data).insurance_requested is False

    def test_optional_dimensions(self, form_data):
        form_data["dimensions"] = ""
        assert parse_form(form_data).dimensions_cm is None

    def test_overweight_is_clamped(self, form_data):
        form_data["weight"] = "2500"
        assert parse_form(form_data).weight_kg == 1000.0

    @pytest.mark.parametrize("field", ["weight", "shippingType", "packageType"])
    def test_missing_field(self, form_data, field):
        del form_data[field]
        with pytest.raises(InvalidInput, match=field):
            parse_form(form_data)


# =============================================================================
# SESSION TESTS
# =============================================================================

class TestQuoteSession:
    """Tests for last-quote handling and export."""

    def test_submit_stores_last_quote(self, session, form_data):
        quote = session.submit(form_data)
        assert session.last_quote is quote
        assert quote.total_cost == Decimal("38.49")

    def test_new_quote_supersedes(self, session, form_data):
        session.submit(form_data)
        form_data["shippingType"] = "overnight"
        second = session.submit(form_data)
        assert session.last_quote is second
        assert second.service_tier == "overnight"

    def test_invalid_submission_keeps_previous_quote(self, session, form_data):
        first = session.submit(form_data)
        form_data["packageType"] = "perishable"
        with pytest.raises(InvalidInput):
            session.submit(form_data)
        assert session.last_quote is first

    def test_reset(self, session, form_data):
        session.submit(form_data)
        session.reset()
        assert session.last_quote is None

    def test_export_without_quote(self, session):
        assert session.export_quote() is None

    def test_export(self, session, form_data):
        session.submit(form_data)
        record = session.export_quote()
        assert record["currency"] == "USD"
        assert record["timestamp"] == "2026-10-18T09:30:00.000Z"
        assert record["total_cost"] == "38.49"
        assert record["insurance_cost"] == "5.00"
        assert record["base_cost"] == "5.99"
        assert record["weight_cost"] == "25.00"
        assert record["handling_cost"] == "2.50"
        assert record["delivery_date"] == "2026-10-24"
        assert record["estimated_delivery_date"] == "Saturday, October 24, 2026"
        assert record["tracking_number"] == session.last_quote.tracking_number
        assert record["service_tier"] == "standard"
        assert record["weight_kg"] == 10.0

    def test_export_values_are_flat(self, session, form_data):
        session.submit(form_data)
        record = session.export_quote()
        for value in record.values():
            assert isinstance(value, (str, int, float, bool))


class TestExportTimestamp:
    """Export timestamps are UTC with a Z suffix."""

    def test_utc(self):
        moment = datetime(2026, 10, 18, 9, 30, 15, 123456, tzinfo=timezone.utc)
        assert utc_timestamp(moment) == "2026-10-18T09:30:15.123Z"

    def test_offset_converted_to_utc(self):
        moment = datetime(2026, 10, 18, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert utc_timestamp(moment) == "2026-10-19T04:30:00.000Z"
