"""
Delivery Date Estimation

Reference date + tier transit days, on the caller's calendar. No timezone
conversion and no business-day calendar: transit days are calendar days.
"""

from datetime import date, datetime, timedelta

from .services import get_service


# Fixed English names so output does not depend on the process locale
WEEKDAYS = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def delivery_date(service_tier: str, reference: date | datetime) -> date:
    """
    Estimated delivery date for a service tier.

    Args:
        service_tier: Tier name
        reference: Quote date; datetimes are reduced to their calendar date

    Raises:
        InvalidInput: If service_tier is unknown
    """
    service = get_service(service_tier)
    if isinstance(reference, datetime):
        reference = reference.date()
    return reference + timedelta(days=service.transit_days)


def format_long_date(day: date) -> str:
    """en-US long date, e.g. 'Saturday, October 24, 2026'."""
    return f"{WEEKDAYS[day.weekday()]}, {MONTHS[day.month - 1]} {day.day}, {day.year}"


def estimate_delivery_date(service_tier: str, reference: date | datetime) -> str:
    """Estimated delivery date as a display string."""
    return format_long_date(delivery_date(service_tier, reference))


__all__ = [
    "delivery_date",
    "estimate_delivery_date",
    "format_long_date",
]
