"""
Shipping Quote Calculator
=========================

Interactive CLI tool to quote a single shipment.

Usage:
    python -m quote_engine.scripts.calculator
"""

import logging
from datetime import date, datetime

from quote_engine.categories import ALL as CATEGORIES
from quote_engine.data import CURRENCY
from quote_engine.errors import InvalidInput
from quote_engine.services import ALL as SERVICES
from quote_engine.session import QuoteSession
from quote_engine.version import VERSION


def choose(prompt: str, options: list) -> str:
    """Numbered menu over tier/category classes; returns the chosen name."""
    print(f"\n{prompt}:")
    for i, option in enumerate(options, start=1):
        print(f"  {i}. {option.label}")
    choice = input(f"Select (1-{len(options)}): ").strip()
    if not choice.isdigit() or not 1 <= int(choice) <= len(options):
        raise InvalidInput(f"Invalid selection: {choice!r}")
    return options[int(choice) - 1].name


def get_user_input() -> tuple[dict, date]:
    """Prompt user for shipment details, as form fields plus quote date."""
    print("\n=== Shipping Quote Calculator ===")
    print(f"Version: {VERSION}\n")

    weight = input("Weight (kg, max 1000): ").strip()
    dimensions = input("Dimensions in cm, LxWxH (optional): ").strip()

    shipping_type = choose("Service", SERVICES)
    package_type = choose("Package type", CATEGORIES)

    insurance = input("\nAdd insurance? (y/N): ").strip().lower() in ("y", "yes")

    date_input = input(f"\nQuote date (YYYY-MM-DD) [default: {date.today()}]: ").strip()
    if date_input:
        quote_date = date.fromisoformat(date_input)
    else:
        quote_date = date.today()

    form = {
        "weight": weight,
        "dimensions": dimensions,
        "shippingType": shipping_type,
        "packageType": package_type,
    }
    if insurance:
        form["insurance"] = "on"

    return form, quote_date


def print_results(quote) -> None:
    """Print quote results."""
    print("\n" + "=" * 50)
    print("QUOTE")
    print("=" * 50)

    print(f"\nShipment: {quote.weight_kg:g} kg, {quote.service_tier}, {quote.package_category}")
    print(f"Estimated delivery: {quote.estimated_delivery_date}")
    print(f"Tracking number:    {quote.tracking_number}")

    print("\n--- Cost Breakdown ---")
    print(f"Base rate:          ${quote.base_cost:>8}")
    print(f"Weight:             ${quote.weight_cost:>8}")
    print(f"Handling:           ${quote.handling_cost:>8}")
    print(f"                    {'-' * 9}")
    print(f"Subtotal:           ${quote.subtotal:>8}")
    if quote.insurance_requested:
        print(f"Insurance:          ${quote.insurance_cost:>8}")
    print(f"                    {'=' * 9}")
    print(f"TOTAL ({CURRENCY}):        ${quote.total_cost:>8}")
    print()


def main():
    """Main entry point."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        form, quote_date = get_user_input()

        # Quote as of the chosen date, at the current time of day
        now = datetime.now()
        session = QuoteSession(clock=lambda: datetime.combine(quote_date, now.time()))
        quote = session.submit(form)

        print_results(quote)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
    except InvalidInput as e:
        print(f"\nError: {e}")
        raise SystemExit(1)
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
