"""
Billing Configuration

Quotes are single-currency. Amounts are rounded once, at output.
"""

CURRENCY = "USD"
CURRENCY_PLACES = 2
ROUNDING = "ROUND_HALF_UP"    # Matches two-decimal display formatting
