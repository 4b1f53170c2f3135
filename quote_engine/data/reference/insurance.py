"""
Shipment Insurance

Optional cover, priced on the subtotal after the package risk multiplier.
"""

RATE = 0.03                   # 3% of subtotal
MINIMUM = 5.00                # Floor per insured shipment
