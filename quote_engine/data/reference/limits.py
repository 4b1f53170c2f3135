"""
Shipment Limits

Weight range accepted for quoting. Heavier shipments need a manual quote.
"""

MIN_WEIGHT_KG = 0.0
MAX_WEIGHT_KG = 1000.0        # Inclusive

# Form dimensions are whole centimetres, e.g. "30x20x15"
DIMENSIONS_PATTERN = r"^\d+x\d+x\d+$"
