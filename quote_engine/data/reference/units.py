"""
Unit Conversion Reference

Weight factors are kilograms per unit. DIM_DIVISOR is cubic centimetres per
kilogram of dimensional weight.
"""

WEIGHT_UNITS = {
    "kg": 1,
    "lb": 0.453592,
    "g": 0.001,
    "oz": 0.0283495,
}

DIM_DIVISOR = 5000

POSTAL_CODE_PATTERNS = {
    "US": r"^\d{5}(-\d{4})?$",
    "CA": r"^[A-Za-z]\d[A-Za-z] \d[A-Za-z]\d$",
    "UK": r"^[A-Z]{1,2}\d[A-Z\d]? \d[A-Z]{2}$",
}
