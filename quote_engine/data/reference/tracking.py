"""
Tracking Number Format

PREFIX + last TIMESTAMP_DIGITS of epoch milliseconds + SUFFIX_LENGTH base-36
characters, e.g. LC12345678A1B2.
"""

import string

PREFIX = "LC"                 # Logistics Company
TIMESTAMP_DIGITS = 8
SUFFIX_LENGTH = 4
ALPHABET = string.digits + string.ascii_uppercase

PATTERN = r"^[A-Z]{2}\d{8}[A-Z0-9]{4}$"
