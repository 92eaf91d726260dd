"""
Core math modules

Арифметические примитивы routing transit number.
"""

# ABA check digit
from src.core.math.check_digit import (
    ABA_INSTITUTION_LENGTH,
    ABA_WEIGHTS,
    FED_ROUTING_SYMBOL_LENGTH,
    MICR_LENGTH,
    calculate_check_digit,
    is_ascii_digits,
    is_valid_micr_checksum,
    weighted_sum,
)

__all__ = [
    # Constants
    "ABA_WEIGHTS",
    "FED_ROUTING_SYMBOL_LENGTH",
    "ABA_INSTITUTION_LENGTH",
    "MICR_LENGTH",
    # Check digit
    "calculate_check_digit",
    "is_valid_micr_checksum",
    "is_ascii_digits",
    "weighted_sum",
]
