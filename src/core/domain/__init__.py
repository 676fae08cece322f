"""
Domain models and value objects.

Contains the ledger value types consumed by the wallet: Address, Color, amounts.
"""

from src.core.domain.address import ADDRESS_LENGTH, Address
from src.core.domain.amounts import (
    MAX_AMOUNT,
    MIN_AMOUNT,
    fits_amount_range,
    is_valid_amount,
)
from src.core.domain.color import COLOR_IOTA, COLOR_LENGTH, COLOR_NEW, Color

__all__ = [
    # Address
    "ADDRESS_LENGTH",
    "Address",
    # Color
    "COLOR_LENGTH",
    "COLOR_IOTA",
    "COLOR_NEW",
    "Color",
    # Amounts
    "MIN_AMOUNT",
    "MAX_AMOUNT",
    "is_valid_amount",
    "fits_amount_range",
]
