"""
Domain models and value objects.

Contains the digit sequence value object and the product report.
"""

from src.core.domain.digit_sequence import DigitSequence
from src.core.domain.product import ProductDigit, ProductReport

__all__ = [
    # Digit sequence model
    "DigitSequence",
    # Product models
    "ProductDigit",
    "ProductReport",
]
