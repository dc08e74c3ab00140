"""
Core math modules для цифрового умножителя

Целочисленные примитивы, разложение на цифры и свёрточное умножение.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    MIN_BASE,
    PreconditionViolation,
    is_canonical,
    is_integer,
    validate_base,
    validate_digits,
    validate_non_negative,
)

# Numeric Backend
from src.core.math.numeric_backend import (
    BACKEND_ARBITRARY,
    BACKEND_FIXED,
    DEFAULT_BACKEND,
    DEFAULT_WIDTH_BITS,
    ArbitraryPrecisionBackend,
    FixedWidthBackend,
    NumberParseError,
    NumericBackend,
    NumericOverflowError,
    get_backend,
    unlimited_int_digits,
)

# Digits
from src.core.math.digits import (
    compose,
    decompose,
    digit_at,
    digit_count,
    int_power,
)

# Convolution
from src.core.math.convolution import (
    max_num_of_digits_after_multiplication,
    multiply,
    multiply_integers,
    trim_trailing_zeros,
)

__all__ = [
    # Numerical Safeguards — Constants
    "MIN_BASE",
    # Numerical Safeguards — Exceptions
    "PreconditionViolation",
    # Numerical Safeguards — Validation
    "is_canonical",
    "is_integer",
    "validate_base",
    "validate_digits",
    "validate_non_negative",
    # Numeric Backend — Constants
    "BACKEND_ARBITRARY",
    "BACKEND_FIXED",
    "DEFAULT_BACKEND",
    "DEFAULT_WIDTH_BITS",
    # Numeric Backend — Exceptions
    "NumberParseError",
    "NumericOverflowError",
    # Numeric Backend — Types
    "ArbitraryPrecisionBackend",
    "FixedWidthBackend",
    "NumericBackend",
    "get_backend",
    "unlimited_int_digits",
    # Digits
    "compose",
    "decompose",
    "digit_at",
    "digit_count",
    "int_power",
    # Convolution
    "max_num_of_digits_after_multiplication",
    "multiply",
    "multiply_integers",
    "trim_trailing_zeros",
]
