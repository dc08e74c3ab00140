"""
Numeric Backend — абстрактный целочисленный бэкенд

Единый интерфейс примитивов над неотрицательными целыми:
parse, add, mul, floordiv, mod, pow, shift_right, bit_and.

Две взаимозаменяемые реализации, выбираемые конфигурацией:
- ArbitraryPrecisionBackend ("arbitrary"): Python int без ограничений
- FixedWidthBackend ("fixed"): беззнаковое машинное слово фиксированной ширины

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значения всегда представлены как Python int (оба бэкенда)
2. FixedWidthBackend никогда не "заворачивает" значение по модулю 2**width:
   выход за пределы слова → NumericOverflowError
3. parse принимает только десятичную запись неотрицательного целого
   любой длины (лимит sys.int_max_str_digits снимается на время разбора)
"""

import re
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Ширина машинного слова по умолчанию (unsigned long long)
DEFAULT_WIDTH_BITS: Final[int] = 64

BACKEND_ARBITRARY: Final[str] = "arbitrary"
BACKEND_FIXED: Final[str] = "fixed"

# Десятичная запись неотрицательного целого (только ASCII-цифры)
_DECIMAL_RE = re.compile(r"[0-9]+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumberParseError(ValueError):
    """Строка не является десятичной записью неотрицательного целого."""
    pass


class NumericOverflowError(ArithmeticError):
    """
    Результат операции не помещается в машинное слово FixedWidthBackend.

    Возникает вместо молчаливого переполнения (wraparound).
    """
    pass


# =============================================================================
# ЛИМИТ ДЕСЯТИЧНОЙ ЗАПИСИ
# =============================================================================


@contextmanager
def unlimited_int_digits() -> Iterator[None]:
    """
    Снятие лимита sys.int_max_str_digits на время блока.

    Преобразования int <-> str для чисел длиннее 4300 цифр иначе
    завершаются ValueError. Прежнее значение лимита восстанавливается.
    """
    if not hasattr(sys, "set_int_max_str_digits"):
        yield
        return
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


# =============================================================================
# ИНТЕРФЕЙС
# =============================================================================


class NumericBackend(ABC):
    """
    Абстрактный бэкенд целочисленной арифметики.

    Реализации обязаны работать с неотрицательными Python int и
    возвращать Python int.
    """

    name: str = ""

    def parse(self, text: str) -> int:
        """
        Разбор десятичной строки в неотрицательное целое.

        Окружающие пробелы допускаются, знак и разделители — нет.

        Args:
            text: Десятичная запись (например, '56088')

        Returns:
            Неотрицательное целое

        Raises:
            NumberParseError: Если строка не является десятичным целым
        """
        stripped = text.strip()
        if not _DECIMAL_RE.fullmatch(stripped):
            raise NumberParseError(
                f"expected a non-negative base-10 integer, got {text!r}"
            )
        with unlimited_int_digits():
            value = int(stripped, 10)
        return self._check(value)

    def add(self, x: int, y: int) -> int:
        return self._check(x + y)

    def mul(self, x: int, y: int) -> int:
        return self._check(x * y)

    def floordiv(self, x: int, y: int) -> int:
        return self._check(x // y)

    def mod(self, x: int, y: int) -> int:
        return self._check(x % y)

    def div_mod(self, x: int, y: int) -> tuple[int, int]:
        """Частное и остаток за одну операцию."""
        quotient, remainder = divmod(x, y)
        return self._check(quotient), self._check(remainder)

    @abstractmethod
    def pow(self, x: int, exponent: int) -> int:
        """Возведение в неотрицательную целую степень."""

    def shift_right(self, x: int, n: int) -> int:
        return self._check(x >> n)

    def bit_and(self, x: int, mask: int) -> int:
        return self._check(x & mask)

    @abstractmethod
    def _check(self, value: int) -> int:
        """Проверка, что значение представимо в бэкенде."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# =============================================================================
# РЕАЛИЗАЦИИ
# =============================================================================


class ArbitraryPrecisionBackend(NumericBackend):
    """Бэкенд произвольной точности на Python int."""

    name = BACKEND_ARBITRARY

    def pow(self, x: int, exponent: int) -> int:
        return x**exponent

    def _check(self, value: int) -> int:
        return value


class FixedWidthBackend(NumericBackend):
    """
    Бэкенд беззнакового машинного слова фиксированной ширины.

    Любое значение >= 2**width_bits приводит к NumericOverflowError.

    Examples:
        >>> FixedWidthBackend(8).mul(15, 17)
        255
        >>> FixedWidthBackend(8).mul(16, 16)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        NumericOverflowError: ...
    """

    name = BACKEND_FIXED

    def __init__(self, width_bits: int = DEFAULT_WIDTH_BITS):
        """
        Args:
            width_bits: Ширина слова в битах (>= 2)

        Raises:
            ValueError: Если width_bits < 2
        """
        if isinstance(width_bits, bool) or not isinstance(width_bits, int) or width_bits < 2:
            raise ValueError(f"width_bits must be an integer >= 2, got {width_bits!r}")
        self.width_bits = width_bits
        self.max_value = (1 << width_bits) - 1

    def pow(self, x: int, exponent: int) -> int:
        # Square-and-multiply: промежуточные значения тоже проверяются
        result = 1
        square = x
        while exponent > 0:
            if exponent & 1:
                result = self.mul(result, square)
            exponent >>= 1
            if exponent > 0:
                square = self.mul(square, square)
        return result

    def _check(self, value: int) -> int:
        if value > self.max_value:
            raise NumericOverflowError(
                f"value of {value.bit_length()} bits does not fit into "
                f"{self.width_bits}-bit unsigned word (max 2**{self.width_bits} - 1)"
            )
        return value

    def __repr__(self) -> str:
        return f"FixedWidthBackend(width_bits={self.width_bits})"


# =============================================================================
# ВЫБОР БЭКЕНДА
# =============================================================================


DEFAULT_BACKEND: Final[NumericBackend] = ArbitraryPrecisionBackend()


def get_backend(name: str, width_bits: int = DEFAULT_WIDTH_BITS) -> NumericBackend:
    """
    Выбор бэкенда по имени.

    Args:
        name: 'arbitrary' или 'fixed'
        width_bits: Ширина слова (используется только для 'fixed')

    Returns:
        Экземпляр NumericBackend

    Raises:
        ValueError: Если имя бэкенда неизвестно
    """
    if name == BACKEND_ARBITRARY:
        return DEFAULT_BACKEND
    if name == BACKEND_FIXED:
        return FixedWidthBackend(width_bits)
    raise ValueError(
        f"unknown numeric backend {name!r}, expected one of "
        f"{BACKEND_ARBITRARY!r}, {BACKEND_FIXED!r}"
    )
