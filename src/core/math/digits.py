"""
Digits — разложение целого на цифры в произвольном основании

Модуль преобразует неотрицательное целое в последовательность цифр
(младшая цифра первая) и обратно:
- decompose: повторное деление на base, остаток — очередная цифра
- digit_at: цифра на заданной позиции без построения всей последовательности
- digit_count: количество цифр (0 для нуля)
- compose: обратное преобразование Σ digit[i] * base^i

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. decompose(0, base) == [] (каноничное представление нуля)
2. Старшая цифра результата decompose всегда ненулевая
3. compose(decompose(x, base), base) == x для всех x >= 0, base >= 2
4. Для base == 2 digit_at использует сдвиг и маску

ФОРМУЛЫ:
    digit_at(x, i, base) = (x // base^i) mod base
    digit_at(x, i, 2)    = (x >> i) & 1
"""

from collections.abc import Sequence

from src.core.math.numeric_backend import DEFAULT_BACKEND, NumericBackend
from src.core.math.numerical_safeguards import (
    validate_base,
    validate_digits,
    validate_non_negative,
)


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ПРИМИТИВЫ
# =============================================================================


def int_power(x: int, exponent: int, backend: NumericBackend | None = None) -> int:
    """
    Возведение в неотрицательную целую степень через бэкенд.

    Args:
        x: Основание степени (>= 0)
        exponent: Показатель (>= 0)
        backend: Численный бэкенд (default: произвольная точность)

    Returns:
        x ** exponent

    Raises:
        PreconditionViolation: Если x или exponent отрицательные
        NumericOverflowError: Если результат не помещается в FixedWidthBackend

    Examples:
        >>> int_power(10, 3)
        1000
        >>> int_power(7, 0)
        1
    """
    backend = backend or DEFAULT_BACKEND
    validate_non_negative(x, "x")
    validate_non_negative(exponent, "exponent")
    return backend.pow(x, exponent)


def digit_at(
    value: int,
    position: int,
    base: int,
    backend: NumericBackend | None = None,
) -> int:
    """
    Цифра value на позиции position (нумерация с младшей, с нуля).

    Для base == 2 вычисляется как (value >> position) & 1,
    иначе как (value // base^position) mod base.

    Args:
        value: Неотрицательное целое
        position: Позиция цифры (>= 0)
        base: Основание (>= 2)
        backend: Численный бэкенд (default: произвольная точность)

    Returns:
        Цифра в диапазоне [0, base). Позиции за пределами числа дают 0.

    Raises:
        PreconditionViolation: При нарушении предусловий

    Examples:
        >>> digit_at(56088, 0, 10)
        8
        >>> digit_at(56088, 4, 10)
        5
        >>> digit_at(5, 1, 2)
        0
    """
    backend = backend or DEFAULT_BACKEND
    validate_non_negative(value, "value")
    validate_non_negative(position, "position")
    validate_base(base)

    if base == 2:
        return backend.bit_and(backend.shift_right(value, position), 1)

    # Позиция старше самой старшей цифры: base^position может переполнить
    # FixedWidthBackend, хотя ответ заведомо 0
    if position >= digit_count(value, base, backend):
        return 0

    return backend.mod(backend.floordiv(value, backend.pow(base, position)), base)


def digit_count(value: int, base: int, backend: NumericBackend | None = None) -> int:
    """
    Количество цифр value в основании base.

    Args:
        value: Неотрицательное целое
        base: Основание (>= 2)
        backend: Численный бэкенд (default: произвольная точность)

    Returns:
        Количество цифр (0 для value == 0)

    Examples:
        >>> digit_count(0, 10)
        0
        >>> digit_count(999, 10)
        3
        >>> digit_count(4080, 16)
        3
    """
    backend = backend or DEFAULT_BACKEND
    validate_non_negative(value, "value")
    validate_base(base)

    count = 0
    while value:
        value = backend.floordiv(value, base)
        count += 1
    return count


# =============================================================================
# РАЗЛОЖЕНИЕ И СБОРКА
# =============================================================================


def decompose(value: int, base: int, backend: NumericBackend | None = None) -> list[int]:
    """
    Разложение неотрицательного целого на цифры (младшая первая).

    Алгоритм: повторное деление на base, остаток — очередная цифра,
    до нулевого частного.

    Args:
        value: Неотрицательное целое
        base: Основание (>= 2)
        backend: Численный бэкенд (default: произвольная точность)

    Returns:
        Новый список цифр; пустой для value == 0

    Raises:
        PreconditionViolation: Если value < 0 или base < 2

    Examples:
        >>> decompose(123, 10)
        [3, 2, 1]
        >>> decompose(5, 2)
        [1, 0, 1]
        >>> decompose(0, 10)
        []
    """
    backend = backend or DEFAULT_BACKEND
    validate_non_negative(value, "value")
    validate_base(base)

    digits: list[int] = []
    while value:
        value, digit = backend.div_mod(value, base)
        digits.append(digit)
    return digits


def compose(
    digits: Sequence[int],
    base: int,
    backend: NumericBackend | None = None,
) -> int:
    """
    Сборка целого из цифр (младшая первая): Σ digit[i] * base^i.

    Вычисляется по схеме Горнера от старшей цифры к младшей.

    Args:
        digits: Последовательность цифр в [0, base)
        base: Основание (>= 2)
        backend: Численный бэкенд (default: произвольная точность)

    Returns:
        Неотрицательное целое (0 для пустой последовательности)

    Raises:
        PreconditionViolation: Если цифры вне диапазона или base < 2

    Examples:
        >>> compose([8, 8, 0, 6, 5], 10)
        56088
        >>> compose([], 7)
        0
    """
    backend = backend or DEFAULT_BACKEND
    validate_digits(digits, base)

    value = 0
    for digit in reversed(digits):
        value = backend.add(backend.mul(value, base), digit)
    return value
