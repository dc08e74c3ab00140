"""
Numerical Safeguards — проверки предусловий для цифровой арифметики

Модуль обеспечивает fail-fast проверку входов всех целочисленных операций:
- Основание системы счисления (base >= 2)
- Неотрицательность значений и позиций
- Корректность цифровых последовательностей (каждая цифра в [0, base))

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нарушение предусловия никогда не превращается в "мусорный" результат
   (всегда PreconditionViolation)
2. bool не считается целым числом (True/False отклоняются)
3. Все проверки чистые и не модифицируют входы
"""

from collections.abc import Sequence
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Минимально допустимое основание системы счисления
MIN_BASE: Final[int] = 2


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PreconditionViolation(ValueError):
    """
    Нарушение предусловия целочисленной операции.

    Возникает при base < 2, отрицательном значении или позиции,
    а также при цифре вне диапазона [0, base).
    """
    pass


# =============================================================================
# ВАЛИДАЦИЯ СКАЛЯРОВ
# =============================================================================


def is_integer(value: object) -> bool:
    """
    Проверка, является ли значение целым числом (bool исключается).

    Examples:
        >>> is_integer(5)
        True
        >>> is_integer(True)
        False
        >>> is_integer(5.0)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool)


def validate_base(base: int) -> None:
    """
    Валидация основания системы счисления.

    Args:
        base: Основание (должно быть целым >= 2)

    Raises:
        PreconditionViolation: Если base не целое или base < 2
    """
    if not is_integer(base):
        raise PreconditionViolation(f"base must be an integer, got {base!r}")

    if base < MIN_BASE:
        raise PreconditionViolation(f"base must be >= {MIN_BASE}, got {base}")


def validate_non_negative(value: int, name: str) -> None:
    """
    Валидация, что значение — неотрицательное целое.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        PreconditionViolation: Если value не целое или value < 0
    """
    if not is_integer(value):
        raise PreconditionViolation(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise PreconditionViolation(f"{name} must be non-negative, got {value}")


# =============================================================================
# ВАЛИДАЦИЯ ЦИФРОВЫХ ПОСЛЕДОВАТЕЛЬНОСТЕЙ
# =============================================================================


def validate_digits(digits: Sequence[int], base: int, name: str = "digits") -> None:
    """
    Валидация цифровой последовательности (младшая цифра первая).

    Проверяет только диапазон цифр. Каноничность (отсутствие старших нулей)
    не требуется: умножение принимает и неканоничные входы.

    Args:
        digits: Последовательность цифр
        base: Основание системы счисления
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        PreconditionViolation: Если base невалидно или какая-либо цифра
            не является целым числом в [0, base)
    """
    validate_base(base)

    for index, digit in enumerate(digits):
        if not is_integer(digit):
            raise PreconditionViolation(
                f"{name}[{index}] must be an integer, got {digit!r}"
            )
        if digit < 0 or digit >= base:
            raise PreconditionViolation(
                f"{name}[{index}] = {digit} is out of range [0, {base})"
            )


def is_canonical(digits: Sequence[int]) -> bool:
    """
    Проверка каноничной формы: нет старших нулей, ноль — пустая последовательность.

    Examples:
        >>> is_canonical([8, 8, 0, 6, 5])
        True
        >>> is_canonical([1, 0])
        False
        >>> is_canonical([])
        True
    """
    return len(digits) == 0 or digits[-1] != 0
