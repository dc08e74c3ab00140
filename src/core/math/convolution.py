"""
Convolution — умножение цифровых последовательностей (schoolbook, deferred carry)

Модуль перемножает два неотрицательных целых, заданных цифрами
в общем основании base (младшая цифра первая):
- Для каждой позиции d считается полная свёртка Σ a[i] * b[d-i]
- Перенос разрешается один раз на позицию, от младшей к старшей
- Старшие нули отбрасываются (каноничная форма)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. compose(multiply(a, b, base), base) == compose(a, base) * compose(b, base)
2. Результат каноничен: нет старших нулей, ноль — пустой список
3. Входы не модифицируются, результат — новый список
4. Сложность O((len(a) + len(b))^2), без рекурсии

ФОРМУЛЫ:
    tmp_d     = Σ_{i} a[i] * b[d - i] + carry_{d-1}
                (0 <= i <= d, i < len(a), d - i < len(b))
    result[d] = tmp_d mod base
    carry_d   = tmp_d // base
    d = 0 .. len(a) + len(b)
"""

from collections.abc import Sequence

from src.core.math.digits import decompose
from src.core.math.numeric_backend import DEFAULT_BACKEND, NumericBackend
from src.core.math.numerical_safeguards import validate_digits, validate_non_negative


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def max_num_of_digits_after_multiplication(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Верхняя граница количества цифр произведения: len(a) + len(b).

    Examples:
        >>> max_num_of_digits_after_multiplication([3, 2, 1], [6, 5, 4])
        6
    """
    return len(a) + len(b)


def trim_trailing_zeros(digits: list[int]) -> list[int]:
    """
    Удаление старших (хвостовых) нулевых цифр на месте.

    Обратный проход со знаковым индексом: index == -1 означает
    "элементов не осталось", поэтому цикл всегда завершается,
    в том числе для пустого и полностью нулевого списка.

    Args:
        digits: Список цифр (младшая первая), модифицируется

    Returns:
        Тот же список в каноничной форме

    Examples:
        >>> trim_trailing_zeros([8, 8, 0, 6, 5, 0, 0])
        [8, 8, 0, 6, 5]
        >>> trim_trailing_zeros([0, 0, 0])
        []
        >>> trim_trailing_zeros([])
        []
    """
    index = len(digits) - 1
    while index >= 0 and digits[index] == 0:
        index -= 1
    del digits[index + 1:]
    return digits


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply(
    a: Sequence[int],
    b: Sequence[int],
    base: int,
    backend: NumericBackend | None = None,
) -> list[int]:
    """
    Произведение двух цифровых последовательностей в основании base.

    Для каждой позиции d = 0 .. len(a) + len(b) вычисляется сырая сумма
    свёртки по всем парам цифр, дающим вклад в эту позицию, затем
    добавляется перенос; цифра = tmp mod base, новый перенос = tmp // base.
    После этого старшие нули отбрасываются.

    Пустая последовательность представляет ноль: все суммы свёртки пусты,
    результат после очистки — пустой список.

    Args:
        a: Цифры первого множителя (младшая первая)
        b: Цифры второго множителя (младшая первая)
        base: Общее основание (>= 2)
        backend: Численный бэкенд (default: произвольная точность)

    Returns:
        Новый список цифр произведения в каноничной форме

    Raises:
        PreconditionViolation: Если base < 2 или цифра вне [0, base)
        NumericOverflowError: Если промежуточная сумма не помещается
            в FixedWidthBackend

    Examples:
        >>> multiply([3, 2, 1], [6, 5, 4], 10)  # 123 * 456 = 56088
        [8, 8, 0, 6, 5]
        >>> multiply([1, 0, 1], [1, 1], 2)  # 5 * 3 = 15
        [1, 1, 1, 1]
        >>> multiply([], [9, 9, 9], 10)
        []
    """
    backend = backend or DEFAULT_BACKEND
    validate_digits(a, base, "a")
    validate_digits(b, base, "b")

    len_a = len(a)
    len_b = len(b)
    result: list[int] = []
    carry = 0

    for d in range(max_num_of_digits_after_multiplication(a, b) + 1):
        tmp = 0
        # Только i, для которых обе цифры существуют: max(0, d-len_b+1) <= i <= min(d, len_a-1)
        for i in range(max(0, d - len_b + 1), min(d, len_a - 1) + 1):
            tmp = backend.add(tmp, backend.mul(a[i], b[d - i]))

        tmp = backend.add(tmp, carry)
        carry, digit = backend.div_mod(tmp, base)
        result.append(digit)

    return trim_trailing_zeros(result)


def multiply_integers(
    a: int,
    b: int,
    base: int,
    backend: NumericBackend | None = None,
) -> list[int]:
    """
    Произведение двух неотрицательных целых в виде цифр основания base.

    Разлагает оба множителя через decompose и перемножает свёрткой.

    Args:
        a: Первый множитель (>= 0)
        b: Второй множитель (>= 0)
        base: Основание (>= 2)
        backend: Численный бэкенд (default: произвольная точность)

    Returns:
        Цифры a * b (младшая первая), каноничная форма

    Examples:
        >>> multiply_integers(255, 16, 16)  # 4080 = 0xFF0
        [0, 15, 15]
    """
    validate_non_negative(a, "a")
    validate_non_negative(b, "b")
    return multiply(decompose(a, base, backend), decompose(b, base, backend), base, backend)
