"""
Тесты для модуля Digits

Проверяет:
1. Разложение на цифры (decompose), включая ноль
2. Обратную сборку (compose) и round-trip
3. digit_at: общий случай и быстрый путь base == 2
4. digit_count и int_power
5. Нарушения предусловий
"""

import random

import pytest

from src.core.math.digits import compose, decompose, digit_at, digit_count, int_power
from src.core.math.numeric_backend import FixedWidthBackend
from src.core.math.numerical_safeguards import PreconditionViolation


# =============================================================================
# DECOMPOSE
# =============================================================================


class TestDecompose:
    """Тесты для decompose"""

    def test_base_10(self) -> None:
        """123 → [3, 2, 1] (младшая первая)"""
        assert decompose(123, 10) == [3, 2, 1]
        assert decompose(456, 10) == [6, 5, 4]

    def test_base_2(self) -> None:
        assert decompose(5, 2) == [1, 0, 1]
        assert decompose(3, 2) == [1, 1]

    def test_base_16(self) -> None:
        """255 = 0xFF, 16 = 0x10, 4080 = 0xFF0"""
        assert decompose(255, 16) == [15, 15]
        assert decompose(16, 16) == [0, 1]
        assert decompose(4080, 16) == [0, 15, 15]

    def test_zero_is_empty(self) -> None:
        """Ноль — пустая последовательность для любого основания"""
        assert decompose(0, 10) == []
        assert decompose(0, 2) == []
        assert decompose(0, 10**20) == []

    def test_value_smaller_than_base(self) -> None:
        assert decompose(7, 10) == [7]
        assert decompose(999, 1000) == [999]

    def test_huge_base(self) -> None:
        """Основание больше машинного слова"""
        base = 2**64 + 13
        assert decompose(base * 5 + 3, base) == [3, 5]

    def test_result_is_canonical(self) -> None:
        """Старшая цифра всегда ненулевая"""
        for value in (1, 10, 100, 1000, 4096):
            digits = decompose(value, 10)
            assert digits[-1] != 0

    def test_fixed_backend(self) -> None:
        backend = FixedWidthBackend(64)
        assert decompose(2**64 - 1, 2**32, backend) == [2**32 - 1, 2**32 - 1]

    def test_negative_value_raises(self) -> None:
        with pytest.raises(PreconditionViolation, match="value must be non-negative"):
            decompose(-1, 10)

    @pytest.mark.parametrize("base", [1, 0, -10])
    def test_invalid_base_raises(self, base: int) -> None:
        with pytest.raises(PreconditionViolation, match="base must be >= 2"):
            decompose(10, base)


# =============================================================================
# COMPOSE / ROUND-TRIP
# =============================================================================


class TestCompose:
    """Тесты для compose"""

    def test_known_values(self) -> None:
        assert compose([8, 8, 0, 6, 5], 10) == 56088
        assert compose([1, 1, 1, 1], 2) == 15
        assert compose([0, 15, 15], 16) == 4080

    def test_empty_is_zero(self) -> None:
        assert compose([], 7) == 0

    def test_non_canonical_input(self) -> None:
        """Старшие нули не влияют на значение"""
        assert compose([3, 2, 1, 0, 0], 10) == 123

    def test_digit_out_of_range_raises(self) -> None:
        with pytest.raises(PreconditionViolation, match="out of range"):
            compose([2], 2)

    def test_round_trip_random(self) -> None:
        """compose(decompose(x, base), base) == x"""
        rng = random.Random(20150101)
        for _ in range(200):
            base = rng.choice([2, 3, 7, 10, 16, 256, 1000, 2**32 + 15])
            value = rng.randrange(0, 10**40)
            assert compose(decompose(value, base), base) == value

    @pytest.mark.parametrize("base", [2, 10, 16, 36])
    def test_round_trip_small_values(self, base: int) -> None:
        for value in range(0, 300):
            assert compose(decompose(value, base), base) == value


# =============================================================================
# DIGIT_AT
# =============================================================================


class TestDigitAt:
    """Тесты для digit_at"""

    def test_base_10_positions(self) -> None:
        assert [digit_at(56088, i, 10) for i in range(5)] == [8, 8, 0, 6, 5]

    def test_position_beyond_number_is_zero(self) -> None:
        assert digit_at(56088, 5, 10) == 0
        assert digit_at(56088, 100, 10) == 0
        assert digit_at(0, 0, 10) == 0

    def test_base_2_matches_bits(self) -> None:
        """Быстрый путь base == 2 совпадает с битом x"""
        rng = random.Random(7)
        for _ in range(100):
            x = rng.randrange(0, 2**80)
            for i in range(0, 85):
                assert digit_at(x, i, 2) == (x >> i) & 1

    def test_base_2_matches_general_formula(self) -> None:
        """Быстрый путь эквивалентен (x // 2^i) mod 2"""
        for x in range(0, 64):
            for i in range(0, 8):
                assert digit_at(x, i, 2) == (x // 2**i) % 2

    def test_matches_decompose(self) -> None:
        rng = random.Random(11)
        for _ in range(50):
            base = rng.choice([3, 10, 16, 1000])
            value = rng.randrange(0, 10**30)
            digits = decompose(value, base)
            assert [digit_at(value, i, base) for i in range(len(digits))] == digits

    def test_fixed_backend_near_word_limit(self) -> None:
        """Позиции за пределами числа не вычисляют base^position"""
        backend = FixedWidthBackend(64)
        value = 2**64 - 1  # 18446744073709551615, 20 цифр
        assert digit_at(value, 19, 10, backend) == 1
        assert digit_at(value, 0, 10, backend) == 5
        assert digit_at(value, 20, 10, backend) == 0
        assert digit_at(value, 63, 2, backend) == 1
        assert digit_at(value, 64, 2, backend) == 0

    def test_negative_position_raises(self) -> None:
        with pytest.raises(PreconditionViolation, match="position must be non-negative"):
            digit_at(10, -1, 10)

    def test_invalid_base_raises(self) -> None:
        with pytest.raises(PreconditionViolation, match="base must be >= 2"):
            digit_at(10, 0, 1)


# =============================================================================
# DIGIT_COUNT / INT_POWER
# =============================================================================


class TestDigitCount:
    """Тесты для digit_count"""

    def test_zero_has_no_digits(self) -> None:
        assert digit_count(0, 10) == 0
        assert digit_count(0, 2) == 0

    def test_known_counts(self) -> None:
        assert digit_count(999, 10) == 3
        assert digit_count(1000, 10) == 4
        assert digit_count(4080, 16) == 3
        assert digit_count(15, 2) == 4

    def test_matches_decompose_length(self) -> None:
        rng = random.Random(3)
        for _ in range(100):
            base = rng.randrange(2, 5000)
            value = rng.randrange(0, 10**25)
            assert digit_count(value, base) == len(decompose(value, base))

    def test_negative_value_raises(self) -> None:
        with pytest.raises(PreconditionViolation):
            digit_count(-5, 10)


class TestIntPower:
    """Тесты для int_power"""

    def test_known_powers(self) -> None:
        assert int_power(10, 3) == 1000
        assert int_power(2, 100) == 2**100
        assert int_power(7, 0) == 1
        assert int_power(0, 0) == 1

    def test_negative_exponent_raises(self) -> None:
        with pytest.raises(PreconditionViolation, match="exponent must be non-negative"):
            int_power(2, -1)
