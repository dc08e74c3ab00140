"""
DigitSequence — Модель цифровой последовательности

Immutable Pydantic модель неотрицательного целого, записанного цифрами
в основании base (младшая цифра первая).

Инварианты модели:
- base >= 2
- каждая цифра — int (не bool и не float) в [0, base)
- каноничная форма: нет старших нулей, ноль — пустой кортеж
"""

from pydantic import BaseModel, Field, StrictInt, field_validator

from src.core.math.convolution import multiply
from src.core.math.digits import compose, decompose
from src.core.math.numerical_safeguards import (
    MIN_BASE,
    is_canonical,
    validate_digits,
)


class DigitSequence(BaseModel):
    """
    Цифровая последовательность в фиксированном основании.

    Immutable модель (frozen=True): умножение создаёт новый экземпляр.
    """

    base: int = Field(..., ge=MIN_BASE, description="Основание системы счисления")
    digits: tuple[StrictInt, ...] = Field(
        default=(), description="Цифры, младшая первая; () представляет ноль"
    )

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digit_range(cls, v: tuple[int, ...], info) -> tuple[int, ...]:
        """Проверка диапазона цифр и каноничной формы"""
        if "base" in info.data:
            validate_digits(v, info.data["base"])

        if not is_canonical(v):
            raise ValueError(f"digits must not end with a zero digit, got {v}")

        return v

    @classmethod
    def from_int(cls, value: int, base: int) -> "DigitSequence":
        """
        Построение последовательности из неотрицательного целого.

        Raises:
            PreconditionViolation: Если value < 0 или base < 2
        """
        return cls(base=base, digits=tuple(decompose(value, base)))

    def value(self) -> int:
        """Целое значение последовательности."""
        return compose(self.digits, self.base)

    def is_zero(self) -> bool:
        return len(self.digits) == 0

    def __len__(self) -> int:
        return len(self.digits)

    def __mul__(self, other: "DigitSequence") -> "DigitSequence":
        """
        Произведение двух последовательностей в одном основании.

        Raises:
            ValueError: Если основания различаются
        """
        if not isinstance(other, DigitSequence):
            return NotImplemented
        if other.base != self.base:
            raise ValueError(
                f"cannot multiply digit sequences in different bases "
                f"({self.base} and {other.base})"
            )
        return DigitSequence(
            base=self.base, digits=tuple(multiply(self.digits, other.digits, self.base))
        )
