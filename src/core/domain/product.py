"""
Product — Модель результата умножения

ProductDigit — одна цифра результата (позиция, основание, цифра).
ProductReport — immutable Pydantic модель полного отчёта о произведении a * b.
Соответствует схеме product_report.
"""

from typing import Any, NamedTuple

from pydantic import BaseModel, Field, field_validator

from src.core.math.digits import compose
from src.core.math.numerical_safeguards import MIN_BASE


# =============================================================================
# PRODUCT DIGIT
# =============================================================================


class ProductDigit(NamedTuple):
    """Цифра произведения: (j, base, result[j])"""

    position: int  # j, позиция цифры (младшая = 0)
    base: int  # основание
    digit: int  # result[j] в [0, base)


# =============================================================================
# PRODUCT REPORT
# =============================================================================


class ProductReport(BaseModel):
    """
    Отчёт о произведении a * b в основании base.

    Immutable модель (frozen=True). Цифры упорядочены по позиции,
    младшая первая; пустой кортеж означает нулевое произведение.
    """

    base: int = Field(..., ge=MIN_BASE, description="Основание системы счисления")
    a: int = Field(..., ge=0, description="Первый множитель")
    b: int = Field(..., ge=0, description="Второй множитель")
    digits: tuple[ProductDigit, ...] = Field(
        default=(), description="Цифры произведения, младшая первая"
    )
    backend: str = Field(..., min_length=1, description="Имя численного бэкенда")

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digit_positions(
        cls, v: tuple[ProductDigit, ...], info
    ) -> tuple[ProductDigit, ...]:
        """
        Проверка согласованности цифр отчёта.

        Позиции идут подряд с нуля, основание совпадает с base отчёта,
        старшая цифра ненулевая.
        """
        base = info.data.get("base")
        for expected_position, item in enumerate(v):
            if item.position != expected_position:
                raise ValueError(
                    f"digit positions must be consecutive from 0, "
                    f"got {item.position} at index {expected_position}"
                )
            if base is not None and item.base != base:
                raise ValueError(f"digit base {item.base} differs from report base {base}")
            if base is not None and not 0 <= item.digit < base:
                raise ValueError(f"digit {item.digit} is out of range [0, {base})")

        if v and v[-1].digit == 0:
            raise ValueError("most significant product digit must be non-zero")

        return v

    def digit_values(self) -> list[int]:
        """Цифры произведения без позиций (младшая первая)."""
        return [item.digit for item in self.digits]

    def product(self) -> int:
        """Значение произведения, собранное из цифр."""
        return compose(self.digit_values(), self.base)

    def to_contract(self) -> dict[str, Any]:
        """
        Сериализация в словарь контракта product_report.

        Returns:
            dict, совместимый с JSON Schema product_report
        """
        return {
            "base": self.base,
            "a": self.a,
            "b": self.b,
            "backend": self.backend,
            "digit_count": len(self.digits),
            "digits": [
                {"position": item.position, "digit": item.digit} for item in self.digits
            ],
        }
