"""Driver pipeline: разложение → свёрточное умножение → отчёт

Оркестрация вычисления a * b в основании base:
1. Проверка предусловий (base >= 2, a >= 0, b >= 0)
2. Разложение обоих множителей на цифры
3. Свёрточное умножение с переносом
4. Построение ProductReport с кортежами (j, base, result[j])

Рендеринг:
- render_lines: текстовые строки "digit <j> of a * b in base <base> is <digit>"
- render_json: JSON отчёт, проверенный по контракту product_report

Пайплайн синхронный и чистый: вывод формируется целиком до печати.
"""

import json
import logging
from argparse import Namespace
from collections.abc import Iterator
from dataclasses import dataclass

from src.core.contracts import validate_product_report
from src.core.domain import ProductDigit, ProductReport
from src.core.math.convolution import multiply
from src.core.math.digits import decompose
from src.core.math.numeric_backend import (
    BACKEND_ARBITRARY,
    DEFAULT_BACKEND,
    DEFAULT_WIDTH_BITS,
    NumericBackend,
    get_backend,
    unlimited_int_digits,
)
from src.core.math.numerical_safeguards import validate_base, validate_non_negative

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DriverConfig:
    """Конфигурация драйвера.

    Выбор численного бэкенда и формата вывода.
    """

    backend: str = BACKEND_ARBITRARY
    width_bits: int = DEFAULT_WIDTH_BITS  # используется только для backend="fixed"
    emit_json: bool = False

    @classmethod
    def from_args(cls, args: Namespace) -> "DriverConfig":
        """Построение конфигурации из аргументов командной строки."""
        return cls(
            backend=args.backend,
            width_bits=args.width_bits,
            emit_json=args.json,
        )

    def resolve_backend(self) -> NumericBackend:
        """
        Raises:
            ValueError: Если бэкенд неизвестен или width_bits невалиден
        """
        return get_backend(self.backend, self.width_bits)


# =============================================================================
# PIPELINE
# =============================================================================


def run_multiplication(
    base: int,
    a: int,
    b: int,
    backend: NumericBackend | None = None,
) -> ProductReport:
    """Вычисление цифр a * b в основании base.

    Args:
        base: основание (>= 2)
        a: первый множитель (>= 0)
        b: второй множитель (>= 0)
        backend: численный бэкенд (опционально, default: произвольная точность)

    Returns:
        ProductReport с цифрами (j, base, result[j]), младшая первая

    Raises:
        PreconditionViolation: при base < 2 или отрицательном множителе
        NumericOverflowError: при переполнении FixedWidthBackend
    """
    backend = backend or DEFAULT_BACKEND
    validate_base(base)
    validate_non_negative(a, "a")
    validate_non_negative(b, "b")

    a_digits = decompose(a, base, backend)
    b_digits = decompose(b, base, backend)
    logger.debug(
        "Decomposed operands in base %d: len(a)=%d, len(b)=%d (backend=%s)",
        base,
        len(a_digits),
        len(b_digits),
        backend.name,
    )

    result = multiply(a_digits, b_digits, base, backend)
    logger.debug("Product has %d digit(s) in base %d", len(result), base)

    return ProductReport(
        base=base,
        a=a,
        b=b,
        digits=tuple(ProductDigit(j, base, digit) for j, digit in enumerate(result)),
        backend=backend.name,
    )


def iter_product_digits(
    base: int,
    a: int,
    b: int,
    backend: NumericBackend | None = None,
) -> Iterator[ProductDigit]:
    """Итератор по цифрам произведения: (j, base, result[j])."""
    yield from run_multiplication(base, a, b, backend).digits


# =============================================================================
# RENDERING
# =============================================================================


def render_lines(report: ProductReport) -> list[str]:
    """Текстовое представление отчёта: одна строка на цифру.

    Нулевое произведение даёт пустой список. Цифры и основание
    любой длины печатаются без лимита sys.int_max_str_digits.
    """
    with unlimited_int_digits():
        return [
            f"digit {item.position} of a * b in base {item.base} is {item.digit}"
            for item in report.digits
        ]


def render_json(report: ProductReport) -> str:
    """JSON представление отчёта.

    Raises:
        ValidationError: если отчёт не соответствует контракту product_report
    """
    data = report.to_contract()
    validate_product_report(data)
    with unlimited_int_digits():
        return json.dumps(data)
