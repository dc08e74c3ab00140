"""
Driver — оркестрация умножения и командная строка

Экспортирует пайплайн разложение → умножение → отчёт и функции рендеринга.
"""

from .pipeline import (
    DriverConfig,
    iter_product_digits,
    render_json,
    render_lines,
    run_multiplication,
)

__all__ = [
    "DriverConfig",
    "iter_product_digits",
    "render_json",
    "render_lines",
    "run_multiplication",
]
