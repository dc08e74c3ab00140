"""
Contract Validation Module

Модуль для валидации JSON контрактов отчётов умножения.
"""

from .validators import (
    PRODUCT_REPORT_SCHEMA,
    SCHEMA_DIR,
    ProductReportValidator,
    load_schema,
    validate_product_report,
)

__all__ = [
    # Constants
    "PRODUCT_REPORT_SCHEMA",
    "SCHEMA_DIR",
    # Classes
    "ProductReportValidator",
    # Functions
    "load_schema",
    "validate_product_report",
]
