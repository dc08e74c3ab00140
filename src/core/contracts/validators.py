"""
Product Report Contract

Валидация JSON отчёта о произведении по контракту product_report.json
(JSON Schema Draft 2020-12, каталог schema/ рядом с модулем).

Помимо схемы контракт требует digit_count == len(digits): это
ограничение между полями, которое JSON Schema не выражает.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

SCHEMA_DIR = Path(__file__).parent / "schema"
PRODUCT_REPORT_SCHEMA = "product_report"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema файла (с кэшем).

    Args:
        schema_name: Имя схемы без расширения (например, 'product_report')
        schema_dir: Каталог со схемами

    Returns:
        Загруженная схема как dict

    Raises:
        RuntimeError: Если каталог схем не найден
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не является валидной JSON Schema
    """
    if not schema_dir.is_dir():
        raise RuntimeError(f"Schema directory not found: {schema_dir}")

    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

    return schema


# =============================================================================
# PRODUCT REPORT VALIDATOR
# =============================================================================


class ProductReportValidator:
    """
    Валидатор product_report.

    Из нескольких нарушений схемы сообщается наиболее релевантное
    (jsonschema best_match), затем проверяется digit_count.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self.schema = load_schema(PRODUCT_REPORT_SCHEMA, schema_dir)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если отчёт не соответствует контракту
        """
        error = best_match(self.validator.iter_errors(data))
        if error is not None:
            raise error

        if data["digit_count"] != len(data["digits"]):
            raise ValidationError(
                f"digit_count {data['digit_count']} does not match "
                f"number of digits {len(data['digits'])}"
            )


_PRODUCT_REPORT_VALIDATOR: ProductReportValidator | None = None


def validate_product_report(data: Dict[str, Any]) -> None:
    """
    Валидация product_report данных общим экземпляром валидатора.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    global _PRODUCT_REPORT_VALIDATOR
    if _PRODUCT_REPORT_VALIDATOR is None:
        _PRODUCT_REPORT_VALIDATOR = ProductReportValidator()
    _PRODUCT_REPORT_VALIDATOR.validate(data)
