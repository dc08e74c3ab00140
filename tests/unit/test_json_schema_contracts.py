"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидатора product_report:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints (minimum/enum)
- Согласованность digit_count
- Интеграция с Pydantic моделью ProductReport
"""

import json
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts import (
    PRODUCT_REPORT_SCHEMA,
    ProductReportValidator,
    load_schema,
    validate_product_report,
)
from src.core.domain import ProductDigit, ProductReport


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_product_report():
    """Валидный product_report для тестирования (123 * 456 = 56088)."""
    return {
        "base": 10,
        "a": 123,
        "b": 456,
        "backend": "arbitrary",
        "digit_count": 5,
        "digits": [
            {"position": 0, "digit": 8},
            {"position": 1, "digit": 8},
            {"position": 2, "digit": 0},
            {"position": 3, "digit": 6},
            {"position": 4, "digit": 5},
        ],
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestLoadSchema:
    """Тесты загрузки схем"""

    def test_load_product_report_schema(self) -> None:
        schema = load_schema(PRODUCT_REPORT_SCHEMA)
        assert schema["title"] == "product_report"
        Draft202012Validator.check_schema(schema)

    def test_schema_is_cached(self) -> None:
        assert load_schema(PRODUCT_REPORT_SCHEMA) is load_schema(PRODUCT_REPORT_SCHEMA)

    def test_missing_schema_raises(self) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            load_schema("does_not_exist")

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            load_schema(PRODUCT_REPORT_SCHEMA, tmp_path / "missing")

    def test_invalid_schema_raises(self, tmp_path: Path) -> None:
        """Meta-validation отклоняет некорректную схему"""
        (tmp_path / "broken.json").write_text(
            json.dumps({"type": "no-such-type"}), encoding="utf-8"
        )
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            load_schema("broken", tmp_path)


# =============================================================================
# PRODUCT REPORT VALIDATION
# =============================================================================


class TestProductReportValidator:
    """Тесты валидатора product_report"""

    def test_valid_data(self, valid_product_report) -> None:
        validate_product_report(valid_product_report)
        ProductReportValidator().validate(valid_product_report)

    def test_zero_product_is_valid(self) -> None:
        validate_product_report(
            {"base": 10, "a": 0, "b": 999, "backend": "fixed", "digit_count": 0, "digits": []}
        )

    def test_huge_integers_are_valid(self) -> None:
        """Произвольная точность: значения > 64 бит"""
        validate_product_report(
            {
                "base": 2**80,
                "a": 10**40,
                "b": 1,
                "backend": "arbitrary",
                "digit_count": 1,
                "digits": [{"position": 0, "digit": 2**79}],
            }
        )

    @pytest.mark.parametrize("field", ["base", "a", "b", "backend", "digit_count", "digits"])
    def test_missing_required_field(self, valid_product_report, field: str) -> None:
        del valid_product_report[field]
        with pytest.raises(ValidationError):
            validate_product_report(valid_product_report)

    def test_base_below_minimum(self, valid_product_report) -> None:
        valid_product_report["base"] = 1
        with pytest.raises(ValidationError):
            validate_product_report(valid_product_report)

    def test_negative_operand(self, valid_product_report) -> None:
        valid_product_report["a"] = -123
        with pytest.raises(ValidationError):
            validate_product_report(valid_product_report)

    def test_unknown_backend(self, valid_product_report) -> None:
        valid_product_report["backend"] = "gmp"
        with pytest.raises(ValidationError):
            validate_product_report(valid_product_report)

    def test_string_digit_rejected(self, valid_product_report) -> None:
        valid_product_report["digits"][0]["digit"] = "8"
        with pytest.raises(ValidationError):
            validate_product_report(valid_product_report)

    def test_additional_property_rejected(self, valid_product_report) -> None:
        valid_product_report["extra"] = True
        with pytest.raises(ValidationError):
            validate_product_report(valid_product_report)

    def test_digit_count_mismatch(self, valid_product_report) -> None:
        valid_product_report["digit_count"] = 4
        with pytest.raises(ValidationError, match="digit_count 4 does not match"):
            validate_product_report(valid_product_report)

    def test_schema_error_reported_before_digit_count(self, valid_product_report) -> None:
        """Нарушение схемы имеет приоритет над проверкой digit_count"""
        valid_product_report["backend"] = "gmp"
        valid_product_report["digit_count"] = 4
        with pytest.raises(ValidationError) as exc_info:
            validate_product_report(valid_product_report)
        assert exc_info.value.validator == "enum"

    def test_validator_with_custom_schema_dir(self, tmp_path: Path, valid_product_report) -> None:
        """Валидатор использует схему из указанного каталога"""
        schema = dict(load_schema(PRODUCT_REPORT_SCHEMA))
        schema["properties"] = dict(schema["properties"], base={"type": "integer", "minimum": 16})
        (tmp_path / "product_report.json").write_text(json.dumps(schema), encoding="utf-8")
        with pytest.raises(ValidationError):
            ProductReportValidator(tmp_path).validate(valid_product_report)


# =============================================================================
# INTEGRATION WITH PYDANTIC MODELS
# =============================================================================


class TestPydanticIntegration:
    """ProductReport.to_contract() соответствует схеме"""

    def test_report_round_trip_through_json(self) -> None:
        report = ProductReport(
            base=16,
            a=255,
            b=16,
            digits=(ProductDigit(0, 16, 0), ProductDigit(1, 16, 15), ProductDigit(2, 16, 15)),
            backend="arbitrary",
        )
        data = json.loads(json.dumps(report.to_contract()))
        validate_product_report(data)
        assert data["digit_count"] == 3
