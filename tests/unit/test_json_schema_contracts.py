"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints
- Интеграция с Pydantic моделями
"""

import json
import logging
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts import (
    OPTION_SCHEMA,
    POINT_SCHEMA,
    OptionValidator,
    PointValidator,
    SchemaLoader,
    validate_option,
    validate_point,
)
from src.core.domain import U32_MAX, Point
from src.core.option import Nothing, Some, option_to_dict


# =============================================================================
# SCHEMA LOADER TESTS
# =============================================================================


class TestSchemaLoader:
    """Тесты для SchemaLoader"""

    @pytest.mark.parametrize("schema_name", [POINT_SCHEMA, OPTION_SCHEMA])
    def test_schemas_are_valid(self, schema_name: str) -> None:
        """Все схемы проходят meta-validation"""
        schema = SchemaLoader().load_schema(schema_name)
        Draft202012Validator.check_schema(schema)
        assert schema["$schema"].endswith("2020-12/schema")

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema(POINT_SCHEMA) is loader.load_schema(POINT_SCHEMA)

    def test_load_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.core.contracts.validators"):
            SchemaLoader().load_schema(OPTION_SCHEMA)
        assert "Loaded schema option" in caplog.text

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# POINT CONTRACT TESTS
# =============================================================================


class TestPointContract:
    """Тесты для point контракта"""

    def test_valid_point(self) -> None:
        validate_point({"x": 0, "y": U32_MAX})

    def test_pydantic_dump_conforms(self) -> None:
        """Pydantic модель сериализуется в валидный контракт"""
        validate_point(Point(x=2, y=3).model_dump(mode="json"))

    def test_missing_required(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_point({"x": 1})
        assert "'y' is a required property" in str(exc_info.value)

    @pytest.mark.parametrize(
        "data",
        [
            {"x": -1, "y": 0},
            {"x": 0, "y": U32_MAX + 1},
            {"x": "1", "y": 0},
            {"x": 1.5, "y": 0},
            {"x": 1, "y": 2, "z": 3},
        ],
    )
    def test_invalid_point(self, data) -> None:
        with pytest.raises(ValidationError):
            validate_point(data)

    def test_is_valid_and_iter_errors(self) -> None:
        validator = PointValidator()
        assert validator.is_valid({"x": 1, "y": 1})
        assert not validator.is_valid({"x": -1, "y": -1})
        assert len(list(validator.iter_errors({"x": -1, "y": -1}))) == 2


# =============================================================================
# OPTION CONTRACT TESTS
# =============================================================================


class TestOptionContract:
    """Тесты для option контракта"""

    def test_nothing(self) -> None:
        validate_option({"kind": "nothing"})

    def test_some(self) -> None:
        validate_option({"kind": "some", "value": {"anything": [1, 2]}})

    def test_serialized_options_conform(self) -> None:
        validator = OptionValidator()
        assert validator.is_valid(option_to_dict(Nothing()))
        assert validator.is_valid(option_to_dict(Some(Point(x=1, y=1))))
        assert validator.is_valid(option_to_dict(Some(None)))

    def test_some_requires_value(self) -> None:
        with pytest.raises(ValidationError):
            validate_option({"kind": "some"})

    def test_nothing_forbids_value(self) -> None:
        with pytest.raises(ValidationError):
            validate_option({"kind": "nothing", "value": 0})

    def test_unknown_kind(self) -> None:
        assert not OptionValidator().is_valid({"kind": "partial"})
