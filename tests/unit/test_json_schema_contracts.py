"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора vector:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Детекция несогласованности dimensions / components
- Интеграция с Pydantic моделью VectorPayload
"""

import json

import pytest
from jsonschema import ValidationError

from spade_vectors import ArrayVector4, NumpyVector2, VectorPayload
from spade_vectors.contracts import (
    SchemaLoader,
    VectorPayloadValidator,
    validate_vector_payload,
)
from spade_vectors.contracts.validators import SCHEMA_DIR


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def validator() -> VectorPayloadValidator:
    return VectorPayloadValidator()


@pytest.fixture
def valid_vector_data():
    return {"dimensions": 3, "components": [1.0, 2.0, 3.0]}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты SchemaLoader"""

    def test_loads_vector_schema(self) -> None:
        schema = SchemaLoader().load_schema("vector")
        assert schema["title"] == "Vector"
        assert schema["required"] == ["dimensions", "components"]

    def test_schema_is_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("vector") is loader.load_schema("vector")

    def test_missing_schema_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory_raises(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_schema_file_shipped_with_package(self) -> None:
        assert (SCHEMA_DIR / "vector.json").exists()


# =============================================================================
# VECTOR CONTRACT
# =============================================================================


class TestVectorPayloadValidator:
    """Тесты VectorPayloadValidator"""

    def test_valid_data(self, validator, valid_vector_data) -> None:
        validator.validate(valid_vector_data)
        assert validator.is_valid(valid_vector_data)

    @pytest.mark.parametrize("missing", ["dimensions", "components"])
    def test_missing_required_field(self, validator, valid_vector_data, missing) -> None:
        del valid_vector_data[missing]
        with pytest.raises(ValidationError):
            validator.validate(valid_vector_data)

    def test_additional_property_rejected(self, validator, valid_vector_data) -> None:
        valid_vector_data["name"] = "p"
        assert not validator.is_valid(valid_vector_data)

    def test_unsupported_dimensions(self, validator) -> None:
        assert not validator.is_valid({"dimensions": 5, "components": [0, 0, 0, 0, 0]})

    def test_non_numeric_component(self, validator) -> None:
        assert not validator.is_valid({"dimensions": 2, "components": [1.0, "2"]})

    @pytest.mark.parametrize(
        "dimensions, components",
        [(2, [1, 2, 3]), (3, [1, 2]), (3, [1, 2, 3, 4]), (4, [1, 2, 3])],
    )
    def test_component_count_must_match(self, validator, dimensions, components) -> None:
        assert not validator.is_valid({"dimensions": dimensions, "components": components})

    def test_iter_errors_reports_all(self, validator) -> None:
        errors = list(validator.iter_errors({"dimensions": "3", "components": "x"}))
        assert len(errors) >= 2

    def test_convenience_function(self, valid_vector_data) -> None:
        validate_vector_payload(valid_vector_data)
        with pytest.raises(ValidationError):
            validate_vector_payload({"dimensions": 2})


# =============================================================================
# ИНТЕГРАЦИЯ С PYDANTIC
# =============================================================================


class TestPydanticIntegration:
    """Payload, выгруженный моделью, проходит JSON Schema"""

    @pytest.mark.parametrize(
        "vector", [NumpyVector2(0.5, -1.0), ArrayVector4(1, 2, 3, 4)]
    )
    def test_model_dump_conforms(self, vector) -> None:
        data = VectorPayload.from_vector(vector).model_dump(mode="json")
        validate_vector_payload(data)

    def test_json_text_conforms(self) -> None:
        text = VectorPayload.from_vector(ArrayVector4(0, 0, 0, 1)).model_dump_json()
        validate_vector_payload(json.loads(text))
