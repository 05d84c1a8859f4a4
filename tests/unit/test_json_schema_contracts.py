"""
Tests for JSON Schema Curve Contracts

Комплексное тестирование JSON Schema валидатора кривых:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Интеграция с алгеброй (валидация → ensure_monotone → операции)
"""

import pytest
from jsonschema import ValidationError

from pwlcurve.core.contracts import (
    CURVE_TEMPLATE,
    SCHEMA_DIR,
    CurveValidator,
    curve_schema,
    load_template,
    validate_curve,
)
from pwlcurve.core.domain import coordinates
from pwlcurve.core.math import ensure_monotone, sum_curves


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_curve():
    """Валидная кривая с дополнительными полями."""
    return [
        {"x": 0, "y": 10.5, "bidder": "agent-1"},
        {"x": 1.5, "y": 4},
        {"x": 3, "y": -2.25},
    ]


@pytest.fixture
def valid_price_quantity_curve():
    """Валидная кривая с полями price/quantity."""
    return [
        {"price": 0.1, "quantity": 100},
        {"price": 1.0, "quantity": 1},
    ]


# =============================================================================
# TEMPLATES
# =============================================================================


class TestLoadTemplate:
    """Тесты загрузки шаблонов схем."""

    def test_curve_template_cached(self):
        """Шаблон curve загружается один раз и кэшируется."""
        template = load_template()

        assert template["type"] == "array"
        assert load_template() is template
        assert load_template(CURVE_TEMPLATE, SCHEMA_DIR) == template

    def test_missing_template(self, tmp_path):
        """Отсутствующий шаблон → FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            load_template("does_not_exist", tmp_path)

    def test_missing_directory(self, tmp_path):
        """Отсутствующий каталог шаблонов → FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            load_template(CURVE_TEMPLATE, tmp_path / "nowhere")

    def test_invalid_template_rejected(self, tmp_path):
        """Шаблон, не прошедший meta-валидацию → ValueError."""
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            load_template("broken", tmp_path)


# =============================================================================
# CURVE SCHEMA
# =============================================================================


class TestCurveSchema:
    """Тесты специализации схемы."""

    def test_fields_bound(self):
        """Имена полей подставляются в схему точки."""
        schema = curve_schema("price", "quantity")
        point = schema["$defs"]["point"]

        assert point["required"] == ["price", "quantity"]
        assert set(point["properties"]) == {"price", "quantity"}

    def test_template_not_mutated(self):
        """Шаблон в кэше не изменяется при специализации."""
        curve_schema("price", "quantity")
        schema = curve_schema()

        assert set(schema["$defs"]["point"]["properties"]) == {"x", "y"}

    def test_same_field_rejected(self):
        """Совпадающие имена X и Y полей → ValueError."""
        with pytest.raises(ValueError, match="must differ"):
            curve_schema("x", "x")


# =============================================================================
# CURVE VALIDATOR
# =============================================================================


class TestCurveValidator:
    """Тесты валидатора кривой."""

    def test_valid_curve(self, valid_curve):
        """Валидная кривая проходит проверку."""
        validate_curve(valid_curve)
        assert CurveValidator().is_valid(valid_curve)

    def test_empty_curve_valid(self):
        """Пустая кривая валидна."""
        validate_curve([])

    def test_custom_fields(self, valid_price_quantity_curve):
        """Произвольные имена полей."""
        validate_curve(valid_price_quantity_curve, "quantity", "price")

    def test_custom_fields_required(self, valid_curve):
        """Кривая без выбранных полей отклоняется."""
        with pytest.raises(ValidationError):
            validate_curve(valid_curve, "quantity", "price")

    def test_missing_y(self):
        """Отсутствующая координата Y → ошибка."""
        with pytest.raises(ValidationError, match="'y' is a required property"):
            validate_curve([{"x": 0}])

    def test_non_numeric_coordinate(self):
        """Строковая координата → ошибка."""
        with pytest.raises(ValidationError):
            validate_curve([{"x": "0", "y": 1}])

    def test_boolean_is_not_number(self):
        """bool не считается числом."""
        assert not CurveValidator().is_valid([{"x": True, "y": 1}])

    def test_not_an_array(self):
        """Кривая должна быть массивом."""
        with pytest.raises(ValidationError):
            validate_curve({"x": 0, "y": 0})

    def test_point_must_be_object(self):
        """Точка должна быть объектом."""
        assert not CurveValidator().is_valid([[0, 1]])

    def test_iter_errors_collects_all(self):
        """iter_errors возвращает все ошибки."""
        data = [{"x": "a", "y": 1}, {"y": 2}, {"x": 3, "y": None}]
        errors = list(CurveValidator().iter_errors(data))

        assert len(errors) == 3

    def test_ordering_not_part_of_contract(self):
        """Порядок точек контрактом не проверяется."""
        validate_curve([{"x": 5, "y": 0}, {"x": 1, "y": 0}])


# =============================================================================
# INTEGRATION
# =============================================================================


class TestContractIntegration:
    """Валидация payload'ов перед передачей в алгебру."""

    def test_validated_curves_summed(self, valid_price_quantity_curve):
        """Кривые спроса: контракт → монотонность → сумма."""
        coords = coordinates("quantity", "price")
        other = [{"price": 0.2, "quantity": 50}, {"price": 0.8, "quantity": 75}]

        curves = []
        for payload in (valid_price_quantity_curve, other):
            validate_curve(payload, coords.x_field, coords.y_field)
            curves.append(ensure_monotone(sorted(payload, key=coords.get_x), coords))

        total = sum_curves(curves, coords)

        assert [p["quantity"] for p in total] == [1, 50, 75, 100]
        assert total[-1]["price"] == pytest.approx(0.1 + 0.8)
