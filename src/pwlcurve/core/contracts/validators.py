"""
JSON Schema Curve Contracts

Модуль для валидации JSON-представления кривых до того, как они попадут в
алгебру. Использует библиотеку jsonschema.

Схемы:
- curve.json — шаблон: массив объектов с числовыми координатами; имена
  X/Y полей подставляет curve_schema

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Шаблон и каждая специализированная схема проходят meta-валидацию
   (Draft 2020-12) до использования
2. Кэшированный шаблон не изменяется: curve_schema работает с копией
3. Порядок точек в контракт не входит: монотонность проверяет ensure_monotone
"""

import copy
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, List

import jsonschema
from jsonschema import Draft202012Validator

from pwlcurve.core.domain.coordinates import DEFAULT_X_FIELD, DEFAULT_Y_FIELD

# Шаблоны поставляются вместе с пакетом (package data)
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"
CURVE_TEMPLATE: Final[str] = "curve"


# =============================================================================
# TEMPLATES
# =============================================================================


def _check_schema(schema: Dict[str, Any], origin: str) -> None:
    """Meta-валидация схемы; SchemaError → ValueError с указанием источника."""
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {origin}: {e.message}") from e


@lru_cache()
def load_template(name: str = CURVE_TEMPLATE, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка шаблона схемы из каталога schema/.

    Результат кэшируется по (name, schema_dir); вызывающий код не должен
    изменять возвращённый dict.

    Args:
        name: Имя шаблона без расширения
        schema_dir: Каталог с шаблонами

    Returns:
        Шаблон схемы как dict

    Raises:
        FileNotFoundError: Если файл шаблона не найден
        ValueError: Если шаблон не проходит meta-валидацию
    """
    path = Path(schema_dir) / f"{name}.json"
    if not path.is_file():
        raise FileNotFoundError(f"Schema not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        template = json.load(f)

    _check_schema(template, path.name)
    return template


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


def curve_schema(x_field: str = DEFAULT_X_FIELD, y_field: str = DEFAULT_Y_FIELD) -> Dict[str, Any]:
    """
    Схема кривой с конкретными именами X/Y полей.

    Оба поля обязательны и должны быть числами; остальные поля точки
    допускаются без ограничений.

    Args:
        x_field: Имя независимой координаты
        y_field: Имя зависимой координаты

    Returns:
        Новая схема (шаблон из кэша не изменяется)

    Raises:
        ValueError: Если имена полей совпадают
    """
    if x_field == y_field:
        raise ValueError(f"X and Y fields must differ, got {x_field!r} for both")

    schema = copy.deepcopy(load_template(CURVE_TEMPLATE))
    point = schema["$defs"]["point"]
    for name in (x_field, y_field):
        point["properties"][name] = {"$ref": "#/$defs/coordinate"}
    point["required"] = [x_field, y_field]

    _check_schema(schema, f"{CURVE_TEMPLATE}.json[{x_field}, {y_field}]")
    return schema


class CurveValidator:
    """
    Валидатор JSON-представления кривой.

    Инкапсулирует логику валидации данных против специализированной схемы.
    """

    def __init__(self, x_field: str = DEFAULT_X_FIELD, y_field: str = DEFAULT_Y_FIELD):
        """
        Args:
            x_field: Имя независимой координаты
            y_field: Имя зависимой координаты
        """
        self.x_field = x_field
        self.y_field = y_field
        self.schema = curve_schema(x_field, y_field)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: List[Dict[str, Any]]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: List[Dict[str, Any]]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: List[Dict[str, Any]]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_curve(
    data: List[Dict[str, Any]],
    x_field: str = DEFAULT_X_FIELD,
    y_field: str = DEFAULT_Y_FIELD,
) -> None:
    """
    Валидация JSON-представления кривой.

    Args:
        data: Список точек-словарей
        x_field: Имя независимой координаты
        y_field: Имя зависимой координаты

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CurveValidator(x_field, y_field).validate(data)
