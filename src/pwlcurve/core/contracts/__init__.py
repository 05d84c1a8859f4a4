"""
Contract Validation Module

Модуль для валидации JSON-представления кривых.
"""

from .validators import (
    CURVE_TEMPLATE,
    SCHEMA_DIR,
    CurveValidator,
    curve_schema,
    load_template,
    validate_curve,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "CURVE_TEMPLATE",
    # Classes
    "CurveValidator",
    # Functions
    "load_template",
    "curve_schema",
    "validate_curve",
]
