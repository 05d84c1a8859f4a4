"""
CurvePoint — Модель точки кривой

Immutable Pydantic модель для вызывающего кода, которому нужна готовая
форма точки. Алгебра с ней не связана: любые точки читаются через Coordinates.

Дополнительные поля разрешены (extra="allow") и сохраняются операциями,
которые не создают новых точек (is_monotone, sort_ascending, reduce).
"""

from typing import Final

from pydantic import BaseModel, Field

from pwlcurve.core.domain.coordinates import Coordinates


class CurvePoint(BaseModel):
    """
    Точка кусочно-линейной кривой.

    Бесконечности и NaN допустимы: sentinel-точки и результат zero-width
    интерполяции — штатные значения алгебры.
    """

    x: float = Field(..., description="Независимая координата (например, количество)")
    y: float = Field(..., description="Зависимая координата (например, цена)")

    model_config = {"frozen": True, "extra": "allow"}  # Immutable


# Доступ к CurvePoint: новые точки создаются как CurvePoint(x=..., y=...)
POINT_COORDINATES: Final[Coordinates] = Coordinates.for_attributes("x", "y", CurvePoint)
