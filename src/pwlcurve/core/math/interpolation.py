"""
Interpolator — линейная интерполяция/экстраполяция по двум точкам

Примитив, через который все операции получают значения на границах:
split, truncate и sum_curves вызывают его для синтеза новых breakpoint'ов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отрезок нулевой ширины (b.X - a.X == 0) → Y = NaN. Это контракт, а не ошибка:
   NaN не перехватывается и не заменяется, он пропагирует в суммы
2. Левый операнд с нефинитным X (sentinel -inf) → Y = a.Y (constant extrapolation)
3. Sentinel справа (+inf) обрабатывается общей формулой: (x - a.X) / inf == 0

ФОРМУЛА:
    Y = a.Y + ((x_at - a.X) / (b.X - a.X)) * (b.Y - a.Y)
"""

import bisect
import math
from typing import Any

from pwlcurve.core.domain.coordinates import Coordinates
from pwlcurve.core.domain.monotone import Monotone
from pwlcurve.core.math.numerical_safeguards import NAN


def interpolate_value(x0: float, y0: float, x1: float, y1: float, x_at: float) -> float:
    """
    Значение прямой через (x0, y0) и (x1, y1) в точке x_at.

    Вызывающий код гарантирует x0 != x1; иначе результат NaN.

    Args:
        x0, y0: Левая точка (x0 может быть -inf)
        x1, y1: Правая точка (x1 может быть +inf)
        x_at: Координата, в которой вычисляется значение

    Returns:
        Интерполированное (или экстраполированное) значение

    Examples:
        >>> interpolate_value(0.0, 0.0, 2.0, 2.0, 1.0)
        1.0
        >>> interpolate_value(float("-inf"), 5.0, 1.0, 7.0, -100.0)
        5.0
        >>> interpolate_value(1.0, 0.0, 1.0, 3.0, 1.0)
        nan
    """
    dx = x1 - x0
    if dx == 0:
        return NAN
    if math.isfinite(x0):
        return y0 + ((x_at - x0) / dx) * (y1 - y0)
    return y0


def interpolate(a: Any, b: Any, x_at: float, coords: Coordinates) -> Any:
    """
    Новая точка {X=x_at, Y} на прямой через точки a и b.

    a.X <= b.X ожидается, но не проверяется.

    Args:
        a: Левая точка
        b: Правая точка
        x_at: Координата новой точки
        coords: Доступ к координатам и конструктор точки

    Returns:
        Новая точка, содержащая только X и Y
    """
    x0, y0 = coords.xy(a)
    x1, y1 = coords.xy(b)
    return coords.make(x_at, interpolate_value(x0, y0, x1, y1, x_at))


def value_at(curve: Monotone, coords: Coordinates, x: float) -> float:
    """
    Значение кривой в точке x с constant extrapolation за пределами домена.

    Семантика совпадает с sum_curves: левее первой точки — Y первой точки,
    правее последней — Y последней, пустая кривая — 0.0. На вертикальном
    разрыве (несколько точек с одним X) берётся самая правая из них.

    Args:
        curve: Монотонная кривая
        coords: Доступ к координатам
        x: Координата

    Returns:
        Значение кривой

    Examples:
        >>> from pwlcurve.core.domain.coordinates import XY
        >>> curve = [{"x": 0, "y": 0}, {"x": 2, "y": 4}]
        >>> value_at(curve, XY, 1.0)
        2.0
        >>> value_at(curve, XY, 10.0)
        4
    """
    if not curve:
        return 0.0

    k = bisect.bisect_right(curve, x, key=coords.get_x)
    if k == 0:
        return coords.y(curve[0])
    if k == len(curve):
        return coords.y(curve[-1])

    x0, y0 = coords.xy(curve[k - 1])
    if x0 == x:
        return y0
    x1, y1 = coords.xy(curve[k])
    return interpolate_value(x0, y0, x1, y1, x)
