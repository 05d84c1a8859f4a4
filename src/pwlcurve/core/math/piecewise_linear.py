"""
Piecewise Linear — упрощение, разбиение и усечение кривых

Операции над одной монотонной кривой:
- reduce: удаление точно коллинеарных внутренних точек
- split: разбиение в точке x0 на две кривые в координатах относительно x0
- truncate: ограничение домена отрезком [lo, hi] с синтезом граничных точек
- domain / curves_close: вспомогательные функции

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входная кривая никогда не изменяется, результат — новый список
2. reduce возвращает подпоследовательность исходных точек (доп. поля сохраняются)
3. split/truncate создают новые точки только с X и Y
4. Экстраполяция за домен кривой не синтезирует точек: отсутствующая
   сторона просто остаётся пустой
5. Монотонность входа не перепроверяется
"""

from typing import Any

from pwlcurve.core.domain.coordinates import Coordinates
from pwlcurve.core.domain.monotone import Monotone
from pwlcurve.core.math.interpolation import interpolate
from pwlcurve.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
)

# =============================================================================
# REDUCE
# =============================================================================


def _collinear(coords: Coordinates, p0: Any, p1: Any, p2: Any) -> bool:
    """Точная коллинеарность p0, p1, p2 (совпадающие точки коллинеарны всегда)."""
    x0, y0 = coords.xy(p0)
    x1, y1 = coords.xy(p1)
    x2, y2 = coords.xy(p2)
    return (x2 - x0) * (y1 - y0) == (x1 - x0) * (y2 - y0)


def reduce(curve: Monotone, coords: Coordinates) -> Monotone:
    """
    Удаление избыточных коллинеарных точек.

    Первая и последняя точки сохраняются всегда. Проход стековый: перед
    добавлением очередной точки q с вершины снимаются точки, лежащие точно
    на прямой через точку под вершиной и q:

        (x2 - x0) * (y1 - y0) == (x1 - x0) * (y2 - y0)

    После прохода никакие три соседние точки результата не коллинеарны,
    поэтому reduce(reduce(C)) == reduce(C). Сравнение точное, без
    толерантности. Повторяющиеся точки удовлетворяют тождеству тривиально
    и схлопываются в одну.

    Args:
        curve: Монотонная кривая
        coords: Доступ к координатам

    Returns:
        Новый список — подпоследовательность исходных точек

    Examples:
        >>> from pwlcurve.core.domain.coordinates import XY
        >>> reduce([{"x": 0, "y": 0}, {"x": 1, "y": 1}, {"x": 2, "y": 2}], XY)
        [{'x': 0, 'y': 0}, {'x': 2, 'y': 2}]
    """
    if len(curve) < 3:
        return Monotone(list(curve))

    reduced = [curve[0]]
    for point in curve[1:]:
        # Первая точка не снимается никогда
        while len(reduced) > 1 and _collinear(coords, reduced[-2], reduced[-1], point):
            reduced.pop()
        reduced.append(point)
    return Monotone(reduced)


# =============================================================================
# SPLIT
# =============================================================================


def split(curve: Monotone, coords: Coordinates, x0: float) -> tuple[Monotone, Monotone]:
    """
    Разбиение кривой в точке x0 со сдвигом обеих частей: X → X - x0.

    Алгоритм:
    1. Точки распределяются по корзинам neg (X < x0), mid (X == x0), pos (X > x0)
    2. mid не пуста: её первая точка замыкает lhs, последняя открывает rhs
    3. Иначе, если есть точки с обеих сторон: граничная точка X=0
       интерполируется между последней из neg и первой из pos
    4. Иначе граница не синтезируется, недостающая сторона пуста

    Args:
        curve: Монотонная кривая
        coords: Доступ к координатам
        x0: Координата разбиения (новое начало координат)

    Returns:
        (lhs, rhs) — две монотонные кривые в координатах относительно x0

    Examples:
        >>> from pwlcurve.core.domain.coordinates import XY
        >>> split([{"x": 0, "y": 0}, {"x": 2, "y": 2}], XY, 3)
        ([{'x': -3, 'y': 0}, {'x': -1, 'y': 2}], [])
    """
    neg: list[Any] = []
    mid: list[tuple[float, float]] = []
    pos: list[Any] = []

    for point in curve:
        x, y = coords.xy(point)
        if x < x0:
            neg.append(coords.make(x - x0, y))
        elif x > x0:
            pos.append(coords.make(x - x0, y))
        else:
            mid.append((x - x0, y))

    if mid:
        # Точки ровно в x0: интерполяция не нужна
        neg.append(coords.make(*mid[0]))
        pos.insert(0, coords.make(*mid[-1]))
    elif neg and pos:
        neg.append(interpolate(neg[-1], pos[0], 0, coords))
        pos.insert(0, coords.make(*coords.xy(neg[-1])))

    return Monotone(neg), Monotone(pos)


# =============================================================================
# TRUNCATE
# =============================================================================


def truncate(curve: Monotone, coords: Coordinates, lo: float, hi: float) -> Monotone:
    """
    Ограничение домена кривой отрезком [lo, hi].

    Граничная точка синтезируется только если у кривой есть точки за
    границей и точка внутри (или за противоположной границей), с которой
    можно интерполировать. Если кривая не достигает lo или hi, результат
    просто заканчивается там, где заканчивается кривая.

    Args:
        curve: Монотонная кривая
        coords: Доступ к координатам
        lo: Левая граница
        hi: Правая граница

    Returns:
        Новая кривая из точек с X в [lo, hi] (только X и Y)

    Examples:
        >>> from pwlcurve.core.domain.coordinates import XY
        >>> truncate([{"x": 0, "y": 0}, {"x": 3, "y": 3}], XY, 1, 4)
        [{'x': 1, 'y': 1.0}, {'x': 3, 'y': 3}]
    """
    neg: list[Any] = []
    mid: list[Any] = []
    pos: list[Any] = []

    for point in curve:
        x, y = coords.xy(point)
        if x < lo:
            neg.append(coords.make(x, y))
        elif x > hi:
            pos.append(coords.make(x, y))
        else:
            mid.append(coords.make(x, y))

    if neg:
        rhs = mid[0] if mid else (pos[0] if pos else None)
        # Нет нужды в интерполяции, если rhs.X == lo
        if rhs is not None and coords.x(rhs) > lo:
            mid.insert(0, interpolate(neg[-1], rhs, lo, coords))

    if pos:
        lhs = mid[-1] if mid else (neg[-1] if neg else None)
        if lhs is not None and coords.x(lhs) < hi:
            mid.append(interpolate(lhs, pos[0], hi, coords))

    return Monotone(mid)


# =============================================================================
# HELPERS
# =============================================================================


def domain(curve: Monotone, coords: Coordinates) -> tuple[float, float] | None:
    """
    Домен монотонной кривой: (X первой точки, X последней точки).

    Returns:
        (x_min, x_max) или None для пустой кривой
    """
    if not curve:
        return None
    return coords.x(curve[0]), coords.x(curve[-1])


def curves_close(
    a: Any,
    b: Any,
    coords: Coordinates,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Поточечное сравнение двух кривых с допуском.

    Кривые равны, если у них одинаковое число точек и X и Y каждой пары
    близки по is_close (NaN равен NaN, одинаковые бесконечности равны).

    Args:
        a: Первая кривая
        b: Вторая кривая
        coords: Доступ к координатам (общий для обеих кривых)
        rel_tol: Относительная толерантность
        abs_tol: Абсолютная толерантность

    Returns:
        True если кривые совпадают с учётом толерантности
    """
    if len(a) != len(b):
        return False
    for p, q in zip(a, b):
        px, py = coords.xy(p)
        qx, qy = coords.xy(q)
        if not (is_close(px, qx, rel_tol, abs_tol) and is_close(py, qy, rel_tol, abs_tol)):
            return False
    return True
