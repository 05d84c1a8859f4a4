"""
Summation — сумма кривых с constant extrapolation

Каждая кривая продолжается за свой домен константой (Y первой точки влево,
Y последней точки вправо); значение суммы в X — сумма значений всех кривых в X.

Структура:
- merge_pair: слияние двух кривых двумя указателями (не более |a| + |b| точек на выходе)
- sum_curves: work-efficient fold — попарные слияния, число живых кривых
  уменьшается вдвое за раунд, O(log k) раундов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. merge_pair коммутативна и ассоциативна для целей алгебры, поэтому
   результат не зависит от порядка раундов
2. Пустой список кривых → пустая кривая (а не тождественный ноль)
3. Результат всегда состоит из новых точек только с X и Y
4. NaN из zero-width интерполяции пропагирует в сумму без замены
"""

import logging
from typing import Any, Sequence

from pwlcurve.core.domain.coordinates import Coordinates
from pwlcurve.core.domain.monotone import Monotone
from pwlcurve.core.math.interpolation import interpolate_value
from pwlcurve.core.math.numerical_safeguards import NEG_INF, POS_INF

logger = logging.getLogger(__name__)


def merge_pair(a: Monotone, b: Monotone, coords: Coordinates) -> Monotone:
    """
    Сумма двух кривых слиянием потоков breakpoint'ов.

    Курсоры i, j указывают, перед какой точкой a и b мы стоим. Для каждой
    кривой хранится пройденная точка (*0) и следующая (*1); в начале *0 —
    sentinel (-inf, Y первой точки или 0 для пустой кривой), а *1 — первая
    реальная точка или (+inf, тот же Y).

    На каждом шаге берётся x1 = min(a1.X, b1.X). Кривая, чья следующая точка
    лежит в x1, вносит свой Y и продвигает курсор; другая вносит
    интерполированное значение без продвижения.

    Args:
        a: Первая монотонная кривая
        b: Вторая монотонная кривая
        coords: Доступ к координатам и конструктор точек

    Returns:
        Новая кривая; по точке на каждый шаг, не более |a| + |b|
    """
    output: list[Any] = []

    i = 0
    j = 0

    ay = coords.y(a[0]) if a else 0
    by = coords.y(b[0]) if b else 0
    ax0, ay0 = NEG_INF, ay
    bx0, by0 = NEG_INF, by
    ax1, ay1 = coords.xy(a[0]) if a else (POS_INF, ay)
    bx1, by1 = coords.xy(b[0]) if b else (POS_INF, by)

    # Пока есть непройденные точки; продвигаемся только там, где это допустимо,
    # иначе сохраняем экстраполированные концы. "not >" вместо "==": NaN в X
    # тоже продвигает курсор, поэтому каждый шаг потребляет хотя бы одну точку
    while i < len(a) or j < len(b):
        x1 = min(ax1, bx1)
        y1 = 0

        if not ax1 > x1:
            y1 += ay1
            i += 1
            ax0, ay0 = ax1, ay1
            ax1, ay1 = coords.xy(a[i]) if i < len(a) else (POS_INF, ay0)
        else:
            y1 += interpolate_value(ax0, ay0, ax1, ay1, x1)

        if not bx1 > x1:
            y1 += by1
            j += 1
            bx0, by0 = bx1, by1
            bx1, by1 = coords.xy(b[j]) if j < len(b) else (POS_INF, by0)
        else:
            y1 += interpolate_value(bx0, by0, bx1, by1, x1)

        output.append(coords.make(x1, y1))

    return Monotone(output)


def sum_curves(curves: Sequence[Monotone], coords: Coordinates) -> Monotone:
    """
    Сумма произвольного числа кривых.

    Work-efficient fold: в каждом раунде gap = ceil(gap / 2) и
    current[k] = merge_pair(current[k], current[k + gap]) для k < gap;
    при нечётном числе кривых последняя сливается с пустой кривой.
    После раунда живыми остаются только первые gap кривых.

    Args:
        curves: Монотонные кривые с одинаковым доступом к координатам
        coords: Доступ к координатам и конструктор точек

    Returns:
        Кривая-сумма (только X и Y); пустая для пустого списка

    Examples:
        >>> from pwlcurve.core.domain.coordinates import coordinates
        >>> pq = coordinates("p", "q")
        >>> a = [{"q": 0, "p": 5}, {"q": 1, "p": 6}]
        >>> b = [{"q": 0, "p": 7}, {"q": 1, "p": 8}]
        >>> [(pt["p"], pt["q"]) for pt in sum_curves([a, b], pq)]
        [(5, 0), (6, 1), (7, 1), (8, 2)]
    """
    if not curves:
        return Monotone([])

    current: list[Monotone] = list(curves)
    if len(current) == 1:
        # Одна кривая тоже пересобирается, чтобы на выходе были только X и Y
        return merge_pair(current[0], Monotone([]), coords)

    gap = len(current)
    rounds = 0
    while gap > 1:
        gap = (gap + 1) // 2
        for k in range(gap):
            other = current[k + gap] if k + gap < len(current) else Monotone([])
            current[k] = merge_pair(current[k], other, coords)
        # Хвост уже влит в первые gap кривых
        del current[gap:]
        rounds += 1
        logger.debug("Summation round %d: %d curves remain", rounds, gap)

    logger.debug(
        "Summed %d curves into %d breakpoints in %d rounds",
        len(curves),
        len(current[0]),
        rounds,
    )
    return current[0]
