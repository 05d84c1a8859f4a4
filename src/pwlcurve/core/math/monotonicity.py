"""
Monotonicity Gate — предикат и сортировка по независимой координате

Устанавливает предусловие, на которое опираются все остальные операции:
X(p[i]) <= X(p[i+1]) для всех соседних точек.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая кривая и кривая из одной точки монотонны
2. Сортировка стабильна: точки с равным X сохраняют исходный порядок
3. Входная последовательность никогда не изменяется
4. Поведение при NaN в X определяется семантикой `<` (ошибка вызывающего кода)
"""

import logging
from typing import Any, Sequence

from pwlcurve.core.domain.coordinates import Coordinates
from pwlcurve.core.domain.monotone import Monotone, MonotonicityViolation
from pwlcurve.core.math.numerical_safeguards import NEG_INF

logger = logging.getLogger(__name__)


def _first_violation(curve: Sequence[Any], coords: Coordinates) -> int | None:
    x0 = NEG_INF
    for index, point in enumerate(curve):
        x1 = coords.x(point)
        if x1 < x0:
            return index
        x0 = x1
    return None


def is_monotone(curve: Sequence[Any], coords: Coordinates) -> bool:
    """
    Проверка слабой монотонности кривой по X.

    Один проход, предыдущий X стартует с -inf; False на первом строгом убывании.

    Args:
        curve: Последовательность точек
        coords: Доступ к координатам

    Returns:
        True если X не убывает вдоль кривой

    Examples:
        >>> from pwlcurve.core.domain.coordinates import XY
        >>> is_monotone([{"x": 0, "y": 0}, {"x": 6, "y": -5}], XY)
        True
        >>> is_monotone([{"x": 0, "y": 0}, {"x": 6, "y": -5}], XY.swapped())
        False
        >>> is_monotone([], XY)
        True
    """
    return _first_violation(curve, coords) is None


def sort_ascending(curve: Sequence[Any], coords: Coordinates) -> Monotone:
    """
    Стабильная сортировка кривой по возрастанию X.

    Args:
        curve: Последовательность точек (не изменяется)
        coords: Доступ к координатам

    Returns:
        Новый список тех же точек, упорядоченный по X
    """
    logger.debug("Sorting %d points by %r", len(curve), coords.x_field)
    return Monotone(sorted(curve, key=coords.get_x))


def ensure_monotone(curve: Sequence[Any], coords: Coordinates) -> Monotone:
    """
    Проверенное брендирование: возвращает кривую как Monotone или выбрасывает ошибку.

    Args:
        curve: Последовательность точек
        coords: Доступ к координатам

    Returns:
        Ту же последовательность, помеченную как Monotone

    Raises:
        MonotonicityViolation: Если X строго убывает хотя бы в одной паре
    """
    index = _first_violation(curve, coords)
    if index is not None:
        previous_x = coords.x(curve[index - 1])
        current_x = coords.x(curve[index])
        logger.debug(
            "Monotonicity violation on %r at index %d: %r < %r",
            coords.x_field,
            index,
            current_x,
            previous_x,
        )
        raise MonotonicityViolation(index, previous_x, current_x)
    return Monotone(curve)
