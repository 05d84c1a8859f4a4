"""
Numerical Safeguards — IEEE-754 примитивы для кусочно-линейной алгебры

Модуль собирает числовые соглашения, на которых держатся все операции над кривыми:
- Sentinel-бесконечности для constant extrapolation (X = -inf / +inf)
- Проверки валидности float (finite / NaN)
- Epsilon-сравнения float для сравнения кривых с допуском

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Sentinel-значения — обычные float('-inf') / float('inf'), они проходят
   через ту же арифметику, что и конечные числа
2. NaN НЕ санитизируется: zero-width интерполяция возвращает NaN, и он
   пропагирует в суммы без замены на fallback
3. Точные сравнения (==) используются в алгоритмах; допуски только в
   вспомогательных сравнениях кривых
"""

import math
from typing import Final

# =============================================================================
# SENTINEL-ЗНАЧЕНИЯ
# =============================================================================

# Левый виртуальный breakpoint (constant extrapolation влево)
NEG_INF: Final[float] = float("-inf")

# Правый виртуальный breakpoint (constant extrapolation вправо)
POS_INF: Final[float] = float("inf")

# Результат интерполяции на отрезке нулевой ширины
NAN: Final[float] = float("nan")


# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения координат кривых
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения координат кривых
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ ВАЛИДНОСТИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


def is_sentinel(value: float) -> bool:
    """
    Проверка, является ли координата sentinel-бесконечностью.

    Examples:
        >>> is_sentinel(NEG_INF)
        True
        >>> is_sentinel(0.0)
        False
        >>> is_sentinel(NAN)
        False
    """
    return math.isinf(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    В отличие от math.isclose, два NaN считаются равными: NaN — штатный
    результат алгебры (zero-width интерполяция), и две кривые с NaN в
    одной и той же позиции описывают одно и то же.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Raises:
        ValueError: Если толерантность отрицательная

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(float("nan"), float("nan"))
        True
        >>> is_close(POS_INF, POS_INF)
        True
    """
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError(
            f"tolerances must be non-negative, got rel_tol={rel_tol}, abs_tol={abs_tol}"
        )

    if math.isnan(a) or math.isnan(b):
        return math.isnan(a) and math.isnan(b)

    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
