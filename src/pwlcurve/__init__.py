"""
pwlcurve — кусочно-линейная алгебра кривых

Операции над упорядоченными последовательностями 2-D точек, описывающими
функцию одной независимой координаты X (X не убывает вдоль кривой):
сложение кривых спроса/предложения, упрощение, разбиение и усечение домена.

Contains:
- core/math/       : алгоритмы (monotonicity, interpolation, piecewise_linear, summation)
- core/domain/     : Coordinates, CurvePoint, Monotone
- core/contracts/  : JSON Schema контракт кривой
"""

from pwlcurve.core.domain import (
    POINT_COORDINATES,
    XY,
    Coordinates,
    CurvePoint,
    Monotone,
    MonotonicityViolation,
    assume_monotone,
    coordinates,
)
from pwlcurve.core.math import (
    NEG_INF,
    POS_INF,
    curves_close,
    domain,
    ensure_monotone,
    interpolate,
    is_monotone,
    merge_pair,
    reduce,
    sort_ascending,
    split,
    sum_curves,
    truncate,
    value_at,
)

__version__ = "0.1.0"

__all__ = [
    # Domain
    "POINT_COORDINATES",
    "XY",
    "Coordinates",
    "CurvePoint",
    "Monotone",
    "MonotonicityViolation",
    "assume_monotone",
    "coordinates",
    # Sentinels
    "NEG_INF",
    "POS_INF",
    # Operations
    "curves_close",
    "domain",
    "ensure_monotone",
    "interpolate",
    "is_monotone",
    "merge_pair",
    "reduce",
    "sort_ascending",
    "split",
    "sum_curves",
    "truncate",
    "value_at",
]
