"""
Core math modules для pwlcurve

Кусочно-линейная алгебра кривых: монотонность, интерполяция, упрощение,
разбиение, усечение и суммирование.
"""

# Numerical Safeguards
from pwlcurve.core.math.numerical_safeguards import (
    # Sentinel values
    NAN,
    NEG_INF,
    POS_INF,
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Checks
    is_close,
    is_sentinel,
    is_valid_float,
)

# Monotonicity Gate
from pwlcurve.core.math.monotonicity import (
    ensure_monotone,
    is_monotone,
    sort_ascending,
)

# Interpolator
from pwlcurve.core.math.interpolation import (
    interpolate,
    interpolate_value,
    value_at,
)

# Reducer / Splitter / Truncator
from pwlcurve.core.math.piecewise_linear import (
    curves_close,
    domain,
    reduce,
    split,
    truncate,
)

# Summation Engine
from pwlcurve.core.math.summation import (
    merge_pair,
    sum_curves,
)

__all__ = [
    # Numerical Safeguards: Sentinel values
    "NAN",
    "NEG_INF",
    "POS_INF",
    # Numerical Safeguards: Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards: Checks
    "is_close",
    "is_sentinel",
    "is_valid_float",
    # Monotonicity Gate
    "ensure_monotone",
    "is_monotone",
    "sort_ascending",
    # Interpolator
    "interpolate",
    "interpolate_value",
    "value_at",
    # Piecewise Linear
    "curves_close",
    "domain",
    "reduce",
    "split",
    "truncate",
    # Summation Engine
    "merge_pair",
    "sum_curves",
]
