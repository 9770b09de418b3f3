"""
Precision helpers

Results are reported by truncating toward zero at a fixed number of
decimal digits. This is not conventional rounding: 1.239 at precision 2
becomes 1.23, and -1.239 becomes -1.23.
"""

import numpy as np

# 10**400 and 10**-400 are already outside the float64 range
EXPONENT_LIMIT = 400


def truncate_to_precision(value: float, precision: int) -> float:
    """
    Truncate a value toward zero at the given decimal precision.

    The value is scaled by 10**precision, its fractional part dropped and
    the result scaled back. A negative precision truncates to tens,
    hundreds and so on (1234.5 at -2 gives 1200.0). Infinity and NaN are
    returned unchanged.

    Precisions past the float64 range are handled without scaling: when
    the scaled value overflows, the value has no digits below the
    requested precision and is returned unchanged; when 10**precision
    underflows to zero, every finite value truncates to zero.

    Args:
        value: number to truncate
        precision: count of decimal digits to keep

    Returns:
        float: the truncated value
    """
    value = np.float64(value)
    with np.errstate(over='ignore', under='ignore', invalid='ignore'):
        exponent = max(min(precision, EXPONENT_LIMIT), -EXPONENT_LIMIT)
        multiplier = np.float64(10.0) ** np.float64(exponent)
        scaled = value * multiplier

    if not np.isfinite(value) or not np.isfinite(scaled):
        return float(value)
    if multiplier == 0:
        return float(np.copysign(0.0, value))

    with np.errstate(over='ignore', under='ignore'):
        return float(np.trunc(scaled) / multiplier)
