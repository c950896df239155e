"""Float helpers for calculators that must always return a number"""

import math
import sys

# Largest exponent x for which math.exp(x) still fits in a float
LOG_FLOAT_MAX = math.log(sys.float_info.max)


def nan_to_zero(value: float) -> float:
    """Replace NaN with 0.0, pass every other value through (infinities included)"""
    return 0.0 if math.isnan(value) else value


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Divide with IEEE 754 semantics instead of raising ZeroDivisionError.

    x / 0 -> +inf or -inf by the sign of x, 0 / 0 -> nan.
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def compound_growth(rate: float, periods: int) -> float:
    """(1 + rate) ** periods, saturating to +inf instead of raising OverflowError"""
    base = 1 + rate
    if base > 1 and periods > 0 and periods * math.log(base) >= LOG_FLOAT_MAX:
        return math.inf
    return base**periods
