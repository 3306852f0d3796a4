"""
Degree-based trigonometry for the solar formulas.
Out-of-domain inverse functions return NaN instead of raising, so that
"the sun never reaches this angle" flows through the calculation as NaN.
"""

import math


def sin(d: float) -> float:
    return math.sin(math.radians(d))


def cos(d: float) -> float:
    return math.cos(math.radians(d))


def tan(d: float) -> float:
    return math.tan(math.radians(d))


def arcsin(x: float) -> float:
    if not -1.0 <= x <= 1.0:
        return math.nan
    return math.degrees(math.asin(x))


def arccos(x: float) -> float:
    if not -1.0 <= x <= 1.0:
        return math.nan
    return math.degrees(math.acos(x))


def arccot(x: float) -> float:
    return math.degrees(math.atan(1.0 / x))


def arctan2(y: float, x: float) -> float:
    return math.degrees(math.atan2(y, x))


def _fix(a: float, base: float) -> float:
    fixed = a % base
    if fixed < 0:
        fixed += base
    # a tiny negative input rounds up to base itself
    if fixed >= base:
        fixed -= base
    return fixed


def normalize_angle(degrees: float) -> float:
    """Normalize angle to [0, 360)."""
    return _fix(degrees, 360.0)


def normalize_hour(hours: float) -> float:
    """Normalize hour to [0, 24)."""
    return _fix(hours, 24.0)
