"""Numeric tower: 64-bit integers that promote to IEEE doubles.

Numbers are plain Python `int` and `float` values. Integer arithmetic that
leaves the signed 64-bit range yields a float instead of a big integer.
Transcendental operations go through numpy so that domain errors produce
NaN/inf rather than Python exceptions.
"""

from __future__ import annotations

import math
import re
import sys

import numpy as np

from parsley.errors import ParsleySyntaxError, SyntaxErrorKind

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1
EPSILON = sys.float_info.epsilon

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*(?:[eE][+-]?[0-9]+)?|\.[0-9]+(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def is_number(x) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _fit(i: int):
    return i if INT_MIN <= i <= INT_MAX else float(i)


def _f(x: np.floating) -> float:
    return float(x)


def _ufunc(fn, *xs) -> float:
    with np.errstate(all="ignore"):
        return _f(fn(*(np.float64(x) for x in xs)))


def _to_int(f: float) -> int:
    # Saturating float -> int conversion, NaN maps to 0
    if math.isnan(f):
        return 0
    if f >= INT_MAX:
        return INT_MAX
    if f <= INT_MIN:
        return INT_MIN
    return int(f)


# Arithmetic

def add(a, b):
    if isinstance(a, int) and isinstance(b, int):
        return _fit(a + b)
    return float(a) + float(b)


def sub(a, b):
    if isinstance(a, int) and isinstance(b, int):
        return _fit(a - b)
    return float(a) - float(b)


def mul(a, b):
    if isinstance(a, int) and isinstance(b, int):
        return _fit(a * b)
    return _ufunc(np.multiply, a, b)


def div(a, b) -> float:
    """Division always produces a float; division by zero follows IEEE."""
    return _ufunc(np.true_divide, a, b)


def rem(a, b):
    """Remainder truncated toward zero, sign of the dividend."""
    if isinstance(a, int) and isinstance(b, int):
        if b == 0:
            return math.nan
        r = abs(a) % abs(b)
        return -r if a < 0 else r
    return _ufunc(np.fmod, a, b)


def neg(a):
    return _fit(-a) if isinstance(a, int) else -a


def num_abs(a):
    return _fit(abs(a)) if isinstance(a, int) else abs(a)


def power(a, b):
    if isinstance(a, int) and isinstance(b, int) and 0 <= b < 2 ** 32:
        if abs(a) <= 1 or b * math.log2(abs(a)) < 64:
            result = a ** b
            if INT_MIN <= result <= INT_MAX:
                return result
    return _ufunc(np.power, a, b)


# Rounding

def floor(a) -> int:
    return a if isinstance(a, int) else _to_int(math.floor(a) if math.isfinite(a) else a)


def ceil(a) -> int:
    return a if isinstance(a, int) else _to_int(math.ceil(a) if math.isfinite(a) else a)


def trunc(a) -> int:
    return a if isinstance(a, int) else _to_int(a)


def round_(a) -> int:
    """Round half away from zero."""
    if isinstance(a, int):
        return a
    if not math.isfinite(a):
        return _to_int(a)
    r = math.trunc(a)
    if abs(a - r) >= 0.5:
        r += 1 if a > 0 else -1
    return _to_int(r)


def fract(a):
    if isinstance(a, int):
        return 0
    if not math.isfinite(a):
        return math.nan
    return a - math.trunc(a)


def signum(a) -> int:
    if isinstance(a, int):
        return (a > 0) - (a < 0)
    if math.isnan(a):
        return 0
    return int(math.copysign(1.0, a))


# Float-valued functions

def recip(a) -> float: return _ufunc(np.reciprocal, a)
def sqrt(a) -> float: return _ufunc(np.sqrt, a)
def cbrt(a) -> float: return _ufunc(np.cbrt, a)
def exp(a) -> float: return _ufunc(np.exp, a)
def ln(a) -> float: return _ufunc(np.log, a)
def log2(a) -> float: return _ufunc(np.log2, a)
def log10(a) -> float: return _ufunc(np.log10, a)
def sin(a) -> float: return _ufunc(np.sin, a)
def cos(a) -> float: return _ufunc(np.cos, a)
def tan(a) -> float: return _ufunc(np.tan, a)
def asin(a) -> float: return _ufunc(np.arcsin, a)
def acos(a) -> float: return _ufunc(np.arccos, a)
def atan(a) -> float: return _ufunc(np.arctan, a)
def to_degrees(a) -> float: return _ufunc(np.degrees, a)
def to_radians(a) -> float: return _ufunc(np.radians, a)
def atan2(a, b) -> float: return _ufunc(np.arctan2, a, b)
def hypot(a, b) -> float: return _ufunc(np.hypot, a, b)


def log(a, base) -> float:
    with np.errstate(all="ignore"):
        return _f(np.log(np.float64(a)) / np.log(np.float64(base)))


def exp2(a):
    if isinstance(a, int) and 0 <= a < 63:
        return 2 ** a
    return _ufunc(np.exp2, a)


# Predicates

def is_nan(a) -> bool:
    return isinstance(a, float) and math.isnan(a)


def is_infinite(a) -> bool:
    return isinstance(a, float) and math.isinf(a)


def is_finite(a) -> bool:
    return isinstance(a, int) or math.isfinite(a)


def is_sign_positive(a) -> bool:
    if isinstance(a, int):
        return a > 0
    return math.copysign(1.0, a) > 0


def is_sign_negative(a) -> bool:
    if isinstance(a, int):
        return a < 0
    return math.copysign(1.0, a) < 0


# Comparison

def num_eq(a, b) -> bool:
    """Numeric equality; comparisons involving a float use EPSILON tolerance."""
    if isinstance(a, int) and isinstance(b, int):
        return a == b
    a, b = float(a), float(b)
    if math.isinf(a) or math.isinf(b):
        return a == b
    return abs(a - b) < EPSILON


def num_lt(a, b) -> bool:
    return a < b


def num_gt(a, b) -> bool:
    return a > b


# Text

def parse_number(text: str):
    """Parse `text` as an integer if possible, else as a float."""
    if _INT_RE.fullmatch(text):
        # 64-bit integers have at most 19 significant digits
        digits = text.lstrip("+-").lstrip("0") or "0"
        if len(digits) <= 19:
            value = -int(digits) if text.startswith("-") else int(digits)
            if INT_MIN <= value <= INT_MAX:
                return value
        return float(text)
    if _FLOAT_RE.fullmatch(text):
        return float(text)
    raise ParsleySyntaxError(SyntaxErrorKind.NOT_A_NUMBER, text)


def format_number(n) -> str:
    if isinstance(n, int):
        return str(n)
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    if n == 0:
        return "-0" if math.copysign(1.0, n) < 0 else "0"
    if n.is_integer():
        return str(int(n))
    return np.format_float_positional(n, trim="-")
