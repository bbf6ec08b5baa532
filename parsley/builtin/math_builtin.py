"""Math library, installed by `Context.base().math()`.

Domain errors follow IEEE semantics: `(sqrt -1)` is NaN, `(log 0)` is -inf.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from parsley.builtin.proc_utils import make_binary_numeric, make_unary_numeric
from parsley.types import num

if TYPE_CHECKING:
    from parsley.context import Context

UNARY = {
    "is-nan": num.is_nan,
    "is-infinite": num.is_infinite,
    "is-finite": num.is_finite,
    "is-positive": num.is_sign_positive,
    "is-negative": num.is_sign_negative,
    "is-sign-positive": num.is_sign_positive,
    "is-sign-negative": num.is_sign_negative,
    "floor": num.floor,
    "ceil": num.ceil,
    "round": num.round_,
    "trunc": num.trunc,
    "fract": num.fract,
    "sign": num.signum,
    "recip": num.recip,
    "sqrt": num.sqrt,
    "cube-root": num.cbrt,
    "exp": num.exp,
    "log": num.ln,
    "exp-2": num.exp2,
    "log-2": num.log2,
    "log-10": num.log10,
    "sin": num.sin,
    "cos": num.cos,
    "tan": num.tan,
    "asin": num.asin,
    "acos": num.acos,
    "atan": num.atan,
    "to-degrees": num.to_degrees,
    "to-radians": num.to_radians,
}

BINARY = {
    "log-n": num.log,
    "hypot": num.hypot,
    "atan2": num.atan2,
}


def register(ctx: Context) -> None:
    for name, fn in UNARY.items():
        ctx.define_lang(name, make_unary_numeric(fn, name))
    for name, fn in BINARY.items():
        ctx.define_lang(name, make_binary_numeric(fn, name))
