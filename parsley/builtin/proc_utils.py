"""Helpers that wrap plain Python functions as Parsley procedures.

Numeric helpers check that each argument is a number and raise a type error
naming the offending value's type otherwise.
"""

from __future__ import annotations

from functools import reduce
from typing import Callable, Optional

from parsley import LispValue
from parsley.errors import ParsleyTypeError
from parsley.types.num import is_number
from parsley.types.procedure import Arity, Procedure
from parsley.types.sexp import type_of


def check_number(x: LispValue):
    if not is_number(x):
        raise ParsleyTypeError("number", type_of(x))
    return x


def check_type(x: LispValue, cls, expected: str):
    if not isinstance(x, cls) or (cls is int and isinstance(x, bool)):
        raise ParsleyTypeError(expected, type_of(x))
    return x


def make_unary_numeric(fn: Callable, name: Optional[str] = None) -> Procedure:
    return Procedure(lambda args: fn(check_number(args[0])), 1, name)


def make_binary_numeric(fn: Callable, name: Optional[str] = None) -> Procedure:
    return Procedure(lambda args: fn(check_number(args[0]), check_number(args[1])), 2, name)


def make_fold_numeric(fn: Callable, name: Optional[str] = None) -> Procedure:
    """Left fold seeded by the first argument; needs at least one."""

    def fold(args: list[LispValue]) -> LispValue:
        return reduce(fn, (check_number(a) for a in args))

    return Procedure(fold, Arity.at_least(1), name)


def make_fold_from0_numeric(fn: Callable, seed, name: Optional[str] = None) -> Procedure:
    """Left fold starting from `seed`; accepts any number of arguments."""

    def fold(args: list[LispValue]) -> LispValue:
        return reduce(fn, (check_number(a) for a in args), seed)

    return Procedure(fold, Arity.at_least(0), name)


def make_unary_expr(fn: Callable, name: Optional[str] = None) -> Procedure:
    return Procedure(lambda args: fn(args[0]), 1, name)


def make_binary_expr(fn: Callable, name: Optional[str] = None) -> Procedure:
    return Procedure(lambda args: fn(args[0], args[1]), 2, name)


def make_ternary_expr(fn: Callable, name: Optional[str] = None) -> Procedure:
    return Procedure(lambda args: fn(args[0], args[1], args[2]), 3, name)
