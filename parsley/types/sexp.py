"""Structural helpers shared by the evaluator, builtins and printer."""

from __future__ import annotations

from parsley import SExpression
from parsley.types.char import Char
from parsley.types.environment import Environment
from parsley.types.null import NullType, Undefined, Void
from parsley.types.num import is_number, num_eq
from parsley.types.pair import Pair
from parsley.types.procedure import Procedure
from parsley.types.symbol import Symbol
from parsley.types.vector import Vector


def type_of(x: SExpression) -> str:
    if isinstance(x, NullType):
        return "null"
    if isinstance(x, Pair):
        return "list"
    if x is Void:
        return "void"
    if x is Undefined:
        return "undefined"
    if isinstance(x, bool):
        return "bool"
    if isinstance(x, Char):
        return "char"
    if is_number(x):
        return "number"
    if isinstance(x, str):
        return "string"
    if isinstance(x, Symbol):
        return "symbol"
    if isinstance(x, Environment):
        return "environment"
    if isinstance(x, Procedure):
        return "procedure"
    if isinstance(x, Vector):
        return "vector"
    return type(x).__name__


def is_truthy(x: SExpression) -> bool:
    """Only #f is false."""
    return x is not False


def sexp_equal(a: SExpression, b: SExpression) -> bool:
    """Structural equality; numbers compare with num_eq."""
    while isinstance(a, Pair) and isinstance(b, Pair):
        if not sexp_equal(a.head, b.head):
            return False
        a, b = a.tail, b.tail
    if isinstance(a, Pair) or isinstance(b, Pair):
        return False
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    if is_number(a) and is_number(b):
        return num_eq(a, b)
    if isinstance(a, Vector) and isinstance(b, Vector):
        return len(a) == len(b) and all(sexp_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Vector) or isinstance(b, Vector):
        return False
    if isinstance(a, (Procedure, Environment)) or isinstance(b, (Procedure, Environment)):
        return a is b
    if type(a) is not type(b):
        return False
    return a == b
