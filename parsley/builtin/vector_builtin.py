"""Vector procedures: construction, access, slicing and mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import LispValue
from parsley.builtin.proc_utils import check_number, check_type
from parsley.errors import ParsleyIndexError, ParsleyNotAProcedure, ParsleyTypeError, ParsleyUndefinedSymbol
from parsley.evaluation.apply import apply_procedure
from parsley.evaluation.evaluator import evaluate
from parsley.printer import to_write
from parsley.types.num import format_number, is_finite
from parsley.types.null import Null, Undefined
from parsley.types.procedure import Arity, Procedure
from parsley.types.sexp import type_of
from parsley.types.symbol import Symbol
from parsley.types.vector import Vector

if TYPE_CHECKING:
    from parsley.context import Context


def _vector(x: LispValue) -> Vector:
    return check_type(x, Vector, "vector")


def _index(x: LispValue) -> int:
    """Non-negative integer index; finite floats are truncated."""
    if not is_finite(check_number(x)):
        raise ParsleyIndexError(format_number(x))
    i = int(x)
    if i < 0:
        raise ParsleyIndexError(i)
    return i


def _bounded(i: int, limit: int) -> int:
    if i > limit:
        raise ParsleyIndexError(i)
    return i


def make_vector(args: list[LispValue]) -> Vector:
    """(make-vector n [fill]); fill defaults to the empty list."""
    fill = args[1] if len(args) > 1 else Null
    n = _index(args[0])
    try:
        return Vector([fill] * n)
    except (MemoryError, OverflowError):
        raise ParsleyIndexError(n) from None


def vector_copy(args: list[LispValue]) -> Vector:
    return _vector(args[0]).copy()


def vector_length(args: list[LispValue]) -> int:
    return len(_vector(args[0]))


def vector_ref(args: list[LispValue]) -> LispValue:
    vec = _vector(args[0])
    i = _index(args[1])
    if i >= len(vec):
        raise ParsleyIndexError(i)
    return vec[i]


def vector_set(args: list[LispValue], ctx: Context) -> LispValue:
    """(vector-set! name index value) replaces a slot of the vector bound to name."""
    target, index_expr, value_expr = args
    if not isinstance(target, Symbol):
        raise ParsleyTypeError("symbol", type_of(target))
    vec = ctx.get(target.name)
    if vec is None:
        raise ParsleyUndefinedSymbol(target.name)
    vec = _vector(vec)
    i = _index(evaluate(index_expr, ctx))
    if i >= len(vec):
        raise ParsleyIndexError(i)
    vec[i] = evaluate(value_expr, ctx)
    ctx.set(target.name, vec)
    return Undefined


def vector_map(args: list[LispValue], ctx: Context) -> Vector:
    proc, vec = args[0], _vector(args[1])
    if not isinstance(proc, Procedure):
        raise ParsleyNotAProcedure(to_write(proc))
    return Vector(apply_procedure(proc, [x], ctx) for x in vec)


def subvector(args: list[LispValue]) -> Vector:
    """(subvector v start end) -> elements start..end-1."""
    vec = _vector(args[0])
    end = _bounded(_index(args[2]), len(vec))
    start = _bounded(_index(args[1]), end)
    return Vector(vec[start:end])


def vector_head(args: list[LispValue]) -> Vector:
    vec = _vector(args[0])
    return Vector(vec[:_bounded(_index(args[1]), len(vec))])


def vector_tail(args: list[LispValue]) -> Vector:
    vec = _vector(args[0])
    return Vector(vec[_bounded(_index(args[1]), len(vec)):])


def register(ctx: Context) -> None:
    """Register the vector library into the context's lang namespace."""
    ctx.define_builtin("make-vector", make_vector, Arity.between(1, 2))
    ctx.define_builtin("vector", lambda args: Vector(args), Arity.at_least(0))
    ctx.define_builtin("vector?", lambda args: isinstance(args[0], Vector), 1)
    ctx.define_builtin("vector-copy", vector_copy, 1)
    ctx.define_builtin("vector-length", vector_length, 1)
    ctx.define_builtin("vector-ref", vector_ref, 2)
    ctx.define_builtin("vector-set!", vector_set, 3, special=True)
    ctx.define_builtin("vector-map", vector_map, 2, ctx_aware=True)
    ctx.define_builtin("subvector", subvector, 3)
    ctx.define_builtin("vector-head", vector_head, 2)
    ctx.define_builtin("vector-tail", vector_tail, 2)
