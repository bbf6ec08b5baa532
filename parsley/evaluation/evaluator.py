"""Core evaluator for the Parsley interpreter.

Null is an error, symbols are looked up, other atoms and vectors evaluate to
themselves, and a pair is a procedure application. Special procedures receive
their argument forms unevaluated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.debug_utils import trace
from parsley.errors import ParsleyNotAList, ParsleyNotAProcedure, ParsleyNullList, ParsleyUndefinedSymbol
from parsley.evaluation.apply import apply_procedure
from parsley.printer import to_write
from parsley.types.null import NullType, Undefined
from parsley.types.pair import Pair, is_proper_list, iterate
from parsley.types.procedure import Procedure
from parsley.types.symbol import Symbol

if TYPE_CHECKING:
    from parsley.context import Context


def evaluate(expr: SExpression, ctx: Context) -> LispValue:
    if isinstance(expr, Symbol):
        value = ctx.get(expr.name)
        if value is None or value is Undefined:
            raise ParsleyUndefinedSymbol(expr.name)
        return value

    if isinstance(expr, Pair):
        proc = evaluate(expr.head, ctx)
        if not isinstance(proc, Procedure):
            raise ParsleyNotAProcedure(to_write(proc))
        if not is_proper_list(expr.tail):
            raise ParsleyNotAList(to_write(expr))
        if proc.special:
            args = list(iterate(expr.tail))
        else:
            args = [evaluate(arg, ctx) for arg in iterate(expr.tail)]
        if ctx.tracing:
            trace.enter(proc, args, ctx.call_depth)
        ctx.call_depth += 1
        try:
            result = apply_procedure(proc, args, ctx)
        finally:
            ctx.call_depth -= 1
        if ctx.tracing:
            trace.leave(proc, result, ctx.call_depth)
        return result

    if isinstance(expr, NullType):
        raise ParsleyNullList()

    # Self-evaluating atoms and vectors
    return expr


def eval_body(body: list[SExpression], ctx: Context) -> LispValue:
    """Evaluate forms in order and return the last value (Undefined if none)."""
    result: LispValue = Undefined
    for form in body:
        result = evaluate(form, ctx)
    return result
