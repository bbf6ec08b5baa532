from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.errors import ParsleyTypeError
from parsley.evaluation.evaluator import evaluate
from parsley.types.null import Undefined
from parsley.types.sexp import type_of
from parsley.types.symbol import Symbol

if TYPE_CHECKING:
    from parsley.context import Context


def set_form(tail: list[SExpression], ctx: Context) -> LispValue:
    """(set! name value) rebinds an existing name; unbound names are an error."""
    target, expr = tail
    if not isinstance(target, Symbol):
        raise ParsleyTypeError("symbol", type_of(target))
    ctx.set(target.name, evaluate(expr, ctx))
    return Undefined
