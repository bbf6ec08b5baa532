from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.errors import ParsleyArityMaxError, ParsleyArityMinError, ParsleyTypeError
from parsley.evaluation.evaluator import evaluate
from parsley.evaluation.special_forms.lambda_form import make_procedure
from parsley.types.null import Undefined
from parsley.types.pair import Pair
from parsley.types.sexp import type_of
from parsley.types.symbol import Symbol

if TYPE_CHECKING:
    from parsley.context import Context


def define_form(tail: list[SExpression], ctx: Context) -> LispValue:
    """Bind a name in the current scope.

    (define name)               binds name to Undefined
    (define name value)         binds name to the value of `value`
    (define (name params) body) binds name to a named procedure
    """
    target = tail[0]
    if isinstance(target, Pair):
        if not isinstance(target.head, Symbol):
            raise ParsleyTypeError("symbol", type_of(target.head))
        if len(tail) < 2:
            raise ParsleyArityMinError(2, len(tail))
        name = target.head.name
        ctx.define(name, make_procedure(ctx, name, target.tail, tail[1:]))
        return Undefined

    if not isinstance(target, Symbol):
        raise ParsleyTypeError("symbol", type_of(target))
    if len(tail) > 2:
        raise ParsleyArityMaxError(2, len(tail))
    value = evaluate(tail[1], ctx) if len(tail) == 2 else Undefined
    ctx.define(target.name, value)
    return Undefined
