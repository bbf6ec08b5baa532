from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.evaluation.evaluator import evaluate
from parsley.types.sexp import is_truthy

if TYPE_CHECKING:
    from parsley.context import Context


def and_form(tail: list[SExpression], ctx: Context) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until #f is found,
    which is returned immediately. If all operands are truthy, returns the
    value of the last operand. With zero operands, returns #t.
    """
    result: LispValue = True
    for expr in tail:
        result = evaluate(expr, ctx)
        if not is_truthy(result):
            return False
    return result


def or_form(tail: list[SExpression], ctx: Context) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) returns the first operand value that is not #f. If none
    are truthy, or there are no operands, returns #f.
    """
    for expr in tail:
        val = evaluate(expr, ctx)
        if is_truthy(val):
            return val
    return False
