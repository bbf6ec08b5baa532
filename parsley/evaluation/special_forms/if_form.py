from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.evaluation.evaluator import evaluate
from parsley.types.sexp import is_truthy

if TYPE_CHECKING:
    from parsley.context import Context


def if_form(tail: list[SExpression], ctx: Context) -> LispValue:
    cond, then_branch, else_branch = tail
    # Only #f is false
    if is_truthy(evaluate(cond, ctx)):
        return evaluate(then_branch, ctx)
    return evaluate(else_branch, ctx)
