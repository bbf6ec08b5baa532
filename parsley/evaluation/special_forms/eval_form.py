from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.evaluation.evaluator import evaluate

if TYPE_CHECKING:
    from parsley.context import Context


def eval_form(tail: list[SExpression], ctx: Context) -> LispValue:
    """(eval x) evaluates x, then evaluates the resulting form."""
    return evaluate(evaluate(tail[0], ctx), ctx)
