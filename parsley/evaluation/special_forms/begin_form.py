from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.evaluation.evaluator import eval_body

if TYPE_CHECKING:
    from parsley.context import Context


def begin_form(tail: list[SExpression], ctx: Context) -> LispValue:
    return eval_body(tail, ctx)
