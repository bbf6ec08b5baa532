from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.errors import ParsleySyntaxError, SyntaxErrorKind
from parsley.evaluation.evaluator import eval_body, evaluate
from parsley.printer import to_write
from parsley.types.null import Undefined, Void
from parsley.types.pair import Pair, iterate
from parsley.types.sexp import is_truthy, sexp_equal
from parsley.types.symbol import Symbol

ELSE = Symbol("else")

if TYPE_CHECKING:
    from parsley.context import Context


def cond_form(tail: list[SExpression], ctx: Context) -> LispValue:
    """(cond (test body...) ... (else body...))

    The first clause whose test is not #f has its body evaluated. Returns
    Void when no clause matches.
    """
    for clause in tail:
        if not isinstance(clause, Pair):
            raise ParsleySyntaxError(SyntaxErrorKind.INVALID_COND, to_write(clause))
        test, body = clause.head, list(iterate(clause.tail))
        if test == ELSE or is_truthy(evaluate(test, ctx)):
            return eval_body(body, ctx)
    return Void


def case_form(tail: list[SExpression], ctx: Context) -> LispValue:
    """(case key ((datum...) body...) ... (else body...))

    Datums are compared literally with the evaluated key. Returns Undefined
    when no clause matches.
    """
    key = evaluate(tail[0], ctx)
    for clause in tail[1:]:
        if not isinstance(clause, Pair):
            raise ParsleySyntaxError(SyntaxErrorKind.INVALID_COND, to_write(clause))
        datums, body = clause.head, list(iterate(clause.tail))
        if datums == ELSE or any(sexp_equal(key, d) for d in iterate(datums)):
            return eval_body(body, ctx)
    return Undefined
