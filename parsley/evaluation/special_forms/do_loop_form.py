from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.errors import ParsleyTypeError
from parsley.evaluation.evaluator import eval_body, evaluate
from parsley.evaluation.special_forms.let_form import parse_bindings
from parsley.types.null import Undefined
from parsley.types.pair import Pair, iterate
from parsley.types.sexp import is_truthy, type_of

if TYPE_CHECKING:
    from parsley.context import Context


def do_loop_form(tail: list[SExpression], ctx: Context) -> LispValue:
    """(do ((var init step) ...) (test result...) body...)

    Each round evaluates test; when it holds, the result forms are evaluated
    and the last value returned. Otherwise the body runs and every step is
    computed from the old bindings before any is installed.
    """
    bindings = parse_bindings(tail[0])
    exit_clause = tail[1]
    if not isinstance(exit_clause, Pair):
        raise ParsleyTypeError("list", type_of(exit_clause))
    test, results = exit_clause.head, list(iterate(exit_clause.tail))
    body = tail[2:]

    values = [evaluate(spec[0], ctx) if spec else Undefined for _, spec in bindings]
    steps = [(var.name, spec[1]) for var, spec in bindings if len(spec) > 1]

    ctx.push()
    try:
        for (var, _), value in zip(bindings, values):
            ctx.define(var.name, value)
        while not is_truthy(evaluate(test, ctx)):
            eval_body(body, ctx)
            new_values = [(name, evaluate(step, ctx)) for name, step in steps]
            for name, value in new_values:
                ctx.define(name, value)
        return eval_body(results, ctx)
    finally:
        ctx.pop()
