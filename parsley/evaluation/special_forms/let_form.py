from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.errors import ParsleyArityMinError, ParsleyTypeError
from parsley.evaluation.apply import apply_procedure
from parsley.evaluation.evaluator import eval_body, evaluate
from parsley.evaluation.special_forms.lambda_form import make_procedure
from parsley.types.null import Undefined
from parsley.types.pair import Pair, from_iterable, iterate
from parsley.types.sexp import type_of
from parsley.types.symbol import Symbol

if TYPE_CHECKING:
    from parsley.context import Context


def parse_bindings(bindings: SExpression) -> list[tuple[Symbol, list[SExpression]]]:
    """((var init) ...) -> [(var, [init, ...]), ...]; a bare var has no init."""
    parsed = []
    for binding in iterate(bindings):
        if isinstance(binding, Symbol):
            parsed.append((binding, []))
            continue
        if not isinstance(binding, Pair) or not isinstance(binding.head, Symbol):
            raise ParsleyTypeError("symbol", type_of(binding))
        parsed.append((binding.head, list(iterate(binding.tail))))
    return parsed


def let_form(tail: list[SExpression], ctx: Context) -> LispValue:
    """(let ((var init) ...) body...) or named (let name ((var init) ...) body...)

    Inits are evaluated in the enclosing scope, then bound in a fresh one.
    """
    name = None
    if isinstance(tail[0], Symbol):
        if len(tail) < 3:
            raise ParsleyArityMinError(3, len(tail))
        name, tail = tail[0].name, tail[1:]

    bindings = parse_bindings(tail[0])
    body = tail[1:]
    values = [evaluate(inits[0], ctx) if inits else Undefined for _, inits in bindings]

    ctx.push()
    try:
        if name is not None:
            params = from_iterable(var for var, _ in bindings)
            loop = make_procedure(ctx, name, params, body)
            ctx.define(name, loop)
            return apply_procedure(loop, values, ctx)
        for (var, _), value in zip(bindings, values):
            ctx.define(var.name, value)
        return eval_body(body, ctx)
    finally:
        ctx.pop()
