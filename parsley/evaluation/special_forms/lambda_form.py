"""lambda, named-lambda and closure construction.

A closure snapshots, at creation time, the current value of every free
symbol of its body. The snapshot is installed as an overlay whenever the
closure runs, so later rebinding of those names elsewhere is not observed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from parsley import SExpression, LispValue
from parsley.errors import ParsleyTypeError
from parsley.evaluation.evaluator import eval_body
from parsley.types.null import NullType
from parsley.types.pair import Pair, from_iterable, iterate
from parsley.types.procedure import Arity, Procedure
from parsley.types.sexp import type_of
from parsley.types.symbol import Symbol

if TYPE_CHECKING:
    from parsley.context import Context


def _param_names(params: SExpression) -> set[str]:
    """Symbols of a parameter list, a dotted rest name included."""
    return {p.name for p in iterate(params) if isinstance(p, Symbol)}


def _binding_parts(bindings: SExpression) -> tuple[set[str], list, list]:
    """Split ((var init step) ...) into its names, init forms and step forms."""
    names: set[str] = set()
    inits: list = []
    steps: list = []
    for binding in iterate(bindings):
        if isinstance(binding, Symbol):
            names.add(binding.name)
        elif isinstance(binding, Pair):
            if isinstance(binding.head, Symbol):
                names.add(binding.head.name)
            forms = list(iterate(binding.tail))
            inits.extend(forms[:1])
            steps.extend(forms[1:])
    return names, inits, steps


def _defined_names(body: list[SExpression]) -> set[str]:
    """Names introduced by `define` at the top level of a body."""
    names: set[str] = set()
    for form in body:
        if not isinstance(form, Pair) or not isinstance(form.head, Symbol):
            continue
        if form.head.name == "begin":
            names |= _defined_names(list(iterate(form.tail)))
        elif form.head.name == "define" and isinstance(form.tail, Pair):
            target = form.tail.head
            if isinstance(target, Pair):
                target = target.head
            if isinstance(target, Symbol):
                names.add(target.name)
    return names


def _free_all(forms, bound: frozenset) -> set[str]:
    free: set[str] = set()
    for form in forms:
        free |= _free(form, bound)
    return free


def _free_in_body(body: list[SExpression], bound: frozenset) -> set[str]:
    return _free_all(body, bound | _defined_names(body))


def _free(expr: SExpression, bound: frozenset) -> set[str]:
    if isinstance(expr, Symbol):
        return set() if expr.name in bound else {expr.name}
    if not isinstance(expr, Pair):
        return set()

    head = expr.head
    keyword = head.name if isinstance(head, Symbol) and head.name not in bound else None
    parts = list(iterate(expr.tail))
    if keyword == "quote":
        return set()
    if keyword in ("lambda", "named-lambda") and parts:
        return _free_in_body(parts[1:], bound | _param_names(parts[0]))
    if keyword == "define" and parts:
        if isinstance(parts[0], Pair):
            return _free_in_body(parts[1:], bound | _param_names(parts[0]))
        return _free_all(parts[1:], bound)
    if keyword == "let" and parts:
        own: set[str] = set()
        if isinstance(parts[0], Symbol):
            own, parts = {parts[0].name}, parts[1:]
        if parts:
            names, inits, _ = _binding_parts(parts[0])
            return _free_all(inits, bound) | _free_in_body(parts[1:], bound | names | own)
    if keyword == "do" and parts:
        names, inits, steps = _binding_parts(parts[0])
        inner = bound | names
        return _free_all(inits, bound) | _free_all(steps, inner) | _free_all(parts[1:], inner)
    return _free_all(iterate(expr), bound)


def free_symbols(body: list[SExpression], bound: Iterable[str] = ()) -> set[str]:
    """Names referenced in `body` that no enclosing form inside it binds.

    Each binding form hides its own names only within the forms it scopes.
    """
    return _free_in_body(body, frozenset(bound))


def parse_params(params: SExpression) -> tuple[list[str], Optional[str]]:
    """Split a parameter list into fixed names and an optional rest name."""
    if isinstance(params, Symbol):
        return [], params.name
    names: list[str] = []
    node = params
    while isinstance(node, Pair):
        if not isinstance(node.head, Symbol):
            raise ParsleyTypeError("symbol", type_of(node.head))
        names.append(node.head.name)
        node = node.tail
    if isinstance(node, NullType):
        return names, None
    if isinstance(node, Symbol):
        return names, node.name
    raise ParsleyTypeError("symbol", type_of(node))


def make_procedure(
    ctx: Context, name: Optional[str], params: SExpression, body: list[SExpression]
) -> Procedure:
    names, rest = parse_params(params)
    exclude = set(names) | {n for n in (name, rest) if n is not None}
    captured = ctx.close(free_symbols(body, exclude))
    n = len(names)

    def invoke(args: list[LispValue], ctx: Context) -> LispValue:
        ctx.push()
        try:
            for param, value in zip(names, args):
                ctx.define(param, value)
            if rest is not None:
                ctx.define(rest, from_iterable(args[n:]))
            return eval_body(body, ctx)
        finally:
            ctx.pop()

    arity = Arity.at_least(n) if rest is not None else Arity.exact(n)
    return Procedure(invoke, arity, name, captured, ctx_aware=True)


def lambda_form(tail: list[SExpression], ctx: Context) -> LispValue:
    """(lambda (params...) body...)"""
    return make_procedure(ctx, None, tail[0], tail[1:])


def named_lambda_form(tail: list[SExpression], ctx: Context) -> LispValue:
    """(named-lambda (name params...) body...)"""
    header = tail[0]
    if not isinstance(header, Pair) or not isinstance(header.head, Symbol):
        raise ParsleyTypeError("list", type_of(header))
    return make_procedure(ctx, header.head.name, header.tail, tail[1:])
