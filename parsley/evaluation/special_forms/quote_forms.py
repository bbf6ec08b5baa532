from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.errors import ParsleySyntaxError, ParsleyTypeError, SyntaxErrorKind
from parsley.evaluation.evaluator import evaluate
from parsley.printer import to_write
from parsley.types.null import NullType
from parsley.types.pair import Pair, from_iterable, is_proper_list, iterate, sexp_list
from parsley.types.sexp import type_of
from parsley.types.symbol import Symbol
from parsley.types.vector import Vector

if TYPE_CHECKING:
    from parsley.context import Context


def _form_arg(expr: SExpression, name: str):
    """Return x when expr is exactly (name x), else None."""
    if (
        isinstance(expr, Pair)
        and expr.head == Symbol(name)
        and isinstance(expr.tail, Pair)
        and isinstance(expr.tail.tail, NullType)
    ):
        return expr.tail
    return None


def eval_quasiquote(expr: SExpression, ctx: Context, depth: int = 1) -> SExpression:
    if isinstance(expr, Vector):
        return Vector(iterate(_expand_list(from_iterable(expr), ctx, depth)))
    if not isinstance(expr, Pair):
        return expr

    cell = _form_arg(expr, "unquote")
    if cell is not None:
        if depth == 1:
            return evaluate(cell.head, ctx)
        return sexp_list(Symbol("unquote"), eval_quasiquote(cell.head, ctx, depth - 1))
    cell = _form_arg(expr, "unquote-splicing")
    if cell is not None and depth > 1:
        return sexp_list(Symbol("unquote-splicing"), eval_quasiquote(cell.head, ctx, depth - 1))
    cell = _form_arg(expr, "quasiquote")
    if cell is not None:
        return sexp_list(Symbol("quasiquote"), eval_quasiquote(cell.head, ctx, depth + 1))
    return _expand_list(expr, ctx, depth)


def _expand_list(expr: SExpression, ctx: Context, depth: int) -> SExpression:
    items: list = []
    node = expr
    while isinstance(node, Pair):
        # `(a . ,b) reads as (a unquote b)
        if _form_arg(node, "unquote") is not None:
            break
        cell = _form_arg(node.head, "unquote-splicing")
        if cell is not None and depth == 1:
            spliced = evaluate(cell.head, ctx)
            if not is_proper_list(spliced):
                raise ParsleyTypeError("list", type_of(spliced))
            items.extend(iterate(spliced))
        else:
            items.append(eval_quasiquote(node.head, ctx, depth))
        node = node.tail
    return from_iterable(items, eval_quasiquote(node, ctx, depth))


def quote_form(tail: list[SExpression], ctx: Context) -> LispValue:
    return tail[0]


def quasiquote_form(tail: list[SExpression], ctx: Context) -> LispValue:
    return eval_quasiquote(tail[0], ctx)


def unquote_form(tail: list[SExpression], ctx: Context) -> LispValue:
    raise ParsleySyntaxError(
        SyntaxErrorKind.NOT_A_TOKEN, f"unquote outside quasiquote: ,{to_write(tail[0])}"
    )


def unquote_splice_form(tail: list[SExpression], ctx: Context) -> LispValue:
    raise ParsleySyntaxError(
        SyntaxErrorKind.NOT_A_TOKEN, f"unquote-splicing outside quasiquote: ,@{to_write(tail[0])}"
    )
