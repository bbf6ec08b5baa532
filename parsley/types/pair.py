from __future__ import annotations

from typing import Iterable, Iterator

from parsley import SExpression
from parsley.errors import ParsleyNotAList, ParsleyNullList
from parsley.types.null import Null, NullType, Undefined


class Pair:
    """A cons cell. Proper lists are chains of pairs ending in Null."""

    __slots__ = ("head", "tail")

    def __init__(self, head: SExpression, tail: SExpression = Null):
        self.head = head
        self.tail = tail

    def __iter__(self) -> Iterator[SExpression]:
        return iterate(self)

    def __eq__(self, other) -> bool:
        from parsley.types.sexp import sexp_equal
        return sexp_equal(self, other)

    __hash__ = None

    def __repr__(self):
        from parsley.printer import to_write
        return to_write(self)

    def __str__(self):
        from parsley.printer import to_display
        return to_display(self)


def cons(head: SExpression, tail: SExpression) -> Pair:
    return Pair(head, tail)


def iterate(expr: SExpression) -> Iterator[SExpression]:
    """Yield the elements of a list.

    The trailing atom of an improper list is yielded as its last element;
    a lone atom yields itself.
    """
    while isinstance(expr, Pair):
        yield expr.head
        expr = expr.tail
    if not isinstance(expr, NullType):
        yield expr


def from_iterable(items: Iterable[SExpression], tail: SExpression = Null) -> SExpression:
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def sexp_list(*items: SExpression) -> SExpression:
    return from_iterable(items)


def is_proper_list(expr: SExpression) -> bool:
    while isinstance(expr, Pair):
        expr = expr.tail
    return expr is Null


def _check_pair(expr: SExpression) -> Pair:
    if isinstance(expr, Pair):
        return expr
    if isinstance(expr, NullType):
        raise ParsleyNullList()
    from parsley.printer import to_write
    raise ParsleyNotAList(to_write(expr))


def car(expr: SExpression) -> SExpression:
    return _check_pair(expr).head


def cdr(expr: SExpression) -> SExpression:
    return _check_pair(expr).tail


def set_car(expr: SExpression, value: SExpression):
    _check_pair(expr).head = value
    return Undefined


def set_cdr(expr: SExpression, value: SExpression):
    _check_pair(expr).tail = value
    return Undefined
