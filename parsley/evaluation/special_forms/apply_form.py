from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.errors import ParsleyNotAProcedure, ParsleyTypeError
from parsley.evaluation.apply import apply_procedure
from parsley.evaluation.evaluator import evaluate
from parsley.printer import to_write
from parsley.types.pair import is_proper_list, iterate
from parsley.types.procedure import Procedure
from parsley.types.sexp import type_of

if TYPE_CHECKING:
    from parsley.context import Context


def apply_form(tail: list[SExpression], ctx: Context) -> LispValue:
    """(apply f args) calls f with the elements of the list args."""
    proc = evaluate(tail[0], ctx)
    if not isinstance(proc, Procedure):
        raise ParsleyNotAProcedure(to_write(proc))
    args = evaluate(tail[1], ctx)
    if not is_proper_list(args):
        raise ParsleyTypeError("list", type_of(args))
    return apply_procedure(proc, list(iterate(args)), ctx)
