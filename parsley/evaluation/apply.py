"""Application engine for Parsley.

Every procedure call, whether from the evaluator, a special form or a builtin
such as `map`, goes through `apply_procedure` so that arity checking and
closure overlays behave the same everywhere.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import LispValue
from parsley.types.procedure import Procedure

if TYPE_CHECKING:
    from parsley.context import Context


def apply_procedure(proc: Procedure, args: list[LispValue], ctx: Context) -> LispValue:
    """Invoke `proc` with `args` (values, or raw forms for special procedures).

    The captured environment of a closure is pushed as an overlay for the
    duration of the call and popped on every exit path.
    """
    proc.arity.check(len(args))
    if proc.env is None:
        return _invoke(proc, args, ctx)
    ctx.push_overlay(proc.env)
    try:
        return _invoke(proc, args, ctx)
    finally:
        ctx.pop_overlay()


def _invoke(proc: Procedure, args: list[LispValue], ctx: Context) -> LispValue:
    if proc.ctx_aware:
        return proc.func(args, ctx)
    return proc.func(args)
