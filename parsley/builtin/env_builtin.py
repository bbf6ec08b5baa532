"""Built-in procedures for the Parsley base library.

This module defines list processing, equality, predicates, numeric operators,
string conversions, output and `require`, plus the `register` entry point that
installs them into a context's lang namespace.
"""
from __future__ import annotations

import math
from pathlib import Path
from typing import TYPE_CHECKING

from parsley import LispValue, config
from parsley.builtin.proc_utils import (
    check_number,
    check_type,
    make_binary_expr,
    make_binary_numeric,
    make_fold_from0_numeric,
    make_unary_expr,
    make_unary_numeric,
)
from parsley.errors import (
    ParsleyIOError,
    ParsleyNotAProcedure,
    ParsleyTypeError,
    ParsleyUndefinedSymbol,
)
from parsley.evaluation.apply import apply_procedure
from parsley.evaluation.evaluator import evaluate
from parsley.printer import to_display, to_write, unescape
from parsley.types import num
from parsley.types.char import Char
from parsley.types.environment import Environment
from parsley.types.null import Null, Undefined, Void
from parsley.types.pair import Pair, from_iterable, is_proper_list, iterate
from parsley.types import pair as pairs
from parsley.types.procedure import Arity, Procedure
from parsley.types.sexp import is_truthy, sexp_equal, type_of
from parsley.types.symbol import Symbol

if TYPE_CHECKING:
    from parsley.context import Context


# -------------------------------
# Lists and equality
# -------------------------------
def equal(args: list[LispValue]) -> bool:
    """Structural equality of two values."""
    return sexp_equal(args[0], args[1])


def is_null(args: list[LispValue]) -> bool:
    return args[0] is Null


def list_builtin(args: list[LispValue]) -> LispValue:
    """Return the arguments as a proper list."""
    return from_iterable(args)


def logical_not(args: list[LispValue]) -> bool:
    """#t only for #f."""
    return args[0] is False


def void(args: list[LispValue]) -> LispValue:
    return Void


def _mutate_binding(args: list[LispValue], ctx: Context, mutate) -> LispValue:
    target, expr = args
    if not isinstance(target, Symbol):
        raise ParsleyTypeError("symbol", type_of(target))
    storage = ctx.get(target.name)
    if storage is None:
        raise ParsleyUndefinedSymbol(target.name)
    mutate(storage, evaluate(expr, ctx))
    ctx.set(target.name, storage)
    return Undefined


def set_car(args: list[LispValue], ctx: Context) -> LispValue:
    """(set-car! name value) replaces the head of the pair bound to name."""
    return _mutate_binding(args, ctx, pairs.set_car)


def set_cdr(args: list[LispValue], ctx: Context) -> LispValue:
    """(set-cdr! name value) replaces the tail of the pair bound to name."""
    return _mutate_binding(args, ctx, pairs.set_cdr)


def type_of_builtin(args: list[LispValue]) -> str:
    return type_of(args[0])


# -------------------------------
# Higher-order
# -------------------------------
def _procedure(x: LispValue) -> Procedure:
    if not isinstance(x, Procedure):
        raise ParsleyNotAProcedure(to_write(x))
    return x


def _proper_list(x: LispValue) -> LispValue:
    if not is_proper_list(x):
        raise ParsleyTypeError("list", type_of(x))
    return x


def map_builtin(args: list[LispValue], ctx: Context) -> LispValue:
    """(map f lst) -> list of (f e) for each element e."""
    proc, lst = _procedure(args[0]), _proper_list(args[1])
    return from_iterable([apply_procedure(proc, [e], ctx) for e in iterate(lst)])


def foldl(args: list[LispValue], ctx: Context) -> LispValue:
    """(foldl f init lst) -> (f (f init e1) e2) ..."""
    proc, acc, lst = _procedure(args[0]), args[1], _proper_list(args[2])
    for e in iterate(lst):
        acc = apply_procedure(proc, [acc, e], ctx)
    return acc


def filter_builtin(args: list[LispValue], ctx: Context) -> LispValue:
    """(filter pred lst) -> elements for which pred is not #f."""
    proc, lst = _procedure(args[0]), _proper_list(args[1])
    return from_iterable([e for e in iterate(lst) if is_truthy(apply_procedure(proc, [e], ctx))])


# -------------------------------
# Procedures
# -------------------------------
def procedure_arity(args: list[LispValue]) -> LispValue:
    """(min . max), with #f as max for variadic procedures."""
    arity = _procedure(args[0]).arity
    return Pair(arity.min, arity.max if arity.max is not None else False)


def procedure_arity_valid(args: list[LispValue]) -> bool:
    proc = _procedure(args[0])
    return proc.arity.accepts(check_type(args[1], int, "number"))


def procedure_of_arity(args: list[LispValue]) -> bool:
    if not isinstance(args[0], Procedure):
        return False
    return args[0].arity.accepts(check_type(args[1], int, "number"))


def is_thunk(args: list[LispValue]) -> bool:
    return isinstance(args[0], Procedure) and args[0].arity.is_thunk


# -------------------------------
# Strings
# -------------------------------
def string_to_list(args: list[LispValue]) -> LispValue:
    text = check_type(args[0], str, "string")
    return from_iterable(Char(c) for c in text)


def list_to_string(args: list[LispValue]) -> str:
    chars = _proper_list(args[0])
    return "".join(check_type(c, Char, "char").value for c in iterate(chars))


# -------------------------------
# Numbers
# -------------------------------
def sub(args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    nums = [check_number(a) for a in args]
    if len(nums) == 1:
        return num.neg(nums[0])
    result = nums[0]
    for n in nums[1:]:
        result = num.sub(result, n)
    return result


def div(args: list[LispValue]) -> LispValue:
    """Divide the first number by the rest; reciprocal for one arg. Always a float."""
    nums = [check_number(a) for a in args]
    if len(nums) == 1:
        return num.div(1, nums[0])
    result = nums[0]
    for n in nums[1:]:
        result = num.div(result, n)
    return result


def is_zero(args: list[LispValue]) -> bool:
    return num.is_number(args[0]) and num.num_eq(args[0], 0)


# -------------------------------
# Output and loading
# -------------------------------
def _emit(ctx: Context, text: str) -> LispValue:
    ctx.write(unescape(text))
    return Undefined


def display(args: list[LispValue], ctx: Context) -> LispValue:
    return _emit(ctx, to_display(args[0]))


def displayln(args: list[LispValue], ctx: Context) -> LispValue:
    return _emit(ctx, to_display(args[0]) + "\n")


def write(args: list[LispValue], ctx: Context) -> LispValue:
    return _emit(ctx, to_write(args[0]))


def writeln(args: list[LispValue], ctx: Context) -> LispValue:
    return _emit(ctx, to_write(args[0]) + "\n")


def resolve_require(name: str) -> Path:
    """Find `name` relative to the current directory, then each PARSLEY_PATH root."""
    candidates = [Path(name)] + [root / name for root in config.get_require_roots()]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    raise ParsleyIOError(f"{name}: file not found")


def require(args: list[LispValue], ctx: Context) -> LispValue:
    """(require "file.scm") evaluates the file in the current context."""
    path = resolve_require(check_type(args[0], str, "string"))
    try:
        code = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ParsleyIOError(f"{path}: {e.strerror or e}") from e
    return ctx.run(code)


def register(ctx: Context) -> None:
    """Register the base library into the context's lang namespace."""
    procedures = {
        # std
        "eq?": make_binary_expr(sexp_equal),
        "eqv?": make_binary_expr(sexp_equal),
        "equal?": Procedure(equal, 2),
        "null?": Procedure(is_null, 1),
        "void": Procedure(void, 0),
        "list": Procedure(list_builtin, Arity.at_least(0)),
        "not": Procedure(logical_not, 1),
        "cons": Procedure(lambda args: Pair(args[0], args[1]), 2),
        "car": make_unary_expr(pairs.car),
        "cdr": make_unary_expr(pairs.cdr),
        "type-of": Procedure(type_of_builtin, 1),
        # procedures
        "procedure?": make_unary_expr(lambda x: isinstance(x, Procedure)),
        "environment?": make_unary_expr(lambda x: isinstance(x, Environment)),
        "procedure-arity": Procedure(procedure_arity, 1),
        "procedure-arity-valid?": Procedure(procedure_arity_valid, 2),
        "procedure-of-arity?": Procedure(procedure_of_arity, 2),
        "thunk?": Procedure(is_thunk, 1),
        # strings
        "string->list": Procedure(string_to_list, 1),
        "list->string": Procedure(list_to_string, 1),
        # numbers
        "zero?": Procedure(is_zero, 1),
        "add1": make_unary_numeric(lambda n: num.add(n, 1)),
        "sub1": make_unary_numeric(lambda n: num.sub(n, 1)),
        "=": make_binary_numeric(num.num_eq),
        "<": make_binary_numeric(num.num_lt),
        ">": make_binary_numeric(num.num_gt),
        "abs": make_unary_numeric(num.num_abs),
        "+": make_fold_from0_numeric(num.add, 0),
        "-": Procedure(sub, Arity.at_least(1)),
        "*": make_fold_from0_numeric(num.mul, 1),
        "/": Procedure(div, Arity.at_least(1)),
        "remainder": make_binary_numeric(num.rem),
        "pow": make_binary_numeric(num.power),
    }
    for name, proc in procedures.items():
        ctx.define_lang(name, proc.with_name(name))

    ctx.define_builtin("set-car!", set_car, 2, special=True)
    ctx.define_builtin("set-cdr!", set_cdr, 2, special=True)
    ctx.define_builtin("map", map_builtin, 2, ctx_aware=True)
    ctx.define_builtin("foldl", foldl, 3, ctx_aware=True)
    ctx.define_builtin("filter", filter_builtin, 2, ctx_aware=True)
    ctx.define_builtin("display", display, 1, ctx_aware=True)
    ctx.define_builtin("displayln", displayln, 1, ctx_aware=True)
    ctx.define_builtin("write", write, 1, ctx_aware=True)
    ctx.define_builtin("writeln", writeln, 1, ctx_aware=True)
    ctx.define_builtin("require", require, 1, ctx_aware=True)

    ctx.define_lang("null", Null)
    ctx.define_lang("pi", math.pi)
