"""End-to-end scenarios run through Context.run."""

import pytest

from parsley.context import Context
from parsley.errors import (
    ParsleyError,
    ParsleyNotAProcedure,
    ParsleyNullList,
    ParsleyRecursionError,
    ParsleyTypeError,
    ParsleyUndefinedSymbol,
)
from parsley.printer import to_write
from parsley.types import Procedure, Symbol, sexp_list


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3 4)", 10),
        ("(define (sqr x) (* x x)) (define (sos x y) (+ (sqr x) (sqr y))) (sos 3 4)", 25),
        ("(if (> 3 2) 'yes 'no)", Symbol("yes")),
        ("(cond ((= 1 2) 'a) ((= 2 2) 'b) (else 'c))", Symbol("b")),
        ("(case 3 ((1 2) 'small) ((3 4) 'medium) (else 'big))", Symbol("medium")),
        ("(let ((x 3) (y 5)) (* x y))", 15),
        ("(define v (make-vector 3 0)) (vector-set! v 1 9) (vector-ref v 1)", 9),
        ("(map (lambda (n) (* n n)) '(1 2 3 4))", sexp_list(1, 4, 9, 16)),
    ],
)
def test_scenarios(ctx, source, expected):
    result = ctx.run(source)
    assert result == expected
    assert type(result) is type(expected)


def test_capture_scenario(ctx):
    ctx.capture()
    assert ctx.run('(begin (display "hi") 42)') == 42
    assert ctx.get_output() == "hi"


def test_error_scenarios(ctx):
    with pytest.raises(ParsleyNullList):
        ctx.run("(car '())")
    with pytest.raises(ParsleyTypeError) as excinfo:
        ctx.run("(+ 1 'a)")
    assert excinfo.value.expected == "number"
    assert excinfo.value.given == "symbol"


def test_evaluation_is_deterministic():
    source = "(define (f n) (if (= n 0) '() (cons n (f (- n 1))))) (display (f 3)) (f 3)"
    first, second = Context.base().capture(), Context.base().capture()
    assert first.run(source) == second.run(source)
    assert first.get_output() == second.get_output() == "(3 2 1)"


def test_default_context_has_only_special_forms():
    ctx = Context.default()
    assert ctx.run("(if #t 'a 'b)") == Symbol("a")
    with pytest.raises(ParsleyUndefinedSymbol):
        ctx.run("(car '(1))")


def test_evaluating_null_fails(ctx):
    with pytest.raises(ParsleyNullList):
        ctx.run("()")


def test_applying_a_non_procedure_fails(ctx):
    with pytest.raises(ParsleyNotAProcedure, match=r"^1 is not a procedure\.$"):
        ctx.run("(1 2 3)")


def test_public_apply(ctx):
    assert ctx.apply(ctx.get("+"), [1, 2]) == 3
    assert ctx.apply(ctx.run("(lambda (x) (* x x))"), [9]) == 81
    assert ctx.apply(5, []) == 5
    assert ctx.apply(Symbol("f"), [1]) == sexp_list(Symbol("f"), 1)


def test_define_builtin(ctx):
    ctx.define_builtin("double", lambda args: args[0] * 2, 1)
    assert ctx.run("(double 21)") == 42
    assert to_write(ctx.get("double")) == "#<procedure:double>"

    def peek(args, ctx):
        return ctx.get(args[0].name)

    ctx.define_builtin("peek", peek, 1, special=True)
    ctx.define("secret", 7)
    assert ctx.run("(peek secret)") == 7


def test_registration_helpers(ctx):
    from parsley.builtin.proc_utils import make_fold_numeric, make_ternary_expr
    from parsley.types import cons, num

    ctx.define_lang("diff", make_fold_numeric(num.sub, "diff"))
    ctx.define_lang("clamp", make_ternary_expr(lambda x, lo, hi: min(max(x, lo), hi), "clamp"))
    ctx.define_lang("kons", Procedure(lambda args: cons(args[0], args[1]), 2, "kons"))

    assert ctx.run("(diff 10 3 2)") == 5
    assert ctx.run("(diff 4)") == 4
    assert ctx.run("(clamp 9 0 3)") == 3
    assert to_write(ctx.run("(kons 1 2)")) == "(1 . 2)"
    with pytest.raises(ParsleyTypeError, match="expected number, got symbol"):
        ctx.run("(diff 1 'a)")
    with pytest.raises(ParsleyError):
        ctx.run("(diff)")


def test_user_definitions_shadow_library(ctx):
    assert ctx.run("(define (car x) 'mine) (car '(1))") == Symbol("mine")


def test_runaway_recursion_is_reported(ctx, monkeypatch):
    monkeypatch.setenv("PARSLEY_RECURSION_LIMIT", "1000")
    with pytest.raises(ParsleyRecursionError) as excinfo:
        ctx.run("(define (loop n) (+ 1 (loop n))) (loop 0)")
    assert isinstance(excinfo.value, ParsleyError)
    assert ctx.user.outer is None


def test_procedures_from_lambda_are_context_aware(ctx):
    proc = ctx.run("(lambda (x) x)")
    assert isinstance(proc, Procedure)
    assert proc.ctx_aware and not proc.special
