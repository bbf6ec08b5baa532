import pytest

from parsley import errors
from parsley.errors import SyntaxErrorKind


@pytest.mark.parametrize(
    "error,message",
    [
        (errors.ParsleySyntaxError(SyntaxErrorKind.NOT_A_PRIMITIVE, "a.b"), "Could not parse expression: a.b"),
        (errors.ParsleyTypeError("number", "symbol"), "Type error: expected number, got symbol"),
        (errors.ParsleyUndefinedSymbol("foo"), "Undefined symbol: foo"),
        (errors.ParsleyArityError(2, 3), "Arity mismatch: expected 2 parameters, got 3."),
        (errors.ParsleyArityMinError(1, 0), "Arity mismatch: expected at least 1 parameters, got 0."),
        (errors.ParsleyArityMaxError(2, 4), "Arity mismatch: expected at most 2 parameters, got 4."),
        (errors.ParsleyNotAList("5"), "Expected a list, got 5"),
        (errors.ParsleyNullList(), "Expected a pair, got null."),
        (errors.ParsleyNotAProcedure("1"), "1 is not a procedure."),
        (errors.ParsleyIndexError(7), "Tried to access invalid index: [7]"),
        (errors.ParsleyIOError("disk on fire"), "I/O error: disk on fire"),
    ],
)
def test_error_messages(error, message):
    assert str(error) == message
    assert isinstance(error, errors.ParsleyError)


def test_arity_variants_share_a_base():
    assert issubclass(errors.ParsleyArityMinError, errors.ParsleyArityError)
    assert issubclass(errors.ParsleyArityMaxError, errors.ParsleyArityError)


@pytest.mark.parametrize(
    "arity,given,error",
    [
        (2, 1, errors.ParsleyArityError),
        (2, 3, errors.ParsleyArityError),
        ((1,), 0, errors.ParsleyArityMinError),
        ((1, 3), 0, errors.ParsleyArityMinError),
        ((1, 3), 4, errors.ParsleyArityMaxError),
    ],
)
def test_arity_check(arity, given, error):
    from parsley.types import Arity

    with pytest.raises(error) as excinfo:
        Arity.coerce(arity).check(given)
    assert type(excinfo.value) is error


def test_arity_accepts():
    from parsley.types import Arity

    assert Arity.exact(0).is_thunk
    assert Arity.at_least(1).accepts(100)
    assert not Arity.between(1, 2).accepts(3)
    Arity.between(1, 2).check(2)


# -----------------------------------------------------
# require
# -----------------------------------------------------

def test_require_runs_file_in_current_context(ctx, tmp_path, monkeypatch):
    (tmp_path / "lib.scm").write_text("(define (triple x) (* 3 x))\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert ctx.run('(require "lib.scm") (triple 4)') == 12


def test_require_searches_parsley_path(ctx, tmp_path, monkeypatch):
    lib_dir = tmp_path / "libs"
    lib_dir.mkdir()
    (lib_dir / "greet.scm").write_text('(define greeting "hello")', encoding="utf-8")
    monkeypatch.setenv("PARSLEY_PATH", str(lib_dir))
    assert ctx.run('(require "greet.scm") greeting') == "hello"


def test_require_missing_file_is_io_error(ctx, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PARSLEY_PATH", raising=False)
    with pytest.raises(errors.ParsleyIOError, match="I/O error: nope.scm"):
        ctx.run('(require "nope.scm")')


# -----------------------------------------------------
# Only ParsleyError leaves Context.run
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source",
    [
        # non-finite and oversized numbers
        "(vector-ref (vector 1 2) (/ 0 0))",
        "(make-vector (/ 1 0))",
        "(make-vector 1e18)",
        "(vector-head (vector 1 2) (/ 0 0))",
        "(vector-tail (vector 1 2) (- (/ 1 0)))",
        "(subvector (vector 1 2) 0 1e300)",
        "(procedure-arity-valid? car 1.5)",
        # malformed special forms
        "(let 5 1)",
        "(let ((5 1)) 1)",
        "(let loop 5)",
        "(do 1 2)",
        "(do ((i 0)) 5)",
        "(lambda 5 1)",
        "(lambda (x . 5) 1)",
        "(named-lambda 5 1)",
        "(define (5) 1)",
        "(define (f))",
        "(define)",
        "(set! 5 1)",
        "(cond 1)",
        "(case 1 2)",
        "(if)",
        "(quasiquote)",
        "`(1 ,@5)",
        "(unquote x)",
        "(+ 1 . 2)",
        "(if #t . 1)",
        # bad arguments to builtins
        "(car 5)",
        "(cdr '())",
        "(1 2)",
        "(+ 1 'a)",
        "(apply + 5)",
        "(map 5 '(1))",
        "(string->list 5)",
        "(list->string '(1))",
        "(set-car! nope 1)",
        "(vector-set! car 0 1)",
        "(require 5)",
        # reader errors
        "(",
        ")",
        '"open',
        "#\\",
        "'",
    ],
)
def test_only_parsley_errors_escape(ctx, source):
    with pytest.raises(errors.ParsleyError):
        ctx.run(source)


def test_deeply_nested_source_is_a_recursion_error(ctx, monkeypatch):
    monkeypatch.setenv("PARSLEY_RECURSION_LIMIT", "1000")
    with pytest.raises(errors.ParsleyRecursionError):
        ctx.run("(" * 20000 + ")" * 20000)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1" * 5000, "inf"),
        ("(floor (/ 1 0))", "9223372036854775807"),
        ("(round 1e300)", "9223372036854775807"),
        ("(remainder 5 0)", "NaN"),
        ("(pow 0 -1)", "inf"),
        ("(exp-2 5000)", "inf"),
        ("(sqrt -1)", "NaN"),
    ],
)
def test_numeric_edges_produce_values(run, source, expected):
    assert run(source) == expected
