import math

import pytest

from parsley.printer import to_display, to_write, unescape
from parsley.types import (
    Char,
    Environment,
    Null,
    Pair,
    Procedure,
    Symbol,
    Undefined,
    Vector,
    Void,
    sexp_list,
)


@pytest.mark.parametrize(
    "value,displayed,written",
    [
        (Null, "()", "()"),
        (Void, "", ""),
        (Undefined, "", ""),
        (True, "#t", "#t"),
        (False, "#f", "#f"),
        (42, "42", "42"),
        (2.0, "2", "2"),
        (math.nan, "NaN", "NaN"),
        ("hi there", "hi there", '"hi there"'),
        (Char("x"), "x", "#\\x"),
        (Symbol("foo"), "foo", "foo"),
        (Environment(), "#<environment>", "#<environment>"),
        (Vector([1, "a", Char("b")]), '#(1 a b)', '#(1 "a" #\\b)'),
        (sexp_list(1, 2, 3), "(1 2 3)", "(1 2 3)"),
        (Pair(1, 2), "(1 . 2)", "(1 . 2)"),
        (Pair(1, Pair(2, 3)), "(1 2 . 3)", "(1 2 . 3)"),
        (sexp_list(sexp_list(1), Null, "s"), "((1) () s)", '((1) () "s")'),
    ],
)
def test_display_and_write_forms(value, displayed, written):
    assert to_display(value) == displayed
    assert to_write(value) == written


@pytest.mark.parametrize(
    "value,text",
    [
        (sexp_list(Symbol("quote"), Symbol("x")), "'x"),
        (sexp_list(Symbol("quote"), sexp_list(1, 2)), "'(1 2)"),
        (sexp_list(Symbol("quasiquote"), sexp_list(Symbol("unquote"), Symbol("y"))), "`,y"),
        (sexp_list(Symbol("unquote-splicing"), Symbol("z")), ",@z"),
        # sugar only applies to the one-argument form
        (sexp_list(Symbol("quote"), 1, 2), "(quote 1 2)"),
        (sexp_list(Symbol("quote")), "(quote)"),
    ],
)
def test_quote_sugar(value, text):
    assert to_write(value) == text


def test_procedures_print_with_their_name():
    assert to_write(Procedure(lambda args: args, 1, "car")) == "#<procedure:car>"
    assert to_write(Procedure(lambda args: args, 1)) == "#<procedure>"


def test_str_and_repr_of_compound_values():
    lst = sexp_list("a", Char("b"))
    assert str(lst) == "(a b)"
    assert repr(lst) == '("a" #\\b)'
    assert str(Vector(["a"])) == "#(a)"
    assert repr(Vector(["a"])) == '#("a")'


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("plain", "plain"),
        ("a\\nb", "a\nb"),
        ("tab\\there", "tab\there"),
        ('say \\"hi\\"', 'say "hi"'),
        ("back\\\\slash", "back\\slash"),
        ("nul\\0", "nul\0"),
        ("unknown \\q", "unknown \\q"),
        ("trailing \\", "trailing \\"),
    ],
)
def test_unescape(raw, expected):
    assert unescape(raw) == expected
