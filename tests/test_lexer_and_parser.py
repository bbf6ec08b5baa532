import pytest
from hypothesis import given, settings, strategies as st

from parsley.errors import ParsleySyntaxError, SyntaxErrorKind
from parsley.printer import to_write
from parsley.reader.parser import lex, parse, parse_atom
from parsley.types import Char, Null, Pair, Symbol, Vector, sexp_list
from parsley.types.sexp import sexp_equal


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("'a", [("quote", "'"), ("atom", "a")]),
        ("(a b c)", [("lparen", "("), ("atom", "a"), ("atom", "b"), ("atom", "c"), ("rparen", ")")]),
        ('"hello"', [("string", '"hello"')]),
        ('"say \\"hi\\""', [("string", '"say \\"hi\\""')]),
        ("#(1 2)", [("vector", "#("), ("atom", "1"), ("atom", "2"), ("rparen", ")")]),
        (" ; comment\n a b", [("atom", "a"), ("atom", "b")]),
        ("`y", [("quasiquote", "`"), ("atom", "y")]),
        (",z", [("unquote", ","), ("atom", "z")]),
        (",@w", [("unquote_splicing", ",@"), ("atom", "w")]),
        ("#\\( x", [("atom", "#\\("), ("atom", "x")]),
        ("a;b", [("atom", "a")]),
        ("(display\"x\")", [("lparen", "("), ("atom", "display"), ("string", '"x"'), ("rparen", ")")]),
    ],
)
def test_lexer_basic(source, expected):
    tokens = [(tok.kind, tok.text) for tok in lex(source)]
    assert tokens == expected


def test_lexer_records_positions():
    assert [tok.pos for tok in lex("(ab  c)")] == [0, 1, 5, 6]


def test_unterminated_string_is_syntax_error():
    with pytest.raises(ParsleySyntaxError) as excinfo:
        list(lex('(display "abc)'))
    assert excinfo.value.kind is SyntaxErrorKind.UNMATCHED_QUOTE


def test_control_character_is_not_a_token():
    with pytest.raises(ParsleySyntaxError) as excinfo:
        list(lex("a \x01 b"))
    assert excinfo.value.kind is SyntaxErrorKind.NOT_A_TOKEN


@pytest.mark.parametrize(
    "text,expected",
    [
        ("#t", True),
        ("#f", False),
        ("42", 42),
        ("-1.5", -1.5),
        ("#\\a", Char("a")),
        ("#\\(", Char("(")),
        ("foo", Symbol("foo")),
        ("set-car!", Symbol("set-car!")),
        ("string->list", Symbol("string->list")),
        ("+", Symbol("+")),
        ("-", Symbol("-")),
        ("<=", Symbol("<=")),
    ],
)
def test_parse_atom(text, expected):
    result = parse_atom(text)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize("text", ["a.b", "#\\ab", "#q", "foo'"])
def test_parse_atom_rejects(text):
    with pytest.raises(ParsleySyntaxError) as excinfo:
        parse_atom(text)
    assert excinfo.value.kind is SyntaxErrorKind.NOT_A_PRIMITIVE


def test_parse_lists():
    assert parse("()") is Null
    assert parse("(1 2 3)") == sexp_list(1, 2, 3)
    assert parse("(a (b c) d)") == sexp_list(Symbol("a"), sexp_list(Symbol("b"), Symbol("c")), Symbol("d"))
    assert parse("(a . b)") == Pair(Symbol("a"), Symbol("b"))
    assert parse("(1 2 . 3)") == Pair(1, Pair(2, 3))


def test_parse_vectors():
    assert parse("#(1 2)") == Vector([1, 2])
    assert parse("#()") == Vector()
    assert parse("#((1) x)") == Vector([sexp_list(1), Symbol("x")])


def test_parse_quote_prefixes():
    assert parse("'x") == sexp_list(Symbol("quote"), Symbol("x"))
    assert parse("`(a ,b ,@c)") == sexp_list(
        Symbol("quasiquote"),
        sexp_list(
            Symbol("a"),
            sexp_list(Symbol("unquote"), Symbol("b")),
            sexp_list(Symbol("unquote-splicing"), Symbol("c")),
        ),
    )
    # outer prefix wraps the inner one
    assert parse("''x") == sexp_list(Symbol("quote"), sexp_list(Symbol("quote"), Symbol("x")))


def test_strings_keep_escapes_verbatim():
    assert parse('"a\\nb"') == "a\\nb"
    assert parse('"multi\nline"') == "multi\nline"


def test_program_with_several_forms_is_wrapped_in_begin():
    assert parse("1 2") == sexp_list(Symbol("begin"), 1, 2)
    assert parse("") == sexp_list(Symbol("begin"))
    assert parse("  ; nothing but a comment\n") == sexp_list(Symbol("begin"))


@pytest.mark.parametrize("source", ["(1 2", "((a)", "#(1 2", ")", "(a . b c)"])
def test_unmatched_parens(source):
    with pytest.raises(ParsleySyntaxError) as excinfo:
        parse(source)
    assert excinfo.value.kind is SyntaxErrorKind.UNMATCHED_PAREN
    assert str(excinfo.value).startswith("Could not parse expression:")


def test_dangling_quote():
    with pytest.raises(ParsleySyntaxError):
        parse("(a ')")


# -----------------------------------------------------
# Round trip: parse(to_write(x)) == x
# -----------------------------------------------------

symbols = st.text(alphabet="abcxyz-?!*<>=_", min_size=1, max_size=8).map(Symbol)
strings = st.text(
    alphabet=st.characters(exclude_characters='"\\', exclude_categories=("Cs",)), max_size=10
)
chars = st.characters(exclude_categories=("Cs", "Cc", "Zs", "Zl", "Zp")).map(Char)
numbers = st.integers(min_value=-(2 ** 63), max_value=2 ** 63 - 1) | st.floats(
    allow_nan=False, allow_infinity=False
)
atoms = st.booleans() | numbers | symbols | strings | chars

sexps = st.recursive(
    atoms,
    lambda children: st.lists(children, max_size=4).map(lambda xs: sexp_list(*xs))
    | st.lists(children, max_size=4).map(Vector),
    max_leaves=12,
)


@settings(max_examples=200)
@given(sexps)
def test_parse_of_written_form_round_trips(x):
    assert sexp_equal(parse(to_write(x)), x)
