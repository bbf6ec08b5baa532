"""
  Parsley Reader, Lexer and Parser

- Streaming, lazy tokenization
- Emits Parsley values directly:

    - () -> Null
    - lists -> Pair chains (dotted tails allowed)
    - #( ... ) -> Vector
    - symbols -> Symbol
    - strings -> str (escape sequences kept verbatim)
    - numbers -> int/float
    - #\\c -> Char
    - #t / #f -> bool
    - 'x `x ,x ,@x -> (quote x) (quasiquote x) (unquote x) (unquote-splicing x)

A program with several top-level forms reads as a single (begin ...) form.
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Optional

from parsley import SExpression
from parsley.errors import ParsleySyntaxError, SyntaxErrorKind
from parsley.types.char import Char
from parsley.types.null import Null
from parsley.types.num import parse_number
from parsley.types.pair import Pair, from_iterable
from parsley.types.symbol import Symbol, is_symbol_text
from parsley.types.vector import Vector


TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<vector>#\()"  # vector opener
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<quote>')"
    r"|(?P<quasiquote>`)"
    r"|(?P<unquote_splicing>,@)"
    r"|(?P<unquote>,)"
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings, escapes kept
    r'|(?P<unterminated>")'
    r'|(?P<atom>#\\.[^\s()";\x00-\x1f\x7f]*|[^\s()";\x00-\x1f\x7f]+)'
    r"|(?P<invalid>.)",
    re.DOTALL,
)

QUOTE_FORMS: dict[str, str] = {
    "quote": "quote",
    "quasiquote": "quasiquote",
    "unquote": "unquote",
    "unquote_splicing": "unquote-splicing",
}


class Token(NamedTuple):
    kind: str
    text: str
    pos: int


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, text, pos), skipping blanks and comments."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        kind = m.lastgroup
        text = m.group(kind)
        if kind == "unterminated":
            raise ParsleySyntaxError(
                SyntaxErrorKind.UNMATCHED_QUOTE,
                f"unterminated string starting at {pos}: {source[pos:pos + 20]}",
            )
        if kind == "invalid":
            raise ParsleySyntaxError(
                SyntaxErrorKind.NOT_A_TOKEN, f"unexpected character {text!r} at {pos}"
            )
        if kind not in ("whitespace", "comment"):
            yield Token(kind, text, pos)
        pos = m.end()


def parse_atom(text: str) -> SExpression:
    """Turn an atom token into a boolean, number, character or symbol."""
    if text == "#t":
        return True
    if text == "#f":
        return False
    try:
        return parse_number(text)
    except ParsleySyntaxError:
        pass
    if len(text) == 3 and text.startswith("#\\"):
        return Char(text[2])
    if is_symbol_text(text):
        return Symbol(text)
    raise ParsleySyntaxError(SyntaxErrorKind.NOT_A_PRIMITIVE, text)


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def _unmatched(self, opener: Token) -> ParsleySyntaxError:
        return ParsleySyntaxError(
            SyntaxErrorKind.UNMATCHED_PAREN, f"expected ')' to close '{opener.text}' at {opener.pos}"
        )

    def _read_items(self, opener: Token, allow_dot: bool) -> tuple[list, SExpression]:
        items: list = []
        while True:
            tok = self.peek()
            if tok is None:
                raise self._unmatched(opener)
            if tok.kind == "rparen":
                self.advance()
                return items, Null
            if allow_dot and items and tok.kind == "atom" and tok.text == ".":
                self.advance()
                tail = self.parse_expr()
                closer = self.advance()
                if closer is None:
                    raise self._unmatched(opener)
                if closer.kind != "rparen":
                    raise ParsleySyntaxError(
                        SyntaxErrorKind.UNMATCHED_PAREN,
                        f"expected ')' after dotted tail at {closer.pos}",
                    )
                return items, tail
            items.append(self.parse_expr())

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise ParsleySyntaxError(SyntaxErrorKind.NOT_A_TOKEN, "unexpected end of input")

        if tok.kind == "atom":
            return parse_atom(tok.text)

        if tok.kind == "string":
            return tok.text[1:-1]

        # Quote forms
        if tok.kind in QUOTE_FORMS:
            if self.peek() is None:
                raise ParsleySyntaxError(
                    SyntaxErrorKind.NOT_A_TOKEN, f"nothing follows '{tok.text}' at {tok.pos}"
                )
            expr = self.parse_expr()
            return Pair(Symbol(QUOTE_FORMS[tok.kind]), Pair(expr, Null))

        # List or dotted list
        if tok.kind == "lparen":
            items, tail = self._read_items(tok, allow_dot=True)
            return from_iterable(items, tail)

        if tok.kind == "vector":
            items, _ = self._read_items(tok, allow_dot=False)
            return Vector(items)

        if tok.kind == "rparen":
            raise ParsleySyntaxError(
                SyntaxErrorKind.UNMATCHED_PAREN, f"unexpected ')' at {tok.pos}"
            )

        raise ParsleySyntaxError(SyntaxErrorKind.NOT_A_TOKEN, f"{tok.kind} {tok.text}")

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(source: str) -> SExpression:
    """Read a whole program.

    One top-level form is returned as is; zero or several are wrapped in
    (begin ...).
    """
    exprs = list(TokenStream(lex(source)).parse_all())
    if len(exprs) == 1:
        return exprs[0]
    return Pair(Symbol("begin"), from_iterable(exprs))
