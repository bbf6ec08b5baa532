"""Textual forms of Parsley values.

`to_display` is what `display` prints: strings and characters appear raw.
`to_write` is the readable form used by `write`, the REPL and error messages:
strings are quoted and characters are written `#\\c`, so that reading the
result back yields an equal value.
"""

from __future__ import annotations

from io import StringIO

from parsley import SExpression
from parsley.types.char import Char
from parsley.types.environment import Environment
from parsley.types.null import NullType, Undefined, Void
from parsley.types.num import format_number, is_number
from parsley.types.pair import Pair
from parsley.types.procedure import Procedure
from parsley.types.symbol import Symbol
from parsley.types.vector import Vector

QUOTE_PREFIXES = {
    "quote": "'",
    "quasiquote": "`",
    "unquote": ",",
    "unquote-splicing": ",@",
}

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "0": "\0", "\\": "\\", '"': '"'}


def unescape(text: str) -> str:
    """Resolve backslash escapes kept verbatim by the reader."""
    if "\\" not in text:
        return text
    out = StringIO()
    i = 0
    while i < len(text):
        c = text[i]
        if c == "\\" and i + 1 < len(text) and text[i + 1] in _ESCAPES:
            out.write(_ESCAPES[text[i + 1]])
            i += 2
            continue
        out.write(c)
        i += 1
    return out.getvalue()


def _write_atom(x: SExpression, readable: bool, buffer: StringIO) -> None:
    if x is Void or x is Undefined:
        return
    if isinstance(x, bool):
        buffer.write("#t" if x else "#f")
    elif is_number(x):
        buffer.write(format_number(x))
    elif isinstance(x, str):
        buffer.write(f'"{x}"' if readable else x)
    elif isinstance(x, Char):
        buffer.write(f"#\\{x.value}" if readable else x.value)
    elif isinstance(x, Symbol):
        buffer.write(x.name)
    elif isinstance(x, Procedure):
        buffer.write(repr(x))
    elif isinstance(x, Environment):
        buffer.write("#<environment>")
    else:
        buffer.write(str(x))


def _write(x: SExpression, readable: bool, buffer: StringIO) -> None:
    if isinstance(x, NullType):
        buffer.write("()")
    elif isinstance(x, Vector):
        buffer.write("#(")
        for i, item in enumerate(x):
            if i:
                buffer.write(" ")
            _write(item, readable, buffer)
        buffer.write(")")
    elif isinstance(x, Pair):
        head, tail = x.head, x.tail
        if (
            isinstance(head, Symbol)
            and head.name in QUOTE_PREFIXES
            and isinstance(tail, Pair)
            and isinstance(tail.tail, NullType)
        ):
            buffer.write(QUOTE_PREFIXES[head.name])
            _write(tail.head, readable, buffer)
            return
        buffer.write("(")
        _write(head, readable, buffer)
        while isinstance(tail, Pair):
            buffer.write(" ")
            _write(tail.head, readable, buffer)
            tail = tail.tail
        if not isinstance(tail, NullType):
            buffer.write(" . ")
            _write(tail, readable, buffer)
        buffer.write(")")
    else:
        _write_atom(x, readable, buffer)


def to_display(x: SExpression) -> str:
    with StringIO() as buffer:
        _write(x, False, buffer)
        return buffer.getvalue()


def to_write(x: SExpression) -> str:
    with StringIO() as buffer:
        _write(x, True, buffer)
        return buffer.getvalue()
