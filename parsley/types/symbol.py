from __future__ import annotations
import sys

SYMBOL_PUNCTUATION = frozenset("-_?!*+/=<>")


def is_symbol_char(c: str) -> bool:
    return c.isalnum() or c in SYMBOL_PUNCTUATION


def is_symbol_text(text: str) -> bool:
    return bool(text) and all(is_symbol_char(c) for c in text)


class Symbol:
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = sys.intern(name)

    def __eq__(self, other) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("symbol", self.name))

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
