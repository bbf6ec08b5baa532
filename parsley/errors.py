"""Error taxonomy for Parsley.

Every failure raised by the reader, the evaluator or a builtin is a
ParsleyError subclass; `str(error)` is the one-sentence message shown to users.
"""

from __future__ import annotations

from enum import Enum


class SyntaxErrorKind(Enum):
    UNMATCHED_PAREN = "unmatched paren"
    UNMATCHED_QUOTE = "unmatched quote"
    INVALID_COND = "invalid cond clause"
    NOT_A_NUMBER = "not a number"
    NOT_A_PRIMITIVE = "not a primitive"
    NOT_A_TOKEN = "not a token"


class ParsleyError(Exception):
    """ Base class for all Parsley errors"""
    pass


class ParsleySyntaxError(ParsleyError):
    """ Raised when source text (or a special form) cannot be parsed"""

    def __init__(self, kind: SyntaxErrorKind, exp: str):
        super().__init__(f"Could not parse expression: {exp}")
        self.kind = kind
        self.exp = exp


class ParsleyTypeError(ParsleyError):
    """ Raised when a value of the wrong type is passed to a procedure"""

    def __init__(self, expected: str, given: str):
        super().__init__(f"Type error: expected {expected}, got {given}")
        self.expected = expected
        self.given = given


class ParsleyUndefinedSymbol(ParsleyError):
    """ Raised when a symbol is used (or set!) before it is bound"""

    def __init__(self, sym: str):
        super().__init__(f"Undefined symbol: {sym}")
        self.sym = sym


class ParsleyArityError(ParsleyError):
    """ Raised when a procedure receives the wrong number of arguments"""

    qualifier = ""

    def __init__(self, expected: int, given: int):
        super().__init__(
            f"Arity mismatch: expected {self.qualifier}{expected} parameters, got {given}."
        )
        self.expected = expected
        self.given = given


class ParsleyArityMinError(ParsleyArityError):
    """ Raised when a procedure receives fewer arguments than its minimum"""

    qualifier = "at least "


class ParsleyArityMaxError(ParsleyArityError):
    """ Raised when a procedure receives more arguments than its maximum"""

    qualifier = "at most "


class ParsleyNotAList(ParsleyError):
    """ Raised when a pair operation is applied to an atom or a vector"""

    def __init__(self, atom: str):
        super().__init__(f"Expected a list, got {atom}")
        self.atom = atom


class ParsleyNullList(ParsleyError):
    """ Raised when a pair operation is applied to the empty list"""

    def __init__(self):
        super().__init__("Expected a pair, got null.")


class ParsleyNotAProcedure(ParsleyError):
    """ Raised when the head of an application is not callable"""

    def __init__(self, exp: str):
        super().__init__(f"{exp} is not a procedure.")
        self.exp = exp


class ParsleyIndexError(ParsleyError):
    """ Raised when a vector is accessed out of bounds"""

    def __init__(self, i: int):
        super().__init__(f"Tried to access invalid index: [{i}]")
        self.i = i


class ParsleyIOError(ParsleyError):
    """ Raised when output or file reading fails"""

    def __init__(self, message: str):
        super().__init__(f"I/O error: {message}")
        self.message = message


class ParsleyRecursionError(ParsleyError):
    """ Raised when evaluation nests deeper than the host stack allows"""

    def __init__(self):
        super().__init__("Recursion too deep: maximum evaluation depth exceeded.")
