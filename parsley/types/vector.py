from __future__ import annotations


class Vector(list):
    """A fixed sequence of values, written `#(a b c)`."""

    def __eq__(self, other) -> bool:
        from parsley.types.sexp import sexp_equal
        return sexp_equal(self, other)

    def __ne__(self, other) -> bool:
        return not self == other

    __hash__ = None

    def copy(self) -> Vector:
        return Vector(self)

    def __repr__(self):
        from parsley.printer import to_write
        return to_write(self)

    def __str__(self):
        from parsley.printer import to_display
        return to_display(self)
