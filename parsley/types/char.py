from __future__ import annotations


class Char:
    """A single character, written `#\\c` in source."""

    __slots__ = ("value",)

    def __init__(self, value: str):
        if len(value) != 1:
            raise ValueError(f"Char expects a single character, got {value!r}")
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, Char) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("char", self.value))

    def __repr__(self):
        return f"#\\{self.value}"

    def __str__(self):
        return self.value
