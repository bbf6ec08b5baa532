from __future__ import annotations


class NullType:
    """The empty list. Exactly one instance exists."""

    _instance: NullType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "()"
    def __bool__(self): return False
    def __iter__(self): return iter(())
    def __len__(self): return 0

    def __eq__(self, other):
        return isinstance(other, NullType)

    def __hash__(self):
        return hash(())


class _Marker:
    """Printable-as-nothing singleton values (void and undefined)."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"#<{self.name}>"

    def __str__(self):
        return ""


Null = NullType()
# Result of `(void)`
Void = _Marker("void")
# Result of define/set!/display and friends; also the value of `(define x)`
Undefined = _Marker("undefined")
