from __future__ import annotations

from typing import Callable, Optional, Union

from parsley.errors import ParsleyArityError, ParsleyArityMaxError, ParsleyArityMinError
from parsley.types.environment import Environment


class Arity:
    """Accepted argument counts: min..max inclusive, max None for variadic."""

    __slots__ = ("min", "max")

    def __init__(self, min: int, max: Optional[int]):
        self.min = min
        self.max = max

    @classmethod
    def exact(cls, n: int) -> Arity:
        return cls(n, n)

    @classmethod
    def at_least(cls, n: int) -> Arity:
        return cls(n, None)

    @classmethod
    def between(cls, lo: int, hi: int) -> Arity:
        return cls(lo, hi)

    @classmethod
    def coerce(cls, spec: Union[Arity, int, tuple]) -> Arity:
        """Accept an Arity, an exact count, `(n,)` for at-least or `(lo, hi)`."""
        if isinstance(spec, Arity):
            return spec
        if isinstance(spec, int):
            return cls.exact(spec)
        if len(spec) == 1:
            return cls.at_least(spec[0])
        return cls.between(spec[0], spec[1])

    def accepts(self, given: int) -> bool:
        return given >= self.min and (self.max is None or given <= self.max)

    def check(self, given: int) -> None:
        if given < self.min:
            if self.max == self.min:
                raise ParsleyArityError(self.min, given)
            raise ParsleyArityMinError(self.min, given)
        if self.max is not None and given > self.max:
            if self.max == self.min:
                raise ParsleyArityError(self.max, given)
            raise ParsleyArityMaxError(self.max, given)

    @property
    def is_thunk(self) -> bool:
        return self.min == 0 and self.max == 0

    def __eq__(self, other) -> bool:
        return isinstance(other, Arity) and (self.min, self.max) == (other.min, other.max)

    def __hash__(self) -> int:
        return hash((self.min, self.max))

    def __repr__(self):
        return f"Arity({self.min}, {self.max})"


class Procedure:
    """A callable value.

    Pure procedures are invoked as `func(args)`. Context-aware ones receive the
    evaluation context too: `func(args, ctx)`. Special procedures receive their
    argument expressions unevaluated. `env` holds the bindings captured by a
    closure and is installed as an overlay for the duration of each call.
    """

    __slots__ = ("func", "arity", "name", "env", "ctx_aware", "special")

    def __init__(
        self,
        func: Callable,
        arity: Union[Arity, int, tuple],
        name: Optional[str] = None,
        env: Optional[Environment] = None,
        *,
        ctx_aware: bool = False,
        special: bool = False,
    ):
        self.func = func
        self.arity = Arity.coerce(arity)
        self.name = name
        self.env = env
        self.ctx_aware = ctx_aware or special
        self.special = special

    def with_name(self, name: str) -> Procedure:
        return Procedure(
            self.func, self.arity, name, self.env, ctx_aware=self.ctx_aware, special=self.special
        )

    def __repr__(self):
        if self.name:
            return f"#<procedure:{self.name}>"
        return "#<procedure>"

    __str__ = __repr__
