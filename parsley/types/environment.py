"""Runtime environment for Parsley.

An Environment stores bindings of symbol names to evaluated values and supports
nested scopes via an `outer` link.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from parsley import LispValue
from parsley.errors import ParsleyUndefinedSymbol


class Environment:
    """Hierarchical mapping from symbol names to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None, bindings: Optional[dict] = None):
        self.vars: dict[str, LispValue] = dict(bindings) if bindings else {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding."""
        self.vars[name] = value

    def find(self, name: str, stop: Optional[Environment] = None) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`.

        The walk ends before `stop` when it is given.
        """
        env: Optional[Environment] = self
        while env is not None and env is not stop:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: str, default: LispValue = None) -> LispValue:
        env = self.find(name)
        if env is None:
            return default
        return env.vars[name]

    def set(self, name: str, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises ParsleyUndefinedSymbol if the name is not bound anywhere.
        """
        env = self.find(name)
        if env is None:
            raise ParsleyUndefinedSymbol(name)
        env.vars[name] = value

    def close(self, names: Iterable[str]) -> Environment:
        """Flat snapshot of the values currently visible for `names`."""
        snapshot = Environment()
        for name in names:
            env = self.find(name)
            if env is not None:
                snapshot.vars[name] = env.vars[name]
        return snapshot

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def __len__(self) -> int:
        return len(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            first = True
            while env is not None:
                if not first:
                    buffer.write(" -> ")
                env._write_vars(buffer)
                first = False
                env = env.outer
            buffer.write(">")
            return buffer.getvalue()
