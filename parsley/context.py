"""Evaluation context: namespaces, scope stack and output sink.

Symbol lookup consults, in order: the core namespace (special forms), the
overlay of the closure currently running, the user scope chain, and the lang
namespace (builtin library). Definitions always go to the innermost user scope.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from io import StringIO
from typing import Callable, Iterable, Iterator, Optional, Union

from parsley import SExpression, LispValue, config
from parsley.errors import ParsleyIOError, ParsleyRecursionError, ParsleyUndefinedSymbol
from parsley.evaluation.apply import apply_procedure
from parsley.evaluation.evaluator import evaluate
from parsley.evaluation.special_forms import SPECIAL_FORMS
from parsley.reader.parser import parse
from parsley.types.environment import Environment
from parsley.types.pair import from_iterable
from parsley.types.procedure import Arity, Procedure


class Context:
    """
    Holds every piece of interpreter state. Two contexts never share bindings.
    """

    def __init__(self):
        self.core: Environment = Environment()
        for name, (handler, arity) in SPECIAL_FORMS.items():
            self.core.define(name, Procedure(handler, arity, name, special=True))
        self.lang: Environment = Environment()
        self.user: Environment = Environment()
        self._overlays: list[tuple[Environment, Environment]] = []
        self._out: Optional[StringIO] = None
        self._active = 0
        self.tracing = config.trace_enabled()
        self.call_depth = 0

    @classmethod
    def default(cls) -> Context:
        """A context with only the core special forms."""
        return cls()

    @classmethod
    def base(cls) -> Context:
        """A context with the base library (lists, numbers, vectors, I/O)."""
        from parsley.builtin import env_builtin, vector_builtin

        ctx = cls()
        env_builtin.register(ctx)
        vector_builtin.register(ctx)
        return ctx

    def math(self) -> Context:
        """Add the math library and return self."""
        from parsley.builtin import math_builtin

        math_builtin.register(self)
        return self

    # Bindings

    def _owner(self, name: str) -> Optional[dict]:
        """The frame holding the visible user binding of `name`, if any.

        While a closure runs, scopes it pushed shadow its snapshot, and the
        snapshot shadows the scopes of its caller.
        """
        if not self._overlays:
            env = self.user.find(name)
            return env.vars if env is not None else None
        overlay, base = self._overlays[-1]
        env = self.user.find(name, stop=base)
        if env is not None:
            return env.vars
        if name in overlay.vars:
            return overlay.vars
        env = base.find(name)
        return env.vars if env is not None else None

    def get(self, name: str) -> Optional[LispValue]:
        if name in self.core.vars:
            return self.core.vars[name]
        frame = self._owner(name)
        if frame is not None:
            return frame[name]
        return self.lang.vars.get(name)

    def define(self, name: str, value: LispValue) -> None:
        self.user.define(name, value)

    def set(self, name: str, value: LispValue) -> None:
        """Rebind an existing name.

        A local of the running closure is updated where it lives. A name
        captured by the closure is updated in its snapshot as well as in the
        user scope chain, wherever either binding exists.
        """
        if not self._overlays:
            self.user.set(name, value)
            return
        overlay, base = self._overlays[-1]
        env = self.user.find(name, stop=base)
        if env is not None:
            env.vars[name] = value
            return
        found = False
        if name in overlay.vars:
            overlay.vars[name] = value
            found = True
        env = base.find(name)
        if env is not None:
            env.vars[name] = value
            found = True
        if not found:
            raise ParsleyUndefinedSymbol(name)

    def define_lang(self, name: str, value: LispValue) -> None:
        self.lang.define(name, value)

    def define_builtin(
        self,
        name: str,
        fn: Callable,
        arity: Union[Arity, int, tuple],
        ctx_aware: bool = False,
        special: bool = False,
    ) -> Procedure:
        proc = Procedure(fn, arity, name, ctx_aware=ctx_aware, special=special)
        self.lang.define(name, proc)
        return proc

    # Scopes

    def push(self) -> None:
        self.user = Environment(outer=self.user)

    def pop(self) -> None:
        """Leave the innermost scope; popping the root yields a fresh empty scope."""
        self.user = self.user.outer or Environment()

    def push_overlay(self, env: Environment) -> None:
        self._overlays.append((env, self.user))

    def pop_overlay(self) -> None:
        self._overlays.pop()

    def close(self, names: Iterable[str]) -> Environment:
        """Snapshot the values currently visible for `names` outside core and lang."""
        snapshot = Environment()
        for name in names:
            frame = self._owner(name)
            if frame is not None:
                snapshot.vars[name] = frame[name]
        return snapshot

    # Evaluation

    @contextmanager
    def _evaluating(self) -> Iterator[None]:
        if self._active:
            self._active += 1
            try:
                yield
            finally:
                self._active -= 1
            return
        limit = sys.getrecursionlimit()
        sys.setrecursionlimit(max(limit, config.get_recursion_limit()))
        self._active = 1
        try:
            yield
        except RecursionError:
            raise ParsleyRecursionError() from None
        finally:
            self._active = 0
            sys.setrecursionlimit(limit)

    def eval(self, expr: SExpression) -> LispValue:
        with self._evaluating():
            return evaluate(expr, self)

    def run(self, source: str) -> LispValue:
        """Parse and evaluate a whole program."""
        with self._evaluating():
            return evaluate(parse(source), self)

    def apply(self, proc: LispValue, args: Iterable[LispValue]) -> LispValue:
        """Call `proc` with already evaluated `args`.

        A non-procedure is returned as the application list (proc . args),
        or as itself when there are no arguments.
        """
        args = list(args)
        if not isinstance(proc, Procedure):
            return proc if not args else from_iterable([proc, *args])
        with self._evaluating():
            return apply_procedure(proc, args, self)

    # Output

    def capture(self) -> Context:
        """Start collecting display/write output in a buffer instead of stdout."""
        self._out = StringIO()
        return self

    def get_output(self) -> Optional[str]:
        """Return the captured output and stop capturing (None if not capturing)."""
        if self._out is None:
            return None
        text = self._out.getvalue()
        self._out = None
        return text

    def write(self, text: str) -> None:
        try:
            if self._out is not None:
                self._out.write(text)
            else:
                sys.stdout.write(text)
        except OSError as e:
            raise ParsleyIOError(str(e)) from e
