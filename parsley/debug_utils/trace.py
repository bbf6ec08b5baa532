"""Call tracing, enabled with PARSLEY_TRACE=1.

Output goes to stderr so that it never mixes with program output.
"""

from __future__ import annotations

import sys

from parsley.printer import to_write

_INDENT = "  "


def enter(proc, args, depth: int) -> None:
    rendered = " ".join(to_write(a) for a in args)
    print(f"{_INDENT * depth}-> {proc!r} {rendered}".rstrip(), file=sys.stderr)


def leave(proc, result, depth: int) -> None:
    print(f"{_INDENT * depth}<- {proc!r} = {to_write(result)}", file=sys.stderr)
