"""Command-line driver: run a file, run stdin, or start a REPL."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, TextIO

from parsley import __version__
from parsley.context import Context
from parsley.errors import ParsleyError
from parsley.printer import to_write

PROMPT = "> "

WELCOME = f"""Parsley {__version__}
Type .help for interpreter commands, .exit to quit.
"""

HELP = """Interpreter commands:
  .help   show this message
  .clear  leave the innermost scope
  .exit   quit the interpreter
"""


def make_context() -> Context:
    return Context.base().math()


def run_source(ctx: Context, source: str, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> bool:
    """Evaluate `source`, print a non-empty result to `out` or the error to `err`."""
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        result = ctx.run(source)
    except ParsleyError as e:
        print(e, file=err)
        return False
    text = to_write(result)
    if text:
        print(text, file=out)
    return True


def repl(
    ctx: Context,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> None:
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    err = err or sys.stderr
    out.write(WELCOME)
    while True:
        out.write(PROMPT)
        out.flush()
        line = stdin.readline()
        if not line:
            out.write("\n")
            return
        line = line.strip()
        if not line:
            continue
        if line == ".exit":
            return
        if line == ".help":
            out.write(HELP)
        elif line == ".clear":
            ctx.pop()
        else:
            run_source(ctx, line, out, err)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="parsley", description="A small Scheme interpreter")
    parser.add_argument("file", nargs="?", type=Path, help="Source file to evaluate")
    parser.add_argument("-s", "--stdin", action="store_true", help="Read the program from standard input")
    parser.add_argument("-i", "--interactive", action="store_true", help="Start the interactive interpreter")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    ctx = make_context()
    if args.stdin:
        return 0 if run_source(ctx, sys.stdin.read()) else 1
    if args.file is not None:
        try:
            source = args.file.read_text(encoding="utf-8")
        except OSError as e:
            print(f"I/O error: {args.file}: {e.strerror or e}", file=sys.stderr)
            return 1
        ok = run_source(ctx, source)
        if not args.interactive:
            return 0 if ok else 1
    repl(ctx)
    return 0


if __name__ == "__main__":
    sys.exit(main())
