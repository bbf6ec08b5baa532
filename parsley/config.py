from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Defaults
_DEFAULT_REQUIRE_DIRS: list[Path] = []
_DEFAULT_RECURSION_LIMIT = 10_000


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def flag_from_env(var: str) -> bool:
    raw = os.environ.get(var, "").strip().lower()
    return raw not in ("", "0", "false", "no", "off")


def get_require_roots() -> List[Path]:
    """Directories searched by `require` after the current directory."""
    return paths_from_env('PARSLEY_PATH', _DEFAULT_REQUIRE_DIRS)


def trace_enabled() -> bool:
    return flag_from_env('PARSLEY_TRACE')


def get_recursion_limit() -> int:
    raw = os.environ.get('PARSLEY_RECURSION_LIMIT')
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        return max(int(raw), 1000)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT
