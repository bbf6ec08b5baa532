# Core type aliases for Parsley's data model.
# Leaf values are plain Python objects where one fits (bool, int, float, str)
# and small dedicated types where Scheme needs a distinct identity
# (Null, Symbol, Char, Pair, Vector, Procedure, Environment).
#
# Naming guidance:
# - SExpression: Use in reader/printer code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any

# Runtime value alias
LispValue = Any
# Forms alias (code and data share one representation)
SExpression = LispValue

__version__ = "0.4.0"

from parsley.context import Context  # noqa: E402

__all__ = ["Context", "LispValue", "SExpression", "__version__"]
