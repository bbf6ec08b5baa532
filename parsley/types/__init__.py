from parsley.types.char import Char
from parsley.types.environment import Environment
from parsley.types.null import Null, NullType, Undefined, Void
from parsley.types.pair import Pair, cons, from_iterable, iterate, sexp_list
from parsley.types.procedure import Arity, Procedure
from parsley.types.symbol import Symbol
from parsley.types.vector import Vector

__all__ = [
    "Arity",
    "Char",
    "Environment",
    "Null",
    "NullType",
    "Pair",
    "Procedure",
    "Symbol",
    "Undefined",
    "Vector",
    "Void",
    "cons",
    "from_iterable",
    "iterate",
    "sexp_list",
]
