"""Registry of special forms for the Parsley evaluator.

Maps names to (handler, arity). Each entry becomes a special procedure in a
context's core namespace: it receives its argument forms unevaluated.
"""

from parsley.evaluation.special_forms.apply_form import apply_form
from parsley.evaluation.special_forms.begin_form import begin_form
from parsley.evaluation.special_forms.cond_forms import case_form, cond_form
from parsley.evaluation.special_forms.define_form import define_form
from parsley.evaluation.special_forms.do_loop_form import do_loop_form
from parsley.evaluation.special_forms.eval_form import eval_form
from parsley.evaluation.special_forms.if_form import if_form
from parsley.evaluation.special_forms.lambda_form import lambda_form, named_lambda_form
from parsley.evaluation.special_forms.let_form import let_form
from parsley.evaluation.special_forms.logic_forms import and_form, or_form
from parsley.evaluation.special_forms.quote_forms import (
    quasiquote_form,
    quote_form,
    unquote_form,
    unquote_splice_form,
)
from parsley.evaluation.special_forms.set_form import set_form

SPECIAL_FORMS = {
    "eval": (eval_form, 1),
    "apply": (apply_form, 2),
    "and": (and_form, (0,)),
    "or": (or_form, (0,)),
    "begin": (begin_form, (0,)),
    "case": (case_form, (1,)),
    "cond": (cond_form, (0,)),
    "define": (define_form, (1,)),
    "if": (if_form, 3),
    "lambda": (lambda_form, (2,)),
    "named-lambda": (named_lambda_form, (2,)),
    "let": (let_form, (2,)),
    "do": (do_loop_form, (2,)),
    "set!": (set_form, 2),
    "quote": (quote_form, 1),
    "quasiquote": (quasiquote_form, 1),
    "unquote": (unquote_form, 1),
    "unquote-splicing": (unquote_splice_form, 1),
}
