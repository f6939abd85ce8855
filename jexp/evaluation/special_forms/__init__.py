"""Registry of special forms for the JExp evaluator.

An ordered table of reserved keys and the handlers implementing their
evaluation rules. The evaluator tries the keys in this order and the first
one present in a mapping selects the form; when none is present the mapping
is a generic call.
"""

from collections.abc import Mapping
from typing import Callable

from jexp.evaluation.special_forms.quote_forms import quote_form, quasiquote_form, QUOTE, QUASIQUOTE
from jexp.evaluation.special_forms.let_form import let_form
from jexp.evaluation.special_forms.lambda_form import lambda_form
from jexp.evaluation.special_forms.cond_form import cond_form
from jexp.evaluation.special_forms.apply_form import apply_form

SPECIAL_FORMS: tuple[tuple[str, Callable], ...] = (
    (QUOTE, quote_form),
    (QUASIQUOTE, quasiquote_form),
    ("let", let_form),
    ("lambda", lambda_form),
    ("cond", cond_form),
    ("apply", apply_form),
)


def match_special_form(form: Mapping) -> Callable | None:
    """Return the handler for the first reserved key in `form`, else None."""
    for key, handler in SPECIAL_FORMS:
        if key in form:
            return handler
    return None
