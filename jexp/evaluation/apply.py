"""Application engine for JExp.

Centralizes how bound values are invoked so that the generic call path, the
`apply` special form and host code calling a Closure share one semantics:
- Closures bind their parameters positionally over the captured environment
  and evaluate their body there.
- Python callables (Function-tagged or bare) receive evaluated arguments
  positionally.
- Macros are never applied to evaluated arguments; they expand via
  `expand_macro` with the whole form and the raw operands.
"""

from __future__ import annotations

import logging

from jexp import JExp, JValue, EvaluatorFn
from jexp.types.bind import bind_arguments
from jexp.types.binding import Macro
from jexp.types.closure import Closure
from jexp.types.errors import NotCallable

logger = logging.getLogger(__name__)


def promote_list(operands: JExp) -> list[JExp]:
    """Coerce an operand spec to a list: a single operand becomes [operand]."""
    if isinstance(operands, (list, tuple)):
        return list(operands)
    return [operands]


def apply_closure(
    fn: Closure, args: list[JValue], evaluate_fn: EvaluatorFn | None = None
) -> JValue:
    """Apply a Closure to already-evaluated arguments."""
    if evaluate_fn is None:
        from jexp.evaluation.evaluator import evaluate0 as evaluate_fn
    new_env = bind_arguments(fn.params, args, fn.env)
    logger.debug("apply closure %s to %r", fn, args)
    return evaluate_fn(fn.body, new_env, fn.options)


def apply(
    head: JValue,
    args: list[JValue],
    evaluate_fn: EvaluatorFn | None = None,
    name: str | None = None,
) -> JValue:
    """Apply either a Closure or a Python callable.

    Raises NotCallable for macros and for values that cannot be invoked.
    """
    label = name if name is not None else repr(head)
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    if isinstance(head, Macro):
        raise NotCallable(f"Macro {label} cannot be applied to evaluated arguments")
    if callable(head):
        return head(*args)
    raise NotCallable(f"Symbol {label} is not a function")


def expand_macro(macro: Macro, form: JExp, operands: list[JExp]) -> JExp:
    """Run a macro transformer; the expansion is returned unevaluated."""
    expansion = macro(form, *operands)
    logger.debug("expand %r -> %r", form, expansion)
    return expansion
