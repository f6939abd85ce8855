"""Core evaluator for JExp.

Classifies an expression by shape, dispatches mappings through the special
form table, and falls back to the generic call protocol (function call or
macro expansion) for every other mapping.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from jexp import JExp, JValue
from jexp.builtin import standard_environment
from jexp.config import EvalOptions
from jexp.evaluation.apply import apply, expand_macro, promote_list
from jexp.evaluation.special_forms import match_special_form
from jexp.types.binding import Macro, is_macro_name, make_frame
from jexp.types.environment import Environment
from jexp.types.errors import (
    AmbiguousForm,
    NotCallable,
    UndefinedFunction,
    UndefinedMacro,
)

logger = logging.getLogger(__name__)

Frames = Mapping[str, JValue] | Iterable[Mapping[str, JValue]]


def evaluate(
    expr: JExp,
    initial_environment: Frames | None = None,
    *,
    strict_cond: bool | None = None,
) -> JValue:
    """
    Evaluate `expr` against the standard bindings.

    `initial_environment` holds extra host frames, nearest first, placed in
    front of the standard bindings. A single mapping counts as one frame.
    `strict_cond` overrides the JEXP_STRICT_COND setting.
    """
    env = build_environment(initial_environment)
    return evaluate0(expr, env, EvalOptions.from_env(strict_cond))


def build_environment(
    frames: Frames | None = None, outer: Environment | None = None
) -> Environment:
    """Chain host frames (callables tagged) in front of `outer`."""
    root = outer if outer is not None else standard_environment()
    if frames is None:
        return root
    if isinstance(frames, Mapping):
        frames = [frames]
    return Environment.from_frames([make_frame(f) for f in frames], root)


def evaluate0(
    expr: JExp,
    env: Environment,
    options: EvalOptions | None = None,
) -> JValue:
    """
    Single recursive evaluation step.

    Shape priority: text is a symbol, a sequence is evaluated element-wise,
    other non-mappings evaluate to themselves, a mapping is a form.
    """
    if options is None:
        options = EvalOptions()

    match expr:
        case str():
            return env.lookup(expr)
        case list() | tuple():
            return [evaluate0(item, env, options) for item in expr]
        case Mapping():
            handler = match_special_form(expr)
            if handler is not None:
                logger.debug("special form %s", handler.__name__)
                return handler(expr, env, options, evaluate0)
            return call_form(expr, env, options)

    # --- Atoms return as-is ---
    return expr


def choose_key(form: Mapping) -> str:
    """Pick the operator identifier of a generic call form.

    A single key is the operator. With several keys the first sigil-prefixed
    one is the operator and the rest are auxiliary literal keys for it.
    """
    keys = list(form)
    if len(keys) == 1:
        return keys[0]
    for key in keys:
        if is_macro_name(key):
            return key
    raise AmbiguousForm(f"Cannot identify the symbol in form {{{', '.join(map(str, keys))}}}")


def call_form(form: Mapping, env: Environment, options: EvalOptions) -> JValue:
    """Function call or macro expansion for `{operator: operands}`."""
    ident = choose_key(form)

    owner = env.find(ident)
    if owner is None:
        if is_macro_name(ident):
            raise UndefinedMacro(f"Undefined macro {ident}")
        raise UndefinedFunction(f"Undefined function {ident}")

    head = owner.vars[ident]
    operands = promote_list(form[ident])
    logger.debug(
        "call %s (%s) with %d operand(s)",
        ident, getattr(head, "kind", type(head).__name__), len(operands),
    )

    if isinstance(head, Macro):
        expansion = expand_macro(head, form, operands)
        return evaluate0(expansion, env, options)

    if not callable(head):
        raise NotCallable(f"Symbol {ident} is not a function")

    args = [evaluate0(operand, env, options) for operand in operands]
    return apply(head, args, evaluate0, name=ident)
