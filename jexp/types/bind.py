from __future__ import annotations

from typing import List, Mapping

from jexp import JExp, JValue, EvaluatorFn
from jexp.config import EvalOptions
from jexp.types.binding import tag_binding
from jexp.types.environment import Environment
from jexp.types.errors import MalformedForm
from jexp.types.undefined import Undefined


def bind_arguments(
    params: List[str],
    supplied_args: List[JValue],
    closure_env: Environment,
) -> Environment:
    """
    Positional binding for closure application.

    Each parameter takes the argument at the same position; parameters with
    no argument are bound to Undefined and surplus arguments are ignored.
    Returns a new Environment whose outer is the closure_env.
    """
    frame: dict[str, JValue] = {}
    for i, name in enumerate(params):
        value = supplied_args[i] if i < len(supplied_args) else Undefined
        frame[name] = tag_binding(name, value)
    return closure_env.extend(frame)


def bind_frame(
    bindings: Mapping[str, JExp],
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
) -> Environment:
    """
    Evaluate a mapping of name -> expression into one new frame.

    The frame is prepended before any value is evaluated, so bindings may
    refer to earlier siblings and to themselves (recursive lambdas). Values
    are stored in mapping-iteration order. Returns the extended chain.
    """
    if not isinstance(bindings, Mapping):
        raise MalformedForm(f"Bindings must be a mapping, got {bindings!r}")
    frame: dict[str, JValue] = {}
    new_env = env.extend(frame)
    for name, expr in bindings.items():
        frame[name] = tag_binding(name, evaluate_fn(expr, new_env, options))
    return new_env
