from collections.abc import Mapping

from jexp import EvaluatorFn, JValue
from jexp.config import EvalOptions
from jexp.evaluation.apply import apply as apply_engine, promote_list
from jexp.types.environment import Environment
from jexp.types.errors import MalformedForm


def apply_form(
    form: Mapping,
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
) -> JValue:
    """
    {"apply": callee, "args": [expr, ...]}

    Unlike the generic call, the callee is an arbitrary expression (a lambda
    form, a symbol, ...) evaluated before the arguments. Delegates to the
    central application engine.
    """
    if "args" not in form:
        raise MalformedForm('Missing "args" property in an "apply" form')

    fn_val = evaluate_fn(form["apply"], env, options)
    args = [evaluate_fn(arg, env, options) for arg in promote_list(form["args"])]
    return apply_engine(fn_val, args, evaluate_fn, name=repr(form["apply"]))
