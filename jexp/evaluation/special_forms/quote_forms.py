from collections.abc import Mapping

from jexp import JExp, JValue, EvaluatorFn
from jexp.config import EvalOptions
from jexp.types.environment import Environment

QUOTE = "$"
QUASIQUOTE = "_$"
UNQUOTE = "$_"


def eval_quasiquote(
    expr: JExp,
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
) -> JValue:
    """Rebuild `expr` as data, evaluating only the `$_` escapes."""
    if isinstance(expr, (list, tuple)):
        return [eval_quasiquote(item, env, options, evaluate_fn) for item in expr]

    if not isinstance(expr, Mapping):
        return expr

    if UNQUOTE in expr:
        return evaluate_fn(expr[UNQUOTE], env, options)

    return {
        key: eval_quasiquote(value, env, options, evaluate_fn)
        for key, value in expr.items()
    }


def quote_form(
    form: Mapping, env: Environment, options: EvalOptions, evaluate_fn: EvaluatorFn
) -> JValue:
    return form[QUOTE]


def quasiquote_form(
    form: Mapping, env: Environment, options: EvalOptions, evaluate_fn: EvaluatorFn
) -> JValue:
    return eval_quasiquote(form[QUASIQUOTE], env, options, evaluate_fn)
