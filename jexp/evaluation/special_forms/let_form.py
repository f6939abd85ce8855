from collections.abc import Mapping

from jexp import EvaluatorFn, JValue
from jexp.config import EvalOptions
from jexp.types.bind import bind_frame
from jexp.types.environment import Environment
from jexp.types.errors import MalformedForm


def let_form(
    form: Mapping,
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
) -> JValue:
    # {"let": {name: expr, ...}, "in": body}
    if "in" not in form:
        raise MalformedForm('Missing "in" property in a "let" form')
    new_env = bind_frame(form["let"], env, options, evaluate_fn)
    return evaluate_fn(form["in"], new_env, options)
