from collections.abc import Mapping

from jexp import EvaluatorFn, JValue
from jexp.config import EvalOptions
from jexp.evaluation.apply import promote_list
from jexp.types.closure import Closure
from jexp.types.environment import Environment
from jexp.types.errors import MalformedForm


def lambda_form(
    form: Mapping,
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
) -> JValue:
    # {"lambda": "x" | ["x", "y"], "body": expr}
    if "body" not in form:
        raise MalformedForm('Missing "body" property in a "lambda" form')

    params = promote_list(form["lambda"])
    for name in params:
        if not isinstance(name, str):
            raise MalformedForm(f"Lambda parameter names must be strings, got {name!r}")

    return Closure(params, form["body"], env, options)
