from collections.abc import Mapping

from jexp import EvaluatorFn, JValue
from jexp.config import EvalOptions
from jexp.types.environment import Environment
from jexp.types.errors import MalformedForm
from jexp.types.undefined import Undefined


def is_truthy(value: JValue) -> bool:
    # Undefined, None, False, 0 and empty strings/containers are false
    return bool(value)


def cond_form(
    form: Mapping,
    env: Environment,
    options: EvalOptions,
    evaluate_fn: EvaluatorFn,
) -> JValue:
    """
    {"cond": [{"if": test, "then": expr}, ..., {"else": expr}]}

    Clauses are tried left to right. An `else` clause returns at once; an `if`
    clause returns its `then` when the test is truthy. Without a match the
    result is Undefined, unless strict cond is enabled.
    """
    clauses = form["cond"]
    if not isinstance(clauses, (list, tuple)):
        raise MalformedForm(f'"cond" expects a list of clauses, got {clauses!r}')

    for clause in clauses:
        if not isinstance(clause, Mapping):
            raise MalformedForm(f"cond clause must be a mapping, got {clause!r}")
        if "else" in clause:
            return evaluate_fn(clause["else"], env, options)
        if "if" not in clause:
            raise MalformedForm(f'cond clause needs an "if" or "else" key, got {list(clause)}')
        if is_truthy(evaluate_fn(clause["if"], env, options)):
            return evaluate_fn(clause.get("then", Undefined), env, options)

    if options.strict_cond:
        raise MalformedForm('No "cond" clause matched and there is no "else" clause')
    return Undefined
