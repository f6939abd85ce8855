"""Builtin macro transformers for JExp (implemented in Python).

Each transformer receives the whole form followed by the unevaluated
operands and returns an expression, which the evaluator then evaluates in
the caller's environment.
"""

from collections.abc import Mapping

from jexp import JExp
from jexp.types.errors import JExpArityError, JExpTypeError
from jexp.types.undefined import Undefined


def get_macro(form: Mapping, dotexpr: JExp = Undefined, *rest: JExp) -> JExp:
    """
    {"$get": "user.address.city"}
    => {"get": ["user", {"$": "address"}, {"$": "city"}]}
    """
    if rest:
        raise JExpArityError("$get takes a single dotted path")
    if not isinstance(dotexpr, str):
        raise JExpTypeError(f"$get expects a dotted path string, got {dotexpr!r}")
    head, *path = dotexpr.split(".")
    return {"get": [head, *({"$": key} for key in path)]}


def if_macro(form: Mapping, condition: JExp = Undefined, *rest: JExp) -> JExp:
    """
    {"$if": test, "then": a, "else": b}
    => {"cond": [{"if": test, "then": a}, {"else": b}]}

    `then` and `else` are auxiliary keys of the enclosing form; a missing one
    yields Undefined.
    """
    if rest:
        raise JExpArityError("$if takes a single condition")
    return {
        "cond": [
            {"if": condition, "then": form.get("then", Undefined)},
            {"else": form.get("else", Undefined)},
        ]
    }


def omit_macro(form: Mapping, *operands: JExp) -> JExp:
    """
    {"$omit": [["a", "b"], obj]}
    => {"apply": "omit", "args": [{"$": ["a", "b"]}, obj]}

    The key list is literal so it needs no quoting at the call site.
    """
    if len(operands) != 2:
        raise JExpArityError("$omit takes a key list and an object")
    keys, o = operands
    return {"apply": "omit", "args": [{"$": keys}, o]}


def record_macro(form: Mapping, spec: JExp = Undefined, *rest: JExp) -> JExp:
    """
    {"$record": {"total": expr, ...}}
    => {"_$": {"total": {"$_": expr}, ...}}
    """
    if rest or not isinstance(spec, Mapping):
        raise JExpTypeError(f"$record expects a single mapping of expressions, got {spec!r}")
    return {"_$": {key: {"$_": expr} for key, expr in spec.items()}}


def register(frame: dict) -> None:
    """Register builtin macros in the provided frame."""
    frame["$get"] = get_macro
    frame["$if"] = if_macro
    frame["$omit"] = omit_macro
    frame["$record"] = record_macro
