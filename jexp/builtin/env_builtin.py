"""Built-in functions for the JExp standard bindings.

Arithmetic, comparison, logic and mapping projection helpers. Each is an
ordinary Python callable receiving evaluated arguments positionally.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from jexp import JValue
from jexp.types.errors import JExpTypeError, JExpArityError
from jexp.types.undefined import Undefined


# -------------------------------
# Arithmetic
# -------------------------------
def plus(*xs: Any) -> Any:
    try:
        return sum(xs, 0)
    except TypeError:
        raise JExpTypeError("All arguments to plus must be numbers")


def mult(*xs: Any) -> Any:
    result = 1
    try:
        for x in xs:
            result *= x
        return result
    except TypeError:
        raise JExpTypeError("All arguments to mult must be numbers")


def minus(*xs: Any) -> Any:
    """Negation with one argument, subtraction with two."""
    if len(xs) not in (1, 2):
        raise JExpArityError(f"minus takes 1 or 2 arguments, got {len(xs)}")
    try:
        if len(xs) == 1:
            return -xs[0]
        return xs[0] - xs[1]
    except TypeError:
        raise JExpTypeError("All arguments to minus must be numbers")


def div(l: Any, r: Any) -> Any:
    try:
        return l / r
    except TypeError:
        raise JExpTypeError("All arguments to div must be numbers")
    except ZeroDivisionError:
        raise ZeroDivisionError("Division by zero")


def mod(l: Any, r: Any) -> Any:
    """Remainder with the sign of the dividend (truncated division)."""
    try:
        if isinstance(l, int) and isinstance(r, int):
            if r == 0:
                raise ZeroDivisionError("Modulo by zero")
            rem = abs(l) % abs(r)
            return -rem if l < 0 else rem
        return math.fmod(l, r)
    except TypeError:
        raise JExpTypeError("All arguments to mod must be numbers")
    except ValueError:
        raise ZeroDivisionError("Modulo by zero")


# -------------------------------
# Comparison
# -------------------------------
def eq(l: JValue, r: JValue) -> bool:
    return l == r


def _compare(name: str, op):
    def compare(l: Any, r: Any) -> bool:
        try:
            return op(l, r)
        except TypeError:
            raise JExpTypeError(f"Cannot compare {l!r} and {r!r} with {name}")
    compare.__name__ = name
    return compare


gt = _compare("gt", lambda l, r: l > r)
gte = _compare("gte", lambda l, r: l >= r)
lt = _compare("lt", lambda l, r: l < r)
lte = _compare("lte", lambda l, r: l <= r)


# -------------------------------
# Boolean logic
# -------------------------------
def logical_and(*args: JValue) -> bool:
    return all(args)


def logical_or(*args: JValue) -> bool:
    return any(args)


# -------------------------------
# Mapping projection
# -------------------------------
def _require_mapping(name: str, o: JValue) -> Mapping:
    if not isinstance(o, Mapping):
        raise JExpTypeError(f"{name} expects a mapping, got {o!r}")
    return o


def pick(keys: list[str], o: Mapping) -> dict:
    """Keep only `keys`; keys missing from `o` are left out."""
    o = _require_mapping("pick", o)
    return {k: o[k] for k in keys if k in o}


def omit(keys: list[str], o: Mapping) -> dict:
    o = _require_mapping("omit", o)
    return {k: v for k, v in o.items() if k not in keys}


def get(o: JValue, *keys: JValue) -> JValue:
    """Follow `keys` into nested mappings/lists; Undefined on a missing step."""
    acc = o
    for k in keys:
        if isinstance(acc, Mapping) and k in acc:
            acc = acc[k]
        elif (
            isinstance(acc, list)
            and isinstance(k, int)
            and not isinstance(k, bool)
            and -len(acc) <= k < len(acc)
        ):
            acc = acc[k]
        else:
            return Undefined
    return acc


def register(frame: dict[str, JValue]) -> None:
    """Register all builtin functions into the given frame."""
    frame.update(
        {
            "plus": plus,
            "mult": mult,
            "minus": minus,
            "div": div,
            "mod": mod,
            "eq": eq,
            "gt": gt,
            "gte": gte,
            "lt": lt,
            "lte": lte,
            "and": logical_and,
            "or": logical_or,
            "pick": pick,
            "omit": omit,
            "get": get,
        }
    )
