"""Closure representation for JExp lambdas."""

from __future__ import annotations

import json
from io import StringIO

from jexp import JExp, JValue
from jexp.config import EvalOptions
from jexp.types.environment import Environment


class Closure:
    """A first-class lambda with parameter names, body, and captured env."""

    __slots__ = ("params", "body", "env", "options")

    def __init__(
        self,
        params: list[str],
        body: JExp,
        env: Environment,
        options: EvalOptions | None = None,
    ):
        self.params: list[str] = params
        self.body: JExp = body
        # Creation-time environment: lexical, not dynamic, scoping
        self.env: Environment = env
        self.options: EvalOptions = options if options is not None else EvalOptions()

    def __call__(self, *args: JValue) -> JValue:
        """Apply from host code, e.g. a closure returned by `evaluate`."""
        from jexp.evaluation.apply import apply_closure
        return apply_closure(self, list(args))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(λ (")
            buffer.write(" ".join(self.params))
            buffer.write(") ")
            buffer.write(json.dumps(self.body, default=repr))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
