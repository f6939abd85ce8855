from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Mapping

from jexp import JExp, JValue
from jexp.builtin import standard_environment
from jexp.config import EvalOptions
from jexp.evaluation.evaluator import evaluate0
from jexp.types.bind import bind_frame
from jexp.types.binding import make_frame, tag_binding
from jexp.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Host-side session: owns an Environment (standard bindings, prelude
    frames, host frames) and evaluates structured expressions against it.
    Definitions only ever prepend new frames; earlier closures keep seeing
    the chain they captured.
    """

    def __init__(
        self,
        prelude: bool | str | Path | None = 'auto',
        *,
        strict_cond: bool | None = None,
    ):
        self.options: EvalOptions = EvalOptions.from_env(strict_cond)
        self.env: Environment = standard_environment()

        # Lazy import to avoid circular imports
        from jexp.modules.prelude_loader import load_prelude
        if prelude is None or prelude is False:
            pass  # explicit: no prelude
        elif prelude == 'auto' or prelude is True:
            load_prelude(self)
        elif isinstance(prelude, (str, Path)):
            load_prelude(self, [Path(prelude)])
        else:
            raise TypeError(f"prelude must be 'auto', a bool, None or a path, got {prelude!r}")

    def define(self, name: str, value: JValue) -> None:
        """Bind one host value in a new frame."""
        self.env = self.env.extend({name: tag_binding(name, value)})

    def define_frame(self, frame: Mapping[str, JValue]) -> None:
        """Bind a mapping of host values as a single new frame."""
        self.env = self.env.extend(make_frame(frame))

    def eval_frame(self, bindings: Mapping[str, JExp]) -> None:
        """Evaluate name -> expression bindings as a let frame and keep it."""
        self.env = bind_frame(bindings, self.env, self.options, evaluate0)
        logger.debug("bound %d definitions", len(bindings))

    def eval(self, expr: JExp) -> JValue:
        return evaluate0(expr, self.env, self.options)

    def eval_json(self, text: str) -> JValue:
        """Decode a JSON document and evaluate it."""
        return self.eval(json.loads(text))

    def lookup(self, name: str) -> JValue:
        return self.env.lookup(name)
