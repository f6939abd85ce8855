# Core type aliases for the JExp data model.
# Programs are plain Python data (str, int, float, bool, None, list, dict) and
# the same types carry evaluated values, so a dict is code or data depending
# on where it sits. Closures are the only runtime-specific value type.
#
# Naming guidance:
# - JExp:   use in evaluator/macro code to denote expressions (code-as-data).
# - JValue: use in runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
JValue = Any
JExp = JValue

# Evaluator function type: recursive evaluator handed to special forms
EvaluatorFn = Callable[..., JValue]

# Leading character marking an identifier as a macro
MACRO_SIGIL = "$"

from jexp.evaluation.evaluator import evaluate  # noqa: E402
from jexp.interpreter import Interpreter  # noqa: E402
