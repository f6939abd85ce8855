"""Standard bindings: the root frame of every evaluation chain."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from jexp import JValue
from jexp.builtin import env_builtin, macro_builtin
from jexp.types.binding import make_frame
from jexp.types.environment import Environment

_STANDARD_FRAME: Mapping[str, JValue] | None = None


def standard_frame() -> Mapping[str, JValue]:
    """Read-only frame with builtin functions and macros, built once."""
    global _STANDARD_FRAME
    if _STANDARD_FRAME is None:
        frame: dict[str, JValue] = {}
        env_builtin.register(frame)
        macro_builtin.register(frame)
        _STANDARD_FRAME = MappingProxyType(make_frame(frame))
    return _STANDARD_FRAME


def standard_environment() -> Environment:
    return Environment(standard_frame())
