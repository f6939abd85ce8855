"""Tagged bindings: every callable in a frame is either a Function or a Macro.

The call protocol switches on the tag rather than re-reading the identifier.
Frames built through `make_frame` (standard bindings, host frames, let frames,
prelude frames) tag a callable as a Macro when its name starts with the macro
sigil, and as a Function otherwise.
"""

from __future__ import annotations

from typing import Callable, Mapping

from jexp import JValue, MACRO_SIGIL


class Binding:
    """Callable wrapper carrying a Function/Macro tag."""

    __slots__ = ("fn",)
    kind = "binding"

    def __init__(self, fn: Callable[..., JValue]):
        self.fn = fn

    def __call__(self, *args):
        return self.fn(*args)

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.fn == other.fn

    def __hash__(self) -> int:
        return hash((self.kind, self.fn))

    def __repr__(self) -> str:
        name = getattr(self.fn, "__name__", None) or repr(self.fn)
        return f"<{self.kind} {name}>"


class Function(Binding):
    """Called with evaluated arguments."""

    __slots__ = ()
    kind = "function"


class Macro(Binding):
    """Called with the whole form followed by the unevaluated operands;
    the result is evaluated again in the caller's environment."""

    __slots__ = ()
    kind = "macro"


def is_macro_name(name: str) -> bool:
    return isinstance(name, str) and name.startswith(MACRO_SIGIL)


def tag_binding(name: str, value: JValue) -> JValue:
    """Wrap a callable bound under `name` in the tag its name calls for.

    Tagged values are re-tagged when bound under a name of the other kind,
    so aliasing a macro under a plain name makes it a function and the
    reverse. Closures bound under plain names stay bare Closures.
    Non-callables are returned unchanged.
    """
    from jexp.types.closure import Closure

    if isinstance(value, Binding):
        fn = value.fn
    elif callable(value):
        fn = value
    else:
        return value
    if is_macro_name(name):
        return value if isinstance(value, Macro) else Macro(fn)
    if isinstance(value, Function):
        return value
    if isinstance(fn, Closure):
        return fn
    return Function(fn)


def make_frame(mapping: Mapping[str, JValue]) -> dict[str, JValue]:
    """Copy a host mapping into a binding frame with callables tagged."""
    return {name: tag_binding(name, value) for name, value in mapping.items()}
