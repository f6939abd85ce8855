"""Lexical environment for JExp.

An Environment is one binding frame plus a link to the enclosing chain.
Chains are immutable from the outside: `extend` returns a new chain with a
frame prepended and never touches the original. The standard bindings frame
always sits at the tail of every chain built by the evaluator.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator, Mapping, Optional

from jexp import JValue
from jexp.types.errors import UndefinedSymbol


class Environment:
    """Singly-linked chain of binding frames, nearest frame first."""

    __slots__ = ("vars", "outer")

    def __init__(
        self, frame: Mapping[str, JValue] | None = None, outer: Optional[Environment] = None
    ):
        # A let frame is handed in empty and filled before its body runs;
        # nothing else writes to `vars` after construction.
        self.vars: Mapping[str, JValue] = frame if frame is not None else {}
        self.outer: Environment | None = outer

    @classmethod
    def from_frames(
        cls, frames: Iterable[Mapping[str, JValue]], outer: Optional[Environment] = None
    ) -> Optional[Environment]:
        """Build a chain from frames given nearest-first, ending at `outer`."""
        env = outer
        for frame in reversed(list(frames)):
            env = cls(frame, env)
        return env

    def extend(self, frame: Mapping[str, JValue]) -> Environment:
        """Return a new chain with `frame` in front of this one."""
        return Environment(frame, self)

    def frames(self) -> Iterator[Mapping[str, JValue]]:
        env: Optional[Environment] = self
        while env is not None:
            yield env.vars
            env = env.outer

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> JValue:
        """Look up the value bound to `name`.

        Raises UndefinedSymbol if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise UndefinedSymbol(f"Undefined symbol {name!r}")
        return env.vars[name]

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self.frames())

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Frame sizes along the chain; the standard frame is too large to print."""
        sizes = " -> ".join(str(len(frame)) for frame in self.frames())
        return f"<Environment chain: {sizes}>"
