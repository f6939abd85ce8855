from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (jexp package directory)
_JEXP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIRS = [_JEXP_DIR / 'prelude']
_TRUTHY = {'1', 'true', 'yes', 'on'}


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def get_prelude_roots() -> List[Path]:
    return paths_from_env('JEXP_PRELUDE_PATH', _DEFAULT_PRELUDE_DIRS)


def get_strict_cond() -> bool:
    return flag_from_env('JEXP_STRICT_COND')


@dataclass(frozen=True)
class EvalOptions:
    """Per-evaluation switches threaded through the evaluator."""

    # Raise MalformedForm when no cond clause matches and there is no else
    strict_cond: bool = False

    @classmethod
    def from_env(cls, strict_cond: bool | None = None) -> EvalOptions:
        return cls(strict_cond=get_strict_cond() if strict_cond is None else strict_cond)
