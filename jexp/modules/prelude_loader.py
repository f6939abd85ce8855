from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Mapping, Optional, Protocol

from jexp.config import get_prelude_roots
from jexp.types.errors import MalformedForm

logger = logging.getLogger(__name__)


class _HasEvalFrame(Protocol):
    def eval_frame(self, bindings: Mapping) -> None: ...


def prelude_files(roots: Optional[List[Path]] = None) -> List[Path]:
    """Every *.json file under the prelude roots, sorted by name per root.

    Explicit roots must exist; configured roots that are missing are skipped.
    """
    explicit = roots is not None
    files: List[Path] = []
    for root in (roots if explicit else get_prelude_roots()):
        if root.is_file():
            files.append(root)
        elif root.is_dir():
            files.extend(sorted(root.glob('*.json')))
        elif explicit:
            raise FileNotFoundError(f"Cannot find prelude '{root}'")
    return files


def load_file(itp: _HasEvalFrame, path: Path) -> None:
    bindings = json.loads(path.read_text(encoding='utf-8'))
    if not isinstance(bindings, dict):
        raise MalformedForm(f"Prelude file {path} must hold a mapping of definitions")
    logger.debug("loading prelude %s (%d definitions)", path, len(bindings))
    itp.eval_frame(bindings)


def load_prelude(itp: _HasEvalFrame, roots: Optional[List[Path]] = None) -> None:
    for path in prelude_files(roots):
        load_file(itp, path)
