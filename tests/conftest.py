import pytest

from jexp import Interpreter


@pytest.fixture(autouse=True)
def _clean_config(monkeypatch):
    # Host settings must not leak into tests
    monkeypatch.delenv("JEXP_STRICT_COND", raising=False)
    monkeypatch.delenv("JEXP_PRELUDE_PATH", raising=False)


@pytest.fixture
def frame():
    """A host frame with a few values and a host function."""
    return {
        "x": 42,
        "y": 100,
        "user": {"name": "Ada", "address": {"city": "Oslo"}, "tags": ["a", "b"]},
        "concat": lambda *parts: "".join(parts),
    }


@pytest.fixture
def interp():
    """Interpreter without the shipped prelude."""
    return Interpreter(prelude=None)
