"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from enclosing_context.backends import AstBackend
from enclosing_context.config import Settings
from enclosing_context.parsers.python import PythonParser

_REPO_ROOT = Path(__file__).parent.parent

# Lines 1-10: function ``outer``; lines 3-5: the ``for`` loop; line 4 is a comment.
OUTER_SOURCE = """\
def outer(items):
    total = 0
    for item in items:
        # accumulate
        total += item
    if total > 10:
        total = 10
    print(total)
    result = total * 2
    return result
"""

CLASS_SOURCE = """\
import os


class Greeter:
    greeting = "hello"

    def greet(self, name):
        message = f"{self.greeting}, {name}"
        return message


def main():
    return Greeter().greet(os.getcwd())
"""

BROKEN_SOURCE = "def broken(:\n    pass\n"

UNCLOSED_SOURCE = "values = (1, 2\n"


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "ENCLOSING_CONTEXT_BACKEND",
        "ENCLOSING_CONTEXT_MODE",
        "ENCLOSING_CONTEXT_PYTHON",
        "ENCLOSING_CONTEXT_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def outer_source() -> str:
    return OUTER_SOURCE


@pytest.fixture
def class_source() -> str:
    return CLASS_SOURCE


@pytest.fixture
def ast_parser() -> PythonParser:
    return PythonParser(backend=AstBackend(), settings=Settings())
