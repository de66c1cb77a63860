"""Out-of-process backend: a separate Python interpreter parses the source.

The child reads the source from stdin and writes one JSON document to stdout,
either ``{"nodes": [[kind, start, end, name], ...]}`` in pre-order or
``{"error": message, "line": lineno}`` when the source does not parse.
"""

import json
import logging
import subprocess  # nosec B404 - the interpreter is invoked with an argument list
from typing import Any

from enclosing_context.errors import BackendError, SourceParseError
from enclosing_context.models import SyntaxNode

logger = logging.getLogger(__name__)

_SCRIPT = """
import ast, json, sys

def main():
    source = sys.stdin.buffer.read().decode("utf-8", "surrogatepass")
    try:
        tree = ast.parse(source)
    except SyntaxError as exc:
        json.dump({"error": str(exc), "line": exc.lineno}, sys.stdout)
        return
    except (ValueError, RecursionError, MemoryError) as exc:
        json.dump({"error": str(exc) or type(exc).__name__, "line": None}, sys.stdout)
        return
    nodes = []
    stack = [tree]
    while stack:
        node = stack.pop()
        name = getattr(node, "name", None)
        nodes.append([
            type(node).__name__,
            getattr(node, "lineno", None),
            getattr(node, "end_lineno", None),
            name if isinstance(name, str) else None,
        ])
        stack.extend(reversed(list(ast.iter_child_nodes(node))))
    json.dump({"nodes": nodes}, sys.stdout)

main()
"""


class InterpreterBackend:
    name = "interpreter"

    def __init__(self, executable: str, timeout: float | None = None) -> None:
        self._executable = executable
        self._timeout = timeout

    def parse(self, source: str) -> list[SyntaxNode]:
        payload = self._run(source)
        if "error" in payload:
            raise SourceParseError(str(payload["error"]), line=payload.get("line"))
        try:
            return [
                SyntaxNode(kind=kind, start_line=start, end_line=end, name=name)
                for kind, start, end, name in payload["nodes"]
            ]
        except (KeyError, TypeError, ValueError) as exc:
            raise BackendError(f"Malformed node list from {self._executable}: {exc}") from exc

    def _run(self, source: str) -> dict[str, Any]:
        command = [self._executable, "-c", _SCRIPT]
        logger.debug("Parsing %d characters with %s", len(source), self._executable)
        try:
            completed = subprocess.run(  # nosec B603
                command,
                input=source.encode("utf-8", errors="surrogatepass"),
                capture_output=True,
                timeout=self._timeout,
                check=False,
            )
        except FileNotFoundError:
            raise BackendError(f"Python interpreter not found: {self._executable}") from None
        except subprocess.TimeoutExpired:
            raise BackendError(f"Python interpreter timed out after {self._timeout}s") from None
        except OSError as exc:
            raise BackendError(f"Failed to start {self._executable}: {exc}") from exc

        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            raise BackendError(f"{self._executable} exited with status {completed.returncode}: {stderr}")

        try:
            payload = json.loads(completed.stdout)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise BackendError(f"Unreadable output from {self._executable}: {exc}") from exc
        if not isinstance(payload, dict):
            raise BackendError(f"Unexpected output from {self._executable}: {type(payload).__name__}")
        return payload
