"""Unit tests for the tree-sitter backend."""

import pytest

from enclosing_context.backends.treesitter import TreeSitterBackend
from enclosing_context.config import Settings
from enclosing_context.core.finder import find_enclosing_context
from enclosing_context.core.validator import validate_syntax
from enclosing_context.errors import BackendError, SourceParseError
from enclosing_context.models import EnclosingContext, LineRange, SearchMode
from enclosing_context.parsers.python import PythonParser


@pytest.fixture(scope="module")
def backend() -> TreeSitterBackend:
    return TreeSitterBackend()


def test_root_is_spanless_module(backend: TreeSitterBackend, outer_source: str) -> None:
    nodes = backend.parse(outer_source)
    assert nodes[0].kind == "module"
    assert nodes[0].has_span is False


def test_function_definition_span(backend: TreeSitterBackend, outer_source: str) -> None:
    function = next(node for node in backend.parse(outer_source) if node.kind == "function_definition")
    assert (function.start_line, function.end_line) == (1, 10)
    assert function.name == "outer"


def test_class_definition_name(backend: TreeSitterBackend, class_source: str) -> None:
    names = [node.name for node in backend.parse(class_source) if node.kind == "class_definition"]
    assert names == ["Greeter"]


def test_only_named_nodes_are_emitted(backend: TreeSitterBackend) -> None:
    kinds = {node.kind for node in backend.parse("x = (1, 2)\n")}
    assert "(" not in kinds
    assert "=" not in kinds
    assert "assignment" in kinds


def test_largest_context(backend: TreeSitterBackend, outer_source: str) -> None:
    context = find_enclosing_context(outer_source, LineRange(start=4, end=4), backend)
    assert context == EnclosingContext(kind="function_definition", start_line=1, end_line=10, name="outer")


def test_smallest_context_with_kinds(backend: TreeSitterBackend, outer_source: str) -> None:
    context = find_enclosing_context(
        outer_source,
        LineRange(start=5, end=5),
        backend,
        SearchMode.SMALLEST,
        kinds={"for_statement", "function_definition"},
    )
    assert context == EnclosingContext(kind="for_statement", start_line=3, end_line=5)


def test_past_end_of_file(backend: TreeSitterBackend, outer_source: str) -> None:
    assert find_enclosing_context(outer_source, LineRange(start=11, end=11), backend) is None


def test_empty_source(backend: TreeSitterBackend) -> None:
    nodes = backend.parse("")
    assert [node.kind for node in nodes] == ["module"]


@pytest.mark.parametrize(
    "source",
    ["def broken(:\n    pass\n", "values = (1, 2\n"],
    ids=["bad-signature", "unclosed-paren"],
)
def test_unparseable_source_raises(backend: TreeSitterBackend, source: str) -> None:
    with pytest.raises(SourceParseError) as excinfo:
        backend.parse(source)
    assert "at line" in excinfo.value.message
    assert excinfo.value.line is not None


@pytest.mark.parametrize(
    ("source", "keyword"),
    [('print "hi"\n', "print"), ("exec 'x = 1'\n", "exec")],
    ids=["print-statement", "exec-statement"],
)
def test_python2_statements_are_rejected(backend: TreeSitterBackend, source: str, keyword: str) -> None:
    with pytest.raises(SourceParseError) as excinfo:
        backend.parse(source)
    assert f"{keyword} statement at line 1" in excinfo.value.message
    assert excinfo.value.line == 1


def test_python2_statements_fail_validation(backend: TreeSitterBackend) -> None:
    result = validate_syntax('def f():\n    print "hi"\n', backend)
    assert result.valid is False
    assert "line 2" in result.error


@pytest.mark.parametrize(
    "source",
    ["def f():\r    x = 1\r    return x\r", "def f():\r\n    x = 1\r\n    return x\r\n"],
    ids=["cr", "crlf"],
)
def test_carriage_return_line_endings(backend: TreeSitterBackend, source: str) -> None:
    context = find_enclosing_context(source, LineRange(start=2, end=2), backend)
    assert context == EnclosingContext(kind="function_definition", start_line=1, end_line=3, name="f")


class _GrammarDownloadError(Exception):
    pass


def test_grammar_failure_raises_backend_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(_language: str) -> None:
        raise _GrammarDownloadError("network unreachable")

    monkeypatch.setattr("enclosing_context.backends.treesitter.get_parser", _fail)
    with pytest.raises(BackendError, match="network unreachable"):
        TreeSitterBackend()


def test_grammar_failure_degrades_parser_results(monkeypatch: pytest.MonkeyPatch, outer_source: str) -> None:
    def _fail(_language: str) -> None:
        raise _GrammarDownloadError("network unreachable")

    monkeypatch.setattr("enclosing_context.backends.treesitter.get_parser", _fail)
    parser = PythonParser(backend="tree-sitter", settings=Settings())
    assert parser.find_enclosing_context(outer_source, 4, 4) is None
    result = PythonParser(backend="tree-sitter", settings=Settings()).dry_run(outer_source)
    assert result.valid is False
    assert "network unreachable" in result.error
