from typing import cast

from tree_sitter import Node
from tree_sitter_language_pack import SupportedLanguage, get_parser

from enclosing_context.errors import BackendError, SourceParseError
from enclosing_context.models import SyntaxNode

_LANGUAGE = "python"
_LEGACY_STATEMENTS = frozenset({"print_statement", "exec_statement"})


def _line_span(node: Node) -> tuple[int, int]:
    start_row, _ = node.start_point
    end_row, end_column = node.end_point
    # a node ending at column 0 stops at the newline of the previous line
    if end_column == 0 and end_row > start_row:
        return start_row + 1, end_row
    return start_row + 1, end_row + 1


def _node_name(node: Node, source_bytes: bytes) -> str | None:
    name_node = node.child_by_field_name("name")
    if name_node is None or name_node.type != "identifier":
        return None
    return source_bytes[name_node.start_byte : name_node.end_byte].decode("utf-8", errors="replace")


def _first_error(root: Node) -> Node | None:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


def _normalize_newlines(source: str) -> str:
    # tree-sitter only starts a new row at "\n"
    return source.replace("\r\n", "\n").replace("\r", "\n")


def _first_legacy_statement(root: Node) -> Node | None:
    # the grammar still accepts Python 2 print and exec statements
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type in _LEGACY_STATEMENTS:
            return node
        stack.extend(reversed(node.children))
    return None


def _describe_error(node: Node) -> str:
    row, column = node.start_point
    if node.is_missing:
        return f"missing '{node.type}' at line {row + 1}, column {column + 1}"
    return f"invalid syntax at line {row + 1}, column {column + 1}"


class TreeSitterBackend:
    name = "tree-sitter"

    def __init__(self) -> None:
        try:
            self._parser = get_parser(cast(SupportedLanguage, _LANGUAGE))
        except Exception as exc:  # grammar lookup, download or load failures
            raise BackendError(f"tree-sitter grammar for {_LANGUAGE} is unavailable: {exc}") from exc

    def parse(self, source: str) -> list[SyntaxNode]:
        try:
            source_bytes = _normalize_newlines(source).encode("utf-8")
        except UnicodeEncodeError as exc:
            raise SourceParseError(f"source is not valid UTF-8: {exc}") from exc

        tree = self._parser.parse(source_bytes)
        root = tree.root_node

        if root.has_error:
            error_node = _first_error(root)
            if error_node is None:
                raise SourceParseError("invalid syntax")
            raise SourceParseError(_describe_error(error_node), line=error_node.start_point[0] + 1)

        legacy_node = _first_legacy_statement(root)
        if legacy_node is not None:
            row, column = legacy_node.start_point
            keyword = legacy_node.type.removesuffix("_statement")
            raise SourceParseError(
                f"Python 2 {keyword} statement at line {row + 1}, column {column + 1}", line=row + 1
            )

        # the module root covers the whole file and carries no span
        nodes = [SyntaxNode(kind=root.type)]
        stack = list(reversed(root.children))
        while stack:
            node = stack.pop()
            if node.is_named:
                start_line, end_line = _line_span(node)
                nodes.append(
                    SyntaxNode(
                        kind=node.type,
                        start_line=start_line,
                        end_line=end_line,
                        name=_node_name(node, source_bytes),
                    )
                )
            stack.extend(reversed(node.children))
        return nodes
