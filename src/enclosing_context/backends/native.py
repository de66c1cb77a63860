"""In-process backend built on CPython's own ``ast`` module."""

import ast

from enclosing_context.errors import SourceParseError
from enclosing_context.models import SyntaxNode


def parse_source(source: str) -> ast.AST:
    try:
        return ast.parse(source)
    except SyntaxError as exc:
        raise SourceParseError(str(exc), line=exc.lineno) from exc
    except ValueError as exc:  # null bytes on older interpreters
        raise SourceParseError(str(exc)) from exc
    except (RecursionError, MemoryError) as exc:
        raise SourceParseError(f"source is too deeply nested to parse: {type(exc).__name__}") from exc


def node_to_model(node: ast.AST) -> SyntaxNode:
    # lineno/end_lineno are absent on Module and optional on a few helper nodes
    return SyntaxNode(
        kind=type(node).__name__,
        start_line=getattr(node, "lineno", None),
        end_line=getattr(node, "end_lineno", None),
        name=_node_name(node),
    )


def _node_name(node: ast.AST) -> str | None:
    name = getattr(node, "name", None)
    return name if isinstance(name, str) else None


def iter_preorder(tree: ast.AST) -> list[ast.AST]:
    ordered: list[ast.AST] = []
    stack = [tree]
    while stack:
        node = stack.pop()
        ordered.append(node)
        stack.extend(reversed(list(ast.iter_child_nodes(node))))
    return ordered


class AstBackend:
    name = "ast"

    def parse(self, source: str) -> list[SyntaxNode]:
        tree = parse_source(source)
        return [node_to_model(node) for node in iter_preorder(tree)]
