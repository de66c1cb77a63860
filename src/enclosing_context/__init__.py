from enclosing_context.core.finder import find_enclosing_context, select_enclosing_node
from enclosing_context.core.validator import validate_syntax
from enclosing_context.errors import BackendError, ContextError, SourceParseError
from enclosing_context.models import EnclosingContext, LineRange, SearchMode, SyntaxNode, ValidationResult
from enclosing_context.parsers.python import PythonParser

__all__ = [
    "BackendError",
    "ContextError",
    "EnclosingContext",
    "LineRange",
    "PythonParser",
    "SearchMode",
    "SourceParseError",
    "SyntaxNode",
    "ValidationResult",
    "find_enclosing_context",
    "select_enclosing_node",
    "validate_syntax",
]
