from typing import Protocol

from enclosing_context.models import EnclosingContext, SyntaxNode, ValidationResult


class ParseBackend(Protocol):
    name: str

    def parse(self, source: str) -> list[SyntaxNode]:
        """Return every node of the tree in pre-order.

        Raises ``SourceParseError`` for unparseable input and ``BackendError``
        when the backend itself cannot be invoked.
        """
        ...


class AbstractParser(Protocol):
    def find_enclosing_context(self, file: str, line_start: int, line_end: int) -> EnclosingContext | None: ...

    def dry_run(self, file: str) -> ValidationResult: ...
