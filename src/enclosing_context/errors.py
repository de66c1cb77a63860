class ContextError(Exception):
    """Base class for failures while obtaining a syntax tree."""


class SourceParseError(ContextError):
    """The source text does not conform to the grammar."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line


class BackendError(ContextError):
    """The parsing backend could not be invoked."""
