from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SearchMode(str, Enum):
    LARGEST = "largest"
    SMALLEST = "smallest"


class LineRange(BaseModel):
    """Inclusive, 1-indexed line range (a diff hunk)."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=1)
    end: int = Field(ge=1)

    @property
    def is_empty(self) -> bool:
        return self.start > self.end


class SyntaxNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    start_line: int | None = None
    end_line: int | None = None
    name: str | None = None

    @property
    def has_span(self) -> bool:
        return self.start_line is not None and self.end_line is not None

    @property
    def width(self) -> int:
        if self.start_line is None or self.end_line is None:
            raise ValueError(f"Node {self.kind} has no line span")
        return self.end_line - self.start_line

    def contains(self, line_range: LineRange) -> bool:
        if self.start_line is None or self.end_line is None:
            return False
        return self.start_line <= line_range.start and line_range.end <= self.end_line


class EnclosingContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    start_line: int
    end_line: int
    name: str | None = None

    @classmethod
    def from_node(cls, node: SyntaxNode) -> "EnclosingContext":
        if node.start_line is None or node.end_line is None:
            raise ValueError(f"Node {node.kind} has no line span")
        return cls(kind=node.kind, start_line=node.start_line, end_line=node.end_line, name=node.name)


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    error: str = ""
