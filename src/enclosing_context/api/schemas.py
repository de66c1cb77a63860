from __future__ import annotations

from pydantic import BaseModel, Field

from enclosing_context.models import EnclosingContext, SearchMode


class EnclosingContextRequest(BaseModel):
    source: str
    line_start: int = Field(ge=1)
    line_end: int = Field(ge=1)
    mode: SearchMode | None = None
    backend: str | None = None
    kinds: list[str] | None = None


class EnclosingContextResponse(BaseModel):
    enclosing_context: EnclosingContext | None = None


class ValidateRequest(BaseModel):
    source: str
    backend: str | None = None


class HealthResponse(BaseModel):
    status: str = "ok"
