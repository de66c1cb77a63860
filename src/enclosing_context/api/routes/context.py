from __future__ import annotations

from fastapi import APIRouter, HTTPException

from enclosing_context.api.schemas import EnclosingContextRequest, EnclosingContextResponse, ValidateRequest
from enclosing_context.models import SearchMode, ValidationResult
from enclosing_context.parsers.python import PythonParser

router = APIRouter(prefix="/context", tags=["context"])


def _parser(
    backend: str | None, mode: SearchMode | None = None, kinds: list[str] | None = None
) -> PythonParser:
    try:
        return PythonParser(backend=backend, mode=mode, kinds=kinds)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None


@router.post("/enclosing", response_model=EnclosingContextResponse)
def enclosing(body: EnclosingContextRequest) -> EnclosingContextResponse:
    """Find the construct enclosing ``line_start``..``line_end`` of ``source``."""
    parser = _parser(body.backend, mode=body.mode, kinds=body.kinds or None)
    context = parser.find_enclosing_context(body.source, body.line_start, body.line_end)
    return EnclosingContextResponse(enclosing_context=context)


@router.post("/validate", response_model=ValidationResult)
def validate(body: ValidateRequest) -> ValidationResult:
    """Dry-run parse of ``source``."""
    return _parser(body.backend).dry_run(body.source)
