import logging

from enclosing_context.core.ports.parser import ParseBackend
from enclosing_context.errors import BackendError, SourceParseError
from enclosing_context.models import ValidationResult

logger = logging.getLogger(__name__)

_INVALID_PREFIX = "Invalid: "


def _diagnostic(message: str) -> str:
    message = message.strip()
    if message.startswith(_INVALID_PREFIX):
        message = message[len(_INVALID_PREFIX) :]
    return message or "Unknown error"


def validate_syntax(source: str, backend: ParseBackend) -> ValidationResult:
    """Dry-run parse of ``source``; the tree is discarded."""
    try:
        backend.parse(source)
    except SourceParseError as exc:
        return ValidationResult(valid=False, error=_diagnostic(exc.message))
    except BackendError as exc:
        logger.warning("%s backend could not be invoked: %s", backend.name, exc)
        return ValidationResult(valid=False, error=_diagnostic(str(exc)))
    return ValidationResult(valid=True, error="")
