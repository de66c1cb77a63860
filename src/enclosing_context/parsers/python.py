import logging
from collections.abc import Collection

from enclosing_context.backends import get_backend, normalize_backend_name
from enclosing_context.config import Settings
from enclosing_context.core.finder import find_enclosing_context
from enclosing_context.core.ports.parser import ParseBackend
from enclosing_context.core.validator import validate_syntax
from enclosing_context.errors import BackendError
from enclosing_context.models import EnclosingContext, LineRange, SearchMode, ValidationResult

logger = logging.getLogger(__name__)


class PythonParser:
    """``AbstractParser`` for Python sources.

    ``backend`` is either a ready ``ParseBackend`` or a backend name; names are
    resolved on first use so a missing backend degrades into the documented
    failure results instead of raising from the constructor.
    """

    def __init__(
        self,
        backend: ParseBackend | str | None = None,
        mode: SearchMode | None = None,
        kinds: Collection[str] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or Settings.from_env()
        if isinstance(backend, str) or backend is None:
            self._backend_name = normalize_backend_name(backend or self._settings.backend)
            self._backend: ParseBackend | None = None
        else:
            self._backend_name = backend.name
            self._backend = backend
        self.mode = SearchMode(mode) if mode is not None else self._settings.mode
        self.kinds = frozenset(kinds) if kinds is not None else None

    @property
    def backend_name(self) -> str:
        return self._backend_name

    def _get_backend(self) -> ParseBackend:
        if self._backend is None:
            self._backend = get_backend(self._backend_name, self._settings)
        return self._backend

    def find_enclosing_context(self, file: str, line_start: int, line_end: int) -> EnclosingContext | None:
        """Find the enclosing construct for lines ``line_start``..``line_end`` of ``file``.

        Returns ``None`` when nothing contains the range, the file does not
        parse, or the backend cannot be invoked.
        """
        if line_start < 1 or line_end < 1:
            return None
        try:
            backend = self._get_backend()
        except BackendError as exc:
            logger.warning("Error parsing Python file: %s", exc)
            return None
        line_range = LineRange(start=line_start, end=line_end)
        return find_enclosing_context(file, line_range, backend, self.mode, self.kinds)

    def dry_run(self, file: str) -> ValidationResult:
        """Check whether ``file`` parses; the diagnostic is returned on failure."""
        try:
            backend = self._get_backend()
        except BackendError as exc:
            return ValidationResult(valid=False, error=str(exc))
        return validate_syntax(file, backend)
