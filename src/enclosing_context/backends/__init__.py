from enclosing_context.backends.interpreter import InterpreterBackend
from enclosing_context.backends.native import AstBackend
from enclosing_context.config import Settings
from enclosing_context.core.ports.parser import ParseBackend
from enclosing_context.errors import BackendError

_BACKEND_ALIASES = {
    "ast": "ast",
    "native": "ast",
    "interpreter": "interpreter",
    "subprocess": "interpreter",
    "tree-sitter": "tree-sitter",
    "treesitter": "tree-sitter",
    "ts": "tree-sitter",
}

BACKEND_NAMES = sorted(set(_BACKEND_ALIASES.values()))


def normalize_backend_name(name: str) -> str:
    normalized = name.strip().lower()
    if normalized not in _BACKEND_ALIASES:
        raise ValueError(f"Unsupported backend '{name}'. Supported: {BACKEND_NAMES}")
    return _BACKEND_ALIASES[normalized]


def get_backend(name: str | None = None, settings: Settings | None = None) -> ParseBackend:
    """Build the parse backend ``name``, falling back to the configured default."""
    settings = settings or Settings.from_env()
    resolved = normalize_backend_name(name or settings.backend)
    if resolved == "interpreter":
        return InterpreterBackend(settings.python_executable, timeout=settings.timeout)
    if resolved == "tree-sitter":
        # tree-sitter is imported lazily so the default backend never loads a grammar
        try:
            from enclosing_context.backends.treesitter import TreeSitterBackend
        except ImportError as exc:
            raise BackendError(f"tree-sitter backend is unavailable: {exc}") from exc

        return TreeSitterBackend()
    return AstBackend()


__all__ = [
    "BACKEND_NAMES",
    "AstBackend",
    "InterpreterBackend",
    "get_backend",
    "normalize_backend_name",
]
