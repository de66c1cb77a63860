from pathlib import Path

import typer

from enclosing_context.backends import normalize_backend_name

PYTHON_SUFFIXES = frozenset({".py", ".pyi", ".pyw"})
PYTHON_NAMES = frozenset({"py", "python", "python3"})


def check_python_path(path: Path, language: str | None) -> None:
    """Reject paths that are not Python sources; ``--language`` overrides the suffix."""
    if language is not None:
        if language.strip().lower() not in PYTHON_NAMES:
            raise typer.BadParameter(
                f"Unsupported language '{language}'. Only Python is supported.", param_hint="--language"
            )
        return
    if path.suffix.lower() not in PYTHON_SUFFIXES:
        raise typer.BadParameter(
            f"Unsupported file extension: {path.suffix or '(none)'}. Pass --language python to force it.",
            param_hint="PATH",
        )


def read_python_source(path: Path, language: str | None) -> str:
    check_python_path(path, language)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise typer.BadParameter(f"File not found: {path}", param_hint="PATH") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read {path}: {exc}", param_hint="PATH") from None


def check_backend(backend: str | None) -> str | None:
    if backend is None:
        return None
    try:
        return normalize_backend_name(backend)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--backend") from None
