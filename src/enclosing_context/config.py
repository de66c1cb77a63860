import os
import sys
from dataclasses import dataclass

from enclosing_context.models import SearchMode

DEFAULT_BACKEND = "ast"


@dataclass(frozen=True)
class Settings:
    backend: str = DEFAULT_BACKEND
    mode: SearchMode = SearchMode.LARGEST
    python_executable: str = sys.executable
    timeout: float | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        backend = os.getenv("ENCLOSING_CONTEXT_BACKEND", "").strip() or DEFAULT_BACKEND

        raw_mode = os.getenv("ENCLOSING_CONTEXT_MODE", "").strip().lower() or SearchMode.LARGEST.value
        try:
            mode = SearchMode(raw_mode)
        except ValueError:
            raise ValueError(
                f"Invalid ENCLOSING_CONTEXT_MODE '{raw_mode}'. Expected one of: {[m.value for m in SearchMode]}"
            ) from None

        python_executable = os.getenv("ENCLOSING_CONTEXT_PYTHON", "").strip() or sys.executable or "python3"

        raw_timeout = os.getenv("ENCLOSING_CONTEXT_TIMEOUT", "").strip()
        timeout: float | None = None
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"Invalid ENCLOSING_CONTEXT_TIMEOUT '{raw_timeout}': not a number") from None
            if timeout <= 0:
                raise ValueError(f"Invalid ENCLOSING_CONTEXT_TIMEOUT '{raw_timeout}': must be positive")

        return cls(backend=backend, mode=mode, python_executable=python_executable, timeout=timeout)
