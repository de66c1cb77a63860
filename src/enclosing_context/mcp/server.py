"""FastMCP server exposing the enclosing-context tools."""

from __future__ import annotations

import asyncio
from typing import Any

from fastmcp import FastMCP

from enclosing_context.models import SearchMode
from enclosing_context.parsers.python import PythonParser


def create_mcp_server(parser: PythonParser | None = None) -> FastMCP:
    """Create a FastMCP server wired to ``parser`` (a default one when omitted)."""

    mcp = FastMCP(
        "enclosing-context",
        instructions="Find the Python construct (function, class, block) that encloses a line range.",
    )
    default_parser = parser or PythonParser()

    def _select(
        mode: SearchMode | None = None, kinds: list[str] | None = None, backend: str | None = None
    ) -> PythonParser:
        if mode is None and not kinds and backend is None:
            return default_parser
        return PythonParser(
            backend=backend or default_parser.backend_name,
            mode=mode or default_parser.mode,
            kinds=kinds or default_parser.kinds,
        )

    @mcp.tool()
    async def find_enclosing_context(
        source: str,
        line_start: int,
        line_end: int,
        mode: SearchMode | None = None,
        kinds: list[str] | None = None,
        backend: str | None = None,
    ) -> dict[str, Any] | None:
        """Return the construct enclosing lines line_start..line_end, or null when none does."""
        selected = _select(mode, kinds, backend)
        context = await asyncio.to_thread(selected.find_enclosing_context, source, line_start, line_end)
        return context.model_dump() if context is not None else None

    @mcp.tool()
    async def validate_syntax(source: str, backend: str | None = None) -> dict[str, Any]:
        """Check whether source parses; error holds the diagnostic when it does not."""
        result = await asyncio.to_thread(_select(backend=backend).dry_run, source)
        return result.model_dump()

    return mcp
