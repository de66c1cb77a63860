import logging
from enum import Enum
from typing import Annotated

import typer
from rich.console import Console

from enclosing_context.backends import normalize_backend_name
from enclosing_context.config import Settings

logger = logging.getLogger(__name__)

serve_app = typer.Typer(help="Serve enclosing-context lookups over HTTP or MCP.", no_args_is_help=True)
console = Console(stderr=True)

HostOption = Annotated[str, typer.Option(help="Interface to bind.")]
PortOption = Annotated[int, typer.Option(min=1, max=65535, help="TCP port to listen on.")]


class LogLevel(str, Enum):
    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"


class McpTransport(str, Enum):
    STDIO = "stdio"
    HTTP = "http"
    SSE = "sse"


def _load_settings() -> Settings:
    try:
        settings = Settings.from_env()
        normalize_backend_name(settings.backend)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from None
    return settings


@serve_app.command("api")
def api(
    host: HostOption = "127.0.0.1",
    port: PortOption = 8000,
    log_level: Annotated[LogLevel, typer.Option(help="uvicorn log level.")] = LogLevel.INFO,
) -> None:
    """Serve POST /context/enclosing and POST /context/validate."""
    import uvicorn

    from enclosing_context.api.app import create_app

    settings = _load_settings()
    logger.info("API server using %s backend in %s mode", settings.backend, settings.mode.value)
    console.print(f"[green]Enclosing-context API on http://{host}:{port}[/green] (backend: {settings.backend})")
    uvicorn.run(create_app(), host=host, port=port, log_level=log_level.value)


@serve_app.command("mcp")
def mcp(
    transport: Annotated[McpTransport, typer.Option(help="MCP transport.")] = McpTransport.STDIO,
    host: HostOption = "127.0.0.1",
    port: PortOption = 8001,
) -> None:
    """Serve the find_enclosing_context and validate_syntax MCP tools."""
    from enclosing_context.mcp.server import create_mcp_server
    from enclosing_context.parsers.python import PythonParser

    settings = _load_settings()
    server = create_mcp_server(PythonParser(settings=settings))
    logger.info("MCP server using %s transport and %s backend", transport.value, settings.backend)
    if transport is McpTransport.STDIO:
        # stdout carries the protocol
        server.run(transport="stdio")
        return
    console.print(f"[green]Enclosing-context MCP ({transport.value}) on {host}:{port}[/green]")
    server.run(transport=transport.value, host=host, port=port)  # type: ignore[arg-type]
