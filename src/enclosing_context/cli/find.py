from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from enclosing_context.cli._common import check_backend, read_python_source
from enclosing_context.models import EnclosingContext, SearchMode
from enclosing_context.parsers.python import PythonParser

console = Console()


def _render_context(context: EnclosingContext) -> None:
    table = Table(show_lines=False)
    for header in ("kind", "name", "start_line", "end_line"):
        table.add_column(header)
    table.add_row(context.kind, context.name or "", str(context.start_line), str(context.end_line))
    console.print(table)


def find(
    path: Annotated[Path, typer.Argument(help="Path to a Python file.")],
    start: Annotated[int, typer.Option("--start", "-s", min=1, help="First line of the range (1-indexed).")],
    end: Annotated[
        int | None, typer.Option("--end", "-e", min=1, help="Last line of the range; defaults to --start.")
    ] = None,
    mode: Annotated[SearchMode | None, typer.Option(help="Pick the widest or the narrowest enclosing node.")] = None,
    backend: Annotated[str | None, typer.Option(help="Parse backend: ast, interpreter or tree-sitter.")] = None,
    kind: Annotated[list[str] | None, typer.Option("--kind", "-k", help="Only consider nodes of this kind.")] = None,
    language: Annotated[str | None, typer.Option(help="Language name, when the extension is not .py.")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON.")] = False,
) -> None:
    """Find the construct that encloses a line range."""
    source = read_python_source(path, language)
    parser = PythonParser(backend=check_backend(backend), mode=mode, kinds=kind or None)
    context = parser.find_enclosing_context(source, start, end if end is not None else start)

    if as_json:
        typer.echo(context.model_dump_json() if context is not None else "null")
        return
    if context is None:
        console.print("[yellow]No enclosing context found[/yellow]")
        return
    _render_context(context)
