from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from enclosing_context.cli._common import check_backend, read_python_source
from enclosing_context.parsers.python import PythonParser

console = Console()


def validate(
    path: Annotated[Path, typer.Argument(help="Path to a Python file.")],
    backend: Annotated[str | None, typer.Option(help="Parse backend: ast, interpreter or tree-sitter.")] = None,
    language: Annotated[str | None, typer.Option(help="Language name, when the extension is not .py.")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON.")] = False,
) -> None:
    """Check that a Python file parses."""
    source = read_python_source(path, language)
    result = PythonParser(backend=check_backend(backend)).dry_run(source)

    if as_json:
        typer.echo(result.model_dump_json())
    elif result.valid:
        console.print(f"[green]Valid[/green] {path}", soft_wrap=True)
    else:
        message = f"[red]Invalid[/red] {escape(str(path))}: {escape(result.error)}"
        console.print(message, highlight=False, soft_wrap=True)

    if not result.valid:
        raise typer.Exit(code=1)
