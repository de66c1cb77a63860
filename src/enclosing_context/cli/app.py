import logging
from typing import Annotated

import typer

from enclosing_context.cli.find import find
from enclosing_context.cli.serve import serve_app
from enclosing_context.cli.validate import validate

app = typer.Typer(
    name="enclosing-context",
    help="Enclosing context: label a Python line range with the construct that contains it.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


app.command("find")(find)
app.command("validate")(validate)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
