import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from bean_graph.cli.analyze import analyze
from bean_graph.cli.classes import classes

app = typer.Typer(
    name="bean-graph",
    help="Bean Graph CLI — dependency graphs of Spring/Lombok Java code.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log per-class detail.")] = False,
) -> None:
    """Analyze Java sources and render their dependency graph."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


app.command("analyze")(analyze)
app.command("classes")(classes)


def main() -> None:
    app()
