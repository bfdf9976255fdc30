from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from bean_graph.config import AnalysisConfig
from bean_graph.core.analyze import AnalysisResult, analyze_directory
from bean_graph.core.extractors import get_extractors
from bean_graph.core.layering import CyclicDependencyError
from bean_graph.render.dot import to_dot, to_export

console = Console(stderr=True)


class OutputFormat(StrEnum):
    DOT = "dot"
    JSON = "json"


def _render(result: AnalysisResult, config: AnalysisConfig, output_format: OutputFormat) -> str:
    if output_format is OutputFormat.JSON:
        return to_export(result).model_dump_json(indent=2)
    return to_dot(result, rankdir=config.rankdir, bgcolor=config.bgcolor)


def _print_summary(result: AnalysisResult) -> None:
    graph = result.graph.graph
    console.print(
        f"[green]Analyzed[/green] {len(result.registry)} classes: "
        f"{graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges"
    )
    for conflict in result.registry.conflicts:
        console.print(
            f"[yellow]Duplicate[/yellow] {conflict.name}: {conflict.kept} replaces {conflict.replaced}"
        )
    for skipped in result.registry.skipped:
        console.print(f"[yellow]Skipped[/yellow] {skipped.path}: {skipped.reason}")


def analyze(
    root: Annotated[Path, typer.Argument(help="Root directory of the Java sources.", exists=True, file_okay=False)],
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Write the graph to this file.")] = None,
    output_format: Annotated[OutputFormat, typer.Option("--format", help="Output format.")] = OutputFormat.DOT,
    include_tests: Annotated[bool, typer.Option(help="Also analyze test sources.")] = False,
    keep_self_edges: Annotated[bool, typer.Option(help="Keep edges from a class to itself.")] = False,
    rankdir: Annotated[str, typer.Option(help="Graphviz layout direction (TB, BT, LR, RL).")] = "LR",
    bgcolor: Annotated[str, typer.Option(help="Graphviz background color.")] = "white",
    exclude_extractor: Annotated[
        list[str] | None, typer.Option("--exclude-extractor", help="Disable an extractor by name.")
    ] = None,
) -> None:
    """Build the dependency graph of a Java source tree."""
    try:
        config = AnalysisConfig(
            root=root,
            include_tests=include_tests,
            keep_self_edges=keep_self_edges,
            rankdir=rankdir.upper(),
            bgcolor=bgcolor,
        )
        extractors = get_extractors(exclude=exclude_extractor or ())
    except ValueError as exc:
        console.print(f"[red]Invalid options:[/red] {exc}")
        raise typer.Exit(code=2) from None

    try:
        result = analyze_directory(config, extractors)
    except CyclicDependencyError as exc:
        console.print("[red]Dependency cycle detected; no ranking is possible.[/red]")
        for cycle in exc.cycles:
            console.print(f"  {' -> '.join([*cycle, cycle[0]])}")
        console.print(f"{len(exc.nodes)} classes are on a cycle")
        raise typer.Exit(code=1) from None

    rendered = _render(result, config, output_format)
    if output is None:
        typer.echo(rendered)
    else:
        try:
            output.write_text(rendered + "\n", encoding="utf-8")
        except OSError as exc:
            console.print(f"[red]Cannot write {output}:[/red] {exc.strerror or exc}")
            raise typer.Exit(code=2) from None
        console.print(f"[green]Wrote[/green] {output}")
    _print_summary(result)
