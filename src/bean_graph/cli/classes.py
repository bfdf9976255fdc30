from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from bean_graph.config import AnalysisConfig
from bean_graph.core.registry import build_registry
from bean_graph.core.sources import iter_java_files, load_sources
from bean_graph.render.styles import node_kind

console = Console()


def classes(
    root: Annotated[Path, typer.Argument(help="Root directory of the Java sources.", exists=True, file_okay=False)],
    include_tests: Annotated[bool, typer.Option(help="Also list test sources.")] = False,
) -> None:
    """List the classes and interfaces known to the analysis."""
    config = AnalysisConfig(root=root, include_tests=include_tests)
    units, skipped = load_sources(iter_java_files(config.root, config.include_tests, config.exclude_dirs))
    registry = build_registry(units, skipped)

    table = Table(show_lines=False)
    for header in ("name", "kind", "path"):
        table.add_column(header)
    for name in sorted(registry):
        unit = registry.units[name]
        table.add_row(name, node_kind(unit), str(unit.path.relative_to(config.root)))
    console.print(table)
    console.print(f"({len(registry)} rows)")

    for conflict in registry.conflicts:
        console.print(f"[yellow]Duplicate[/yellow] {conflict.name}: {conflict.kept} replaces {conflict.replaced}")
