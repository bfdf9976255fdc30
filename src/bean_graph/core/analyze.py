import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from bean_graph.config import AnalysisConfig
from bean_graph.core.extractors import DEFAULT_EXTRACTORS, Extractor
from bean_graph.core.graph import DependencyGraph, assemble_graph
from bean_graph.core.layering import RankedGraph, rank_graph
from bean_graph.core.registry import ClassRegistry, build_registry
from bean_graph.core.resolver import ClassEdges, resolve_all
from bean_graph.core.sources import SkippedSource, SourceUnit, iter_java_files, load_sources

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    registry: ClassRegistry
    edges: Mapping[str, ClassEdges]
    graph: RankedGraph

    @property
    def component_scans(self) -> dict[str, tuple[str, ...]]:
        return {name: e.scanned_packages for name, e in self.edges.items() if e.scanned_packages}


def build_dependency_graph(
    registry: ClassRegistry,
    extractors: Sequence[Extractor] = DEFAULT_EXTRACTORS,
    keep_self_edges: bool = False,
) -> tuple[Mapping[str, ClassEdges], DependencyGraph]:
    edges = resolve_all(registry, extractors, keep_self_edges=keep_self_edges)
    return edges, assemble_graph(edges)


def analyze_sources(
    units: Iterable[SourceUnit],
    skipped: Iterable[SkippedSource] = (),
    extractors: Sequence[Extractor] = DEFAULT_EXTRACTORS,
    keep_self_edges: bool = False,
) -> AnalysisResult:
    """Run registry, resolution, assembly and ranking over already loaded units.

    Raises ``CyclicDependencyError`` when the resulting graph cannot be ranked.
    """
    registry = build_registry(units, skipped)
    edges, graph = build_dependency_graph(registry, extractors, keep_self_edges=keep_self_edges)
    return AnalysisResult(registry=registry, edges=edges, graph=rank_graph(graph))


def analyze_directory(
    config: AnalysisConfig,
    extractors: Sequence[Extractor] = DEFAULT_EXTRACTORS,
) -> AnalysisResult:
    paths = list(iter_java_files(config.root, config.include_tests, config.exclude_dirs))
    logger.info("Found %d Java source files under %s", len(paths), config.root)
    units, skipped = load_sources(paths)
    return analyze_sources(units, skipped, extractors, keep_self_edges=config.keep_self_edges)
