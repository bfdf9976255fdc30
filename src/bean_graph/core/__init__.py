from bean_graph.core.analyze import (
    AnalysisResult,
    analyze_directory,
    analyze_sources,
    build_dependency_graph,
)
from bean_graph.core.extractors import DEFAULT_EXTRACTORS, Extractor, get_extractors
from bean_graph.core.graph import DependencyGraph, assemble_graph, iter_edges
from bean_graph.core.layering import CyclicDependencyError, RankedGraph, find_cycles, rank_graph
from bean_graph.core.registry import ClassRegistry, DuplicateConflict, Registered, build_registry
from bean_graph.core.resolver import ClassEdges, resolve_all
from bean_graph.core.sources import SkippedSource, SourceUnit, iter_java_files, load_sources

__all__ = [
    "DEFAULT_EXTRACTORS",
    "AnalysisResult",
    "ClassEdges",
    "ClassRegistry",
    "CyclicDependencyError",
    "DependencyGraph",
    "DuplicateConflict",
    "Extractor",
    "RankedGraph",
    "Registered",
    "SkippedSource",
    "SourceUnit",
    "analyze_directory",
    "analyze_sources",
    "assemble_graph",
    "build_dependency_graph",
    "build_registry",
    "find_cycles",
    "get_extractors",
    "iter_edges",
    "iter_java_files",
    "load_sources",
    "rank_graph",
    "resolve_all",
]
