import logging
from collections.abc import Mapping

import networkx as nx

from bean_graph.core.resolver import ClassEdges
from bean_graph.models import DependencyEdge, EdgeKind

logger = logging.getLogger(__name__)

# Frozen MultiDiGraph; edge keys are EdgeKind values so (source, target, kind) is unique.
DependencyGraph = nx.MultiDiGraph


def _add_edge(graph: nx.MultiDiGraph, source: str, target: str, kind: EdgeKind) -> None:
    graph.add_node(source)
    graph.add_node(target)
    graph.add_edge(source, target, key=kind.value, kind=kind)


def assemble_graph(class_edges: Mapping[str, ClassEdges]) -> DependencyGraph:
    """Build the dependency graph; every analyzed class is a node even without edges."""
    graph = nx.MultiDiGraph()
    for name in class_edges:
        graph.add_node(name)

    for name, edges in class_edges.items():
        for target in sorted(edges.dependencies):
            _add_edge(graph, name, target, EdgeKind.ORDINARY)
        for target in sorted(edges.inheritance):
            _add_edge(graph, name, target, EdgeKind.INHERITANCE)
        for source in sorted(edges.dependents):
            _add_edge(graph, source, name, EdgeKind.ORDINARY)

    logger.info("Assembled graph with %d nodes and %d edges", graph.number_of_nodes(), graph.number_of_edges())
    return nx.freeze(graph)


def iter_edges(graph: DependencyGraph) -> list[DependencyEdge]:
    edges = [DependencyEdge(source=u, target=v, kind=EdgeKind(k)) for u, v, k in graph.edges(keys=True)]
    return sorted(edges, key=lambda e: (e.source, e.target, e.kind.value))


def edges_of_kind(graph: DependencyGraph, kind: EdgeKind) -> set[tuple[str, str]]:
    return {(u, v) for u, v, k in graph.edges(keys=True) if k == kind.value}
