import logging
from dataclasses import dataclass

import networkx as nx

from bean_graph.core.graph import DependencyGraph

logger = logging.getLogger(__name__)


class CyclicDependencyError(Exception):
    """The dependency graph has at least one cycle, so no rank order exists."""

    def __init__(self, cycles: list[list[str]]) -> None:
        self.cycles = cycles
        rendered = "; ".join(" -> ".join([*cycle, cycle[0]]) for cycle in cycles)
        super().__init__(f"Dependency cycle(s) detected: {rendered}")

    @property
    def nodes(self) -> set[str]:
        return {node for cycle in self.cycles for node in cycle}


@dataclass(frozen=True)
class RankedGraph:
    graph: DependencyGraph
    order: tuple[str, ...]

    def rank(self, node: str) -> int:
        return int(self.graph.nodes[node]["rank"])

    @property
    def ranks(self) -> dict[str, int]:
        return {node: idx for idx, node in enumerate(self.order)}


def find_cycles(graph: DependencyGraph) -> list[list[str]]:
    """Groups of nodes that sit on a cycle: multi-node components and self loops."""
    cycles = [sorted(component) for component in nx.strongly_connected_components(graph) if len(component) > 1]
    cycles.extend([node] for node in nx.nodes_with_selfloops(graph))
    return sorted(cycles)


def rank_graph(graph: DependencyGraph) -> RankedGraph:
    """Assign every node its position in a topological order.

    Dependents are ordered before their dependencies, so an edge A -> B
    always gives ``rank(A) < rank(B)``. Ties break alphabetically, which keeps
    the ranking identical across runs on the same source tree.
    """
    cycles = find_cycles(graph)
    if cycles:
        logger.error("Cannot rank graph: %d cycle(s)", len(cycles))
        raise CyclicDependencyError(cycles)

    order = tuple(nx.lexicographical_topological_sort(graph))
    ranked = nx.MultiDiGraph(graph)
    for idx, node in enumerate(order):
        ranked.nodes[node]["rank"] = idx
    return RankedGraph(graph=nx.freeze(ranked), order=order)
