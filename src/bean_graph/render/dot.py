"""Serialize an analysis result as Graphviz DOT or as a JSON document."""

from __future__ import annotations

import pydot

from bean_graph.core.analyze import AnalysisResult
from bean_graph.core.graph import iter_edges
from bean_graph.models import GraphExport, RankedNode
from bean_graph.render.styles import edge_style, node_kind, node_style


def _quoted(name: str) -> str:
    # Bare ids such as Node or Graph are read as DOT keywords.
    return f'"{name}"'


def to_pydot(result: AnalysisResult, rankdir: str = "LR", bgcolor: str = "white") -> pydot.Dot:
    """Build a ``pydot.Dot`` with nodes in rank order and edges sorted.

    The output depends only on the graph, so unchanged sources always give
    byte-identical DOT text.
    """
    dot = pydot.Dot(graph_type="digraph", rankdir=rankdir, bgcolor=bgcolor)
    ranked = result.graph
    for node in ranked.order:
        unit = result.registry.get(node)
        attrs = node_style(node_kind(unit))
        attrs["rank"] = str(ranked.rank(node))
        attrs["label"] = node
        if unit is not None:
            attrs["tooltip"] = str(unit.path)
        dot.add_node(pydot.Node(_quoted(node), **attrs))

    for edge in iter_edges(ranked.graph):
        dot.add_edge(pydot.Edge(_quoted(edge.source), _quoted(edge.target), **edge_style(edge.kind)))
    return dot


def to_dot(result: AnalysisResult, rankdir: str = "LR", bgcolor: str = "white") -> str:
    return to_pydot(result, rankdir, bgcolor).to_string()


def to_export(result: AnalysisResult) -> GraphExport:
    ranked = result.graph
    ranks = ranked.ranks
    nodes = []
    for node in ranked.order:
        unit = result.registry.get(node)
        nodes.append(RankedNode(name=node, rank=ranks[node], path=str(unit.path) if unit else None))
    return GraphExport(nodes=nodes, edges=iter_edges(ranked.graph))
