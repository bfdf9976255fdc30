"""Graphviz node and edge attributes per class and edge kind."""

from __future__ import annotations

from bean_graph.core.extractors import is_repository
from bean_graph.core.sources import SourceUnit
from bean_graph.models import EdgeKind

NODE_STYLES: dict[str, dict[str, str]] = {
    "class": {"shape": "box", "color": "#3572A5", "style": "rounded"},
    "interface": {"shape": "ellipse", "color": "#178600"},
    "repository": {"shape": "cylinder", "color": "#B07219"},
}

EDGE_STYLES: dict[EdgeKind, dict[str, str]] = {
    EdgeKind.ORDINARY: {"style": "solid", "color": "#555555", "arrowhead": "normal"},
    EdgeKind.INHERITANCE: {"style": "dashed", "color": "#888888", "arrowhead": "empty"},
}

_DEFAULT_NODE_STYLE = NODE_STYLES["class"]


def node_kind(unit: SourceUnit | None) -> str:
    if unit is None:
        return "class"
    if is_repository(unit):
        return "repository"
    if unit.is_interface:
        return "interface"
    return "class"


def node_style(kind: str) -> dict[str, str]:
    return dict(NODE_STYLES.get(kind, _DEFAULT_NODE_STYLE))


def edge_style(kind: EdgeKind) -> dict[str, str]:
    return dict(EDGE_STYLES[kind])
