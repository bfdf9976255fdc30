from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class EdgeKind(StrEnum):
    ORDINARY = "ordinary"
    INHERITANCE = "inheritance"


class DependencyEdge(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: str
    target: str
    kind: EdgeKind = EdgeKind.ORDINARY


class RankedNode(BaseModel):
    name: str
    rank: int
    path: str | None = None


class GraphExport(BaseModel):
    nodes: list[RankedNode]
    edges: list[DependencyEdge]
