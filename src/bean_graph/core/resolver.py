import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from bean_graph.core.extractors import DEFAULT_EXTRACTORS, Extractor, extract_candidates
from bean_graph.core.registry import ClassRegistry
from bean_graph.core.sources import SourceUnit
from bean_graph.models import EdgeKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassEdges:
    """Resolved edges of one class.

    ``dependents`` holds classes that point *to* this class (entity to
    repository bindings), everything else points away from it.
    """

    name: str
    dependencies: frozenset[str] = frozenset()
    inheritance: frozenset[str] = frozenset()
    dependents: frozenset[str] = frozenset()
    scanned_packages: tuple[str, ...] = ()


def resolve_candidates(candidates: Iterable[str | None], registry: ClassRegistry) -> frozenset[str]:
    """Keep the candidates that name a registered class; drop everything else."""
    return frozenset(c for c in candidates if c is not None and c in registry)


def resolve_class(
    unit: SourceUnit,
    registry: ClassRegistry,
    extractors: Sequence[Extractor] = DEFAULT_EXTRACTORS,
    keep_self_edges: bool = False,
) -> ClassEdges:
    if unit.name is None:
        raise ValueError(f"{unit.path} declares no class or interface")
    candidates = extract_candidates(unit, extractors)

    resolved: dict[tuple[EdgeKind, bool], set[str]] = {}
    for extractor in extractors:
        names = resolve_candidates(candidates[extractor.name], registry)
        resolved.setdefault((extractor.kind, extractor.reverse), set()).update(names)

    if not keep_self_edges:
        for names in resolved.values():
            if unit.name in names:
                logger.debug("Dropping self edge on %s", unit.name)
                names.discard(unit.name)

    scanned = tuple(candidates.get("component_scans", ()))
    return ClassEdges(
        name=unit.name,
        dependencies=frozenset(resolved.get((EdgeKind.ORDINARY, False), ())),
        inheritance=frozenset(resolved.get((EdgeKind.INHERITANCE, False), ())),
        dependents=frozenset(resolved.get((EdgeKind.ORDINARY, True), ())),
        scanned_packages=scanned,
    )


def resolve_all(
    registry: ClassRegistry,
    extractors: Sequence[Extractor] = DEFAULT_EXTRACTORS,
    keep_self_edges: bool = False,
) -> Mapping[str, ClassEdges]:
    """Resolve the edges of every registered class against the finished registry."""
    edges = {
        name: resolve_class(unit, registry, extractors, keep_self_edges=keep_self_edges)
        for name, unit in registry.units.items()
    }
    total = sum(len(e.dependencies) + len(e.inheritance) + len(e.dependents) for e in edges.values())
    logger.info("Resolved %d edges across %d classes", total, len(edges))
    return MappingProxyType(edges)
