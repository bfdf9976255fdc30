import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from bean_graph.core.sources import SkippedSource, SourceUnit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Registered:
    name: str
    path: Path


@dataclass(frozen=True)
class DuplicateConflict:
    """Two files declare the same type name; ``kept`` replaced ``replaced``."""

    name: str
    kept: Path
    replaced: Path


RegistrationOutcome = Registered | DuplicateConflict


@dataclass(frozen=True)
class ClassRegistry:
    units: Mapping[str, SourceUnit] = field(default_factory=lambda: MappingProxyType({}))
    conflicts: tuple[DuplicateConflict, ...] = ()
    skipped: tuple[SkippedSource, ...] = ()

    def __contains__(self, name: object) -> bool:
        return name in self.units

    def __iter__(self) -> Iterator[str]:
        return iter(self.units)

    def __len__(self) -> int:
        return len(self.units)

    def get(self, name: str) -> SourceUnit | None:
        return self.units.get(name)

    def names(self) -> frozenset[str]:
        return frozenset(self.units)


def build_registry(units: Iterable[SourceUnit], skipped: Iterable[SkippedSource] = ()) -> ClassRegistry:
    """Map every declared type name to its source unit.

    Units without a class or interface declaration are left out. When two
    files declare the same name the later one wins and the collision is
    reported as a ``DuplicateConflict``.
    """
    entries: dict[str, SourceUnit] = {}
    outcomes: list[RegistrationOutcome] = []
    for unit in units:
        if unit.name is None:
            logger.debug("No class or interface declaration in %s", unit.path)
            continue
        outcomes.append(_register(entries, unit.name, unit))

    conflicts = tuple(o for o in outcomes if isinstance(o, DuplicateConflict))
    logger.info("Registered %d classes (%d duplicate names)", len(entries), len(conflicts))
    return ClassRegistry(
        units=MappingProxyType(entries),
        conflicts=conflicts,
        skipped=tuple(skipped),
    )


def _register(entries: dict[str, SourceUnit], name: str, unit: SourceUnit) -> RegistrationOutcome:
    previous = entries.get(name)
    entries[name] = unit
    if previous is None:
        return Registered(name=name, path=unit.path)
    logger.warning(
        "Duplicate type name %s: %s replaces %s; the earlier class is not analyzed",
        name,
        unit.path,
        previous.path,
    )
    return DuplicateConflict(name=name, kept=unit.path, replaced=previous.path)
