"""Relationship extractors: one strategy per dependency-injection idiom.

Each extractor takes a ``SourceUnit`` and returns candidate type names found
in the unit's primary declaration. Candidates are unresolved; the resolver
decides which of them are project types.

Markers are always read from a declaration's own ``modifiers`` node, so an
annotation mentioned in a comment or attached to a nested class never
triggers an extractor of the enclosing class.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from tree_sitter import Node

from bean_graph.core.ast import (
    annotation_name,
    annotation_names,
    annotation_nodes,
    children_of_type,
    descendants_of_type,
    field_text,
    has_modifier,
    string_literal_value,
    type_argument_names,
    type_list_names,
    type_name,
)
from bean_graph.core.sources import SourceUnit
from bean_graph.models import EdgeKind

logger = logging.getLogger(__name__)

REQUIRED_ARGS_MARKER = "RequiredArgsConstructor"
ALL_ARGS_MARKER = "AllArgsConstructor"
SETTER_MARKER = "Setter"
NON_NULL_MARKERS = frozenset({"NonNull"})
INJECTION_MARKERS = frozenset({"Autowired", "Inject"})
IMPORT_ANNOTATION = "Import"
COMPONENT_SCAN_ANNOTATION = "ComponentScan"
REPOSITORY_MARKER = "Repository"
REPOSITORY_SUFFIX = "Repository"

_BODY_TYPES = ("class_body", "interface_body")
_SUPERTYPE_CLAUSES = ("superclass", "super_interfaces", "extends_interfaces")

ExtractorFunc = Callable[[SourceUnit], list[str]]


@dataclass(frozen=True)
class Extractor:
    name: str
    func: ExtractorFunc
    kind: EdgeKind = EdgeKind.ORDINARY
    reverse: bool = False

    def __call__(self, unit: SourceUnit) -> list[str]:
        return self.func(unit)


# ---------------------------------------------------------------------------
# Member helpers
# ---------------------------------------------------------------------------


def _members(unit: SourceUnit, member_type: str) -> list[Node]:
    """Members of the declaration body, excluding those of nested types."""
    if unit.declaration is None:
        return []
    members: list[Node] = []
    for body in children_of_type(unit.declaration, *_BODY_TYPES):
        members.extend(children_of_type(body, member_type))
    return members


def _class_markers(unit: SourceUnit) -> frozenset[str]:
    if unit.declaration is None:
        return frozenset()
    return annotation_names(unit.declaration, unit.source)


def _carries_marker(member: Node, unit: SourceUnit, markers: Iterable[str]) -> bool:
    return not annotation_names(member, unit.source).isdisjoint(markers)


def _declared_type(member: Node, unit: SourceUnit) -> str | None:
    return type_name(member.child_by_field_name("type"), unit.source)


def _field_types(fields: Iterable[Node], unit: SourceUnit) -> list[str]:
    return [name for f in fields if (name := _declared_type(f, unit)) is not None]


def _instance_fields(unit: SourceUnit) -> list[Node]:
    return [f for f in _members(unit, "field_declaration") if not has_modifier(f, "static")]


def _parameter_types(node: Node, unit: SourceUnit) -> list[str]:
    parameters = node.child_by_field_name("parameters")
    if parameters is None:
        return []
    return _field_types(children_of_type(parameters, "formal_parameter"), unit)


def _annotation_arguments(unit: SourceUnit, annotation: str) -> list[Node]:
    if unit.declaration is None:
        return []
    arguments: list[Node] = []
    for node in annotation_nodes(unit.declaration):
        if annotation_name(node, unit.source) != annotation:
            continue
        argument_list = node.child_by_field_name("arguments")
        if argument_list is not None:
            arguments.append(argument_list)
    return arguments


def _string_arguments(unit: SourceUnit, annotation: str) -> list[str]:
    return [
        string_literal_value(literal, unit.source)
        for arguments in _annotation_arguments(unit, annotation)
        for literal in descendants_of_type(arguments, "string_literal")
    ]


def _class_literal_arguments(unit: SourceUnit, annotation: str) -> list[str]:
    names: list[str] = []
    for arguments in _annotation_arguments(unit, annotation):
        for literal in descendants_of_type(arguments, "class_literal"):
            if literal.named_children and (name := type_name(literal.named_children[0], unit.source)):
                names.append(name)
    return names


def _supertype_clauses(unit: SourceUnit) -> list[Node]:
    if unit.declaration is None:
        return []
    return children_of_type(unit.declaration, *_SUPERTYPE_CLAUSES)


# ---------------------------------------------------------------------------
# Extractors
# ---------------------------------------------------------------------------


def required_args_fields(unit: SourceUnit) -> list[str]:
    """``@NonNull`` fields of a class marked ``@RequiredArgsConstructor``."""
    if REQUIRED_ARGS_MARKER not in _class_markers(unit):
        return []
    fields = [f for f in _instance_fields(unit) if _carries_marker(f, unit, NON_NULL_MARKERS)]
    return _field_types(fields, unit)


def all_args_fields(unit: SourceUnit) -> list[str]:
    if ALL_ARGS_MARKER not in _class_markers(unit):
        return []
    return _field_types(_instance_fields(unit), unit)


def setter_fields(unit: SourceUnit) -> list[str]:
    if SETTER_MARKER not in _class_markers(unit):
        return []
    return _field_types(_instance_fields(unit), unit)


def autowired_fields(unit: SourceUnit) -> list[str]:
    fields = [f for f in _members(unit, "field_declaration") if _carries_marker(f, unit, INJECTION_MARKERS)]
    return _field_types(fields, unit)


def autowired_setters(unit: SourceUnit) -> list[str]:
    """Parameter types of injection-annotated methods."""
    types: list[str] = []
    for method in _members(unit, "method_declaration"):
        if _carries_marker(method, unit, INJECTION_MARKERS):
            types.extend(_parameter_types(method, unit))
    return types


def constructor_params(unit: SourceUnit) -> list[str]:
    types: list[str] = []
    for constructor in _members(unit, "constructor_declaration"):
        if field_text(constructor, "name", unit.source) == unit.name:
            types.extend(_parameter_types(constructor, unit))
    return types


def imported_types(unit: SourceUnit) -> list[str]:
    """Types named by ``@Import``, as string literals or class literals."""
    return _string_arguments(unit, IMPORT_ANNOTATION) + _class_literal_arguments(unit, IMPORT_ANNOTATION)


def component_scans(unit: SourceUnit) -> list[str]:
    return _string_arguments(unit, COMPONENT_SCAN_ANNOTATION)


def is_repository(unit: SourceUnit) -> bool:
    if not unit.is_interface or unit.name is None:
        return False
    return unit.name.endswith(REPOSITORY_SUFFIX) or REPOSITORY_MARKER in _class_markers(unit)


def repository_entities(unit: SourceUnit) -> list[str]:
    """Entity types a repository interface is bound to.

    Takes the first type argument of every generic supertype, following the
    ``Repository<Entity, Id>`` convention.
    """
    if not is_repository(unit):
        return []
    entities: list[str] = []
    for clause in _supertype_clauses(unit):
        for supertype in descendants_of_type(clause, "generic_type"):
            if supertype.parent is not None and supertype.parent.type == "type_arguments":
                continue
            arguments = type_argument_names(supertype, unit.source)
            if arguments:
                entities.append(arguments[0])
    return entities


def supertypes(unit: SourceUnit) -> list[str]:
    if is_repository(unit):
        return []
    names: list[str] = []
    for clause in _supertype_clauses(unit):
        names.extend(type_list_names(clause, unit.source))
    return names


DEFAULT_EXTRACTORS: tuple[Extractor, ...] = (
    Extractor("required_args_fields", required_args_fields),
    Extractor("all_args_fields", all_args_fields),
    Extractor("setter_fields", setter_fields),
    Extractor("autowired_fields", autowired_fields),
    Extractor("autowired_setters", autowired_setters),
    Extractor("constructor_params", constructor_params),
    Extractor("imported_types", imported_types),
    Extractor("component_scans", component_scans),
    Extractor("repository_entities", repository_entities, reverse=True),
    Extractor("supertypes", supertypes, kind=EdgeKind.INHERITANCE),
)


def get_extractors(names: Sequence[str] | None = None, exclude: Sequence[str] = ()) -> tuple[Extractor, ...]:
    known = {e.name for e in DEFAULT_EXTRACTORS}
    unknown = (set(names or ()) | set(exclude)) - known
    if unknown:
        raise ValueError(f"Unknown extractor(s) {sorted(unknown)}. Available: {sorted(known)}")
    selected = DEFAULT_EXTRACTORS if names is None else tuple(e for e in DEFAULT_EXTRACTORS if e.name in names)
    return tuple(e for e in selected if e.name not in exclude)


def extract_candidates(
    unit: SourceUnit, extractors: Sequence[Extractor] = DEFAULT_EXTRACTORS
) -> dict[str, list[str]]:
    """Run each extractor on ``unit``; returns candidates keyed by extractor name."""
    candidates = {extractor.name: extractor(unit) for extractor in extractors}
    logger.debug("Candidates for %s: %s", unit.name, {k: v for k, v in candidates.items() if v})
    return candidates
