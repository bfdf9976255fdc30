from collections.abc import Iterator

from tree_sitter import Node, Tree
from tree_sitter_language_pack import get_parser

JAVA = "java"

_ANNOTATION_TYPES = ("marker_annotation", "annotation")


def parse_java(source_bytes: bytes) -> Tree:
    parser = get_parser(JAVA)
    return parser.parse(source_bytes)


def iter_descendants(node: Node) -> Iterator[Node]:
    """Yield ``node`` and every node below it in document order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def descendants_of_type(node: Node, *node_types: str) -> list[Node]:
    wanted = set(node_types)
    return [n for n in iter_descendants(node) if n.type in wanted]


def children_of_type(node: Node, *node_types: str) -> list[Node]:
    wanted = set(node_types)
    return [child for child in node.children if child.type in wanted]


def node_text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def field_text(node: Node, field_name: str, source: bytes) -> str | None:
    child = node.child_by_field_name(field_name)
    return node_text(child, source) if child is not None else None


def string_literal_value(node: Node, source: bytes) -> str:
    """Return the contents of a string literal without its surrounding quotes."""
    return source[node.start_byte + 1 : node.end_byte - 1].decode("utf-8", errors="replace")


def type_name(node: Node | None, source: bytes) -> str | None:
    """Simple name of a type node, or None for primitives and ``void``.

    ``List<Order>`` yields ``List``, ``com.shop.Order`` yields ``Order`` and
    ``Order[]`` yields ``Order``.
    """
    if node is None:
        return None
    if node.type == "type_identifier":
        return node_text(node, source)
    if node.type == "generic_type":
        return type_name(node.named_children[0], source) if node.named_children else None
    if node.type == "scoped_type_identifier":
        identifiers = children_of_type(node, "type_identifier")
        return node_text(identifiers[-1], source) if identifiers else None
    if node.type == "array_type":
        return type_name(node.child_by_field_name("element"), source)
    return None


def type_argument_names(node: Node, source: bytes) -> list[str]:
    """Names of the direct type arguments of a generic type node.

    ``JpaRepository<Order, Long>`` yields ``["Order", "Long"]``; anything that
    is not a generic type yields an empty list.
    """
    if node.type != "generic_type":
        return []
    names: list[str] = []
    for arguments in children_of_type(node, "type_arguments"):
        for argument in arguments.named_children:
            name = type_name(argument, source)
            if name is not None:
                names.append(name)
    return names


def type_list_names(node: Node, source: bytes) -> list[str]:
    """Names of the types directly listed in an ``extends``/``implements`` clause."""
    names: list[str] = []
    for child in node.named_children:
        if child.type == "type_list":
            names.extend(type_list_names(child, source))
            continue
        name = type_name(child, source)
        if name is not None:
            names.append(name)
    return names


def find_declaration(root: Node) -> Node | None:
    """First class declaration in the file, else the first interface declaration."""
    for declaration_type in ("class_declaration", "interface_declaration"):
        for node in iter_descendants(root):
            if node.type == declaration_type:
                return node
    return None


def annotation_nodes(declaration: Node) -> list[Node]:
    """Annotations attached to ``declaration`` through its own modifiers."""
    annotations: list[Node] = []
    for modifiers in children_of_type(declaration, "modifiers"):
        annotations.extend(children_of_type(modifiers, *_ANNOTATION_TYPES))
    return annotations


def annotation_name(annotation: Node, source: bytes) -> str:
    name = field_text(annotation, "name", source) or ""
    return name.rsplit(".", 1)[-1]


def annotation_names(declaration: Node, source: bytes) -> frozenset[str]:
    return frozenset(annotation_name(a, source) for a in annotation_nodes(declaration))


def has_modifier(declaration: Node, keyword: str) -> bool:
    for modifiers in children_of_type(declaration, "modifiers"):
        if any(child.type == keyword for child in modifiers.children):
            return True
    return False
