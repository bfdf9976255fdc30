import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from tree_sitter import Node

from bean_graph.config import DEFAULT_EXCLUDED_DIRS
from bean_graph.core.ast import field_text, find_declaration, parse_java

logger = logging.getLogger(__name__)

JAVA_SUFFIX = ".java"
_TEST_DIR_NAMES = frozenset({"test", "tests", "androidTest"})
_TEST_FILE_SUFFIXES = ("Test.java", "Tests.java", "IT.java")


@dataclass(frozen=True)
class SourceUnit:
    path: Path
    source: bytes
    root: Node
    declaration: Node | None
    name: str | None

    @property
    def text(self) -> str:
        return self.source.decode("utf-8", errors="replace")

    @property
    def is_interface(self) -> bool:
        return self.declaration is not None and self.declaration.type == "interface_declaration"


@dataclass(frozen=True)
class SkippedSource:
    path: Path
    reason: str


def is_test_source(path: Path, root: Path) -> bool:
    if path.name.endswith(_TEST_FILE_SUFFIXES):
        return True
    try:
        parts = path.relative_to(root).parts[:-1]
    except ValueError:
        parts = path.parts[:-1]
    return any(part in _TEST_DIR_NAMES for part in parts)


def iter_java_files(
    root: str | Path,
    include_tests: bool = False,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> Iterator[Path]:
    """Yield every ``.java`` file under ``root`` in a stable, sorted order."""
    root_path = Path(root)
    if not root_path.exists():
        raise FileNotFoundError(f"Source root not found: {root}")
    if not root_path.is_dir():
        raise NotADirectoryError(f"Source root is not a directory: {root}")

    ignore = set(exclude_dirs)
    for current, dirs, files in os.walk(root_path):
        dirs[:] = sorted(d for d in dirs if d not in ignore and not d.startswith("."))
        for filename in sorted(files):
            if not filename.endswith(JAVA_SUFFIX):
                continue
            path = Path(current) / filename
            if not include_tests and is_test_source(path, root_path):
                logger.debug("Skipping test source %s", path)
                continue
            yield path


def load_source_unit(path: Path, source_bytes: bytes) -> SourceUnit:
    tree = parse_java(source_bytes)
    root = tree.root_node
    if root.has_error:
        logger.debug("Syntax errors in %s; analyzing the recoverable parts", path)
    declaration = find_declaration(root)
    name = field_text(declaration, "name", source_bytes) if declaration is not None else None
    return SourceUnit(path=path, source=source_bytes, root=root, declaration=declaration, name=name)


def load_sources(paths: Iterable[Path]) -> tuple[list[SourceUnit], list[SkippedSource]]:
    """Read and parse every path; unreadable or unparseable files are skipped, not fatal."""
    units: list[SourceUnit] = []
    skipped: list[SkippedSource] = []
    for path in paths:
        try:
            source_bytes = path.read_bytes()
            units.append(load_source_unit(path, source_bytes))
        except (OSError, ValueError) as exc:
            logger.warning("Skipping %s: %s", path, exc)
            skipped.append(SkippedSource(path=path, reason=str(exc)))
    return units, skipped
