"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from tree_sitter import Parser
from tree_sitter_language_pack import get_parser

from bean_graph.core.sources import SourceUnit, load_source_unit

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------

JavaProject = Callable[[dict[str, str]], Path]


def make_unit(source: str, path: str = "Sample.java") -> SourceUnit:
    """Parse a Java snippet into a SourceUnit without touching the disk."""
    return load_source_unit(Path(path), source.encode("utf-8"))


@pytest.fixture
def java_parser() -> Parser:
    """Return a tree-sitter parser for Java."""
    return get_parser("java")


@pytest.fixture
def java_project(tmp_path: Path) -> JavaProject:
    """Write ``{relative_path: source}`` under a fresh source root and return the root."""

    def _write(files: dict[str, str]) -> Path:
        root = tmp_path / "src" / "main" / "java"
        root.mkdir(parents=True, exist_ok=True)
        for rel_path, source in files.items():
            path = root / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(source, encoding="utf-8")
        return root

    return _write


SHOP_SOURCES: dict[str, str] = {
    "shop/Order.java": """
package shop;

import jakarta.persistence.Entity;

@Entity
public class Order {
    private Long id;
    private String customer;
}
""",
    "shop/OrderRepository.java": """
package shop;

import org.springframework.data.jpa.repository.JpaRepository;

public interface OrderRepository extends JpaRepository<Order, Long> {
}
""",
    "shop/OrderService.java": """
package shop;

import lombok.NonNull;
import lombok.RequiredArgsConstructor;

@RequiredArgsConstructor
public class OrderService {
    @NonNull
    private OrderRepository orderRepository;
    private String region = "eu";
}
""",
    "shop/OrderController.java": """
package shop;

import org.springframework.beans.factory.annotation.Autowired;

public class OrderController {
    @Autowired
    private OrderService orderService;
}
""",
    "shop/Clock.java": """
package shop;

public class Clock {
    public long now() { return System.currentTimeMillis(); }
}
""",
}


@pytest.fixture
def shop_project(java_project: JavaProject) -> Path:
    return java_project(SHOP_SOURCES)
