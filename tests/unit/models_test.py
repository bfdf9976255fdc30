"""Unit tests for Pydantic models and configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from bean_graph.config import DEFAULT_EXCLUDED_DIRS, AnalysisConfig
from bean_graph.models import DependencyEdge, EdgeKind


class TestAnalysisConfig:
    def test_defaults(self, tmp_path: Path) -> None:
        config = AnalysisConfig(root=tmp_path)
        assert config.include_tests is False
        assert config.keep_self_edges is False
        assert config.rankdir == "LR"
        assert config.exclude_dirs == DEFAULT_EXCLUDED_DIRS

    def test_root_is_resolved(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        config = AnalysisConfig(root=Path("."))
        assert config.root == tmp_path.resolve()

    def test_rejects_unknown_rankdir(self, tmp_path: Path) -> None:
        with pytest.raises(ValidationError):
            AnalysisConfig(root=tmp_path, rankdir="diagonal")  # type: ignore[arg-type]

    def test_is_frozen(self, tmp_path: Path) -> None:
        config = AnalysisConfig(root=tmp_path)
        with pytest.raises(ValidationError):
            config.include_tests = True  # type: ignore[misc]


class TestDependencyEdge:
    def test_default_kind_is_ordinary(self) -> None:
        assert DependencyEdge(source="A", target="B").kind is EdgeKind.ORDINARY

    def test_edges_are_hashable_and_equal_by_value(self) -> None:
        edges = {
            DependencyEdge(source="A", target="B"),
            DependencyEdge(source="A", target="B", kind=EdgeKind.ORDINARY),
            DependencyEdge(source="A", target="B", kind=EdgeKind.INHERITANCE),
        }
        assert len(edges) == 2

    def test_kind_serializes_as_string(self) -> None:
        edge = DependencyEdge(source="A", target="B", kind=EdgeKind.INHERITANCE)
        assert edge.model_dump(mode="json") == {"source": "A", "target": "B", "kind": "inheritance"}
