"""Unit tests for Java source enumeration and loading."""

from pathlib import Path

import pytest

from bean_graph.core.sources import is_test_source, iter_java_files, load_sources


def _touch(root: Path, rel: str, content: str = "class X {}") -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


class TestIterJavaFiles:
    def test_finds_java_files_sorted(self, tmp_path: Path) -> None:
        _touch(tmp_path, "b/B.java")
        _touch(tmp_path, "a/A.java")
        _touch(tmp_path, "a/readme.md")
        files = list(iter_java_files(tmp_path))
        assert [f.name for f in files] == ["A.java", "B.java"]

    def test_skips_excluded_and_hidden_dirs(self, tmp_path: Path) -> None:
        _touch(tmp_path, "target/Gen.java")
        _touch(tmp_path, ".git/Obj.java")
        _touch(tmp_path, "app/App.java")
        assert [f.name for f in iter_java_files(tmp_path)] == ["App.java"]

    def test_skips_tests_by_default(self, tmp_path: Path) -> None:
        _touch(tmp_path, "src/main/java/App.java")
        _touch(tmp_path, "src/test/java/AppHelper.java")
        _touch(tmp_path, "src/main/java/AppTest.java")
        assert [f.name for f in iter_java_files(tmp_path)] == ["App.java"]

    def test_include_tests(self, tmp_path: Path) -> None:
        _touch(tmp_path, "src/main/java/App.java")
        _touch(tmp_path, "src/test/java/AppTest.java")
        names = sorted(f.name for f in iter_java_files(tmp_path, include_tests=True))
        assert names == ["App.java", "AppTest.java"]

    def test_missing_root(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            list(iter_java_files(tmp_path / "nope"))

    def test_root_must_be_directory(self, tmp_path: Path) -> None:
        path = _touch(tmp_path, "A.java")
        with pytest.raises(NotADirectoryError):
            list(iter_java_files(path))


class TestIsTestSource:
    @pytest.mark.parametrize(
        ("rel", "expected"),
        [
            ("src/main/java/shop/Order.java", False),
            ("src/test/java/shop/Order.java", True),
            ("src/main/java/shop/OrderTest.java", True),
            ("src/main/java/shop/OrderTests.java", True),
            ("src/main/java/shop/OrderIT.java", True),
            ("src/main/java/shop/Testimonial.java", False),
        ],
    )
    def test_classification(self, tmp_path: Path, rel: str, expected: bool) -> None:
        assert is_test_source(tmp_path / rel, tmp_path) is expected


class TestLoadSources:
    def test_loads_declared_name(self, tmp_path: Path) -> None:
        path = _touch(tmp_path, "Order.java", "package shop; public class Order {}")
        units, skipped = load_sources([path])
        assert skipped == []
        assert units[0].name == "Order"
        assert units[0].text.startswith("package shop;")
        assert not units[0].is_interface

    def test_interface_unit(self, tmp_path: Path) -> None:
        path = _touch(tmp_path, "Api.java", "public interface Api {}")
        units, _ = load_sources([path])
        assert units[0].is_interface

    def test_file_without_declaration_has_no_name(self, tmp_path: Path) -> None:
        path = _touch(tmp_path, "package-info.java", "package shop;")
        units, _ = load_sources([path])
        assert units[0].name is None

    def test_unreadable_file_is_skipped(self, tmp_path: Path) -> None:
        good = _touch(tmp_path, "A.java", "class A {}")
        units, skipped = load_sources([tmp_path / "Gone.java", good])
        assert [u.name for u in units] == ["A"]
        assert len(skipped) == 1
        assert skipped[0].path == tmp_path / "Gone.java"
