"""Tests for building, saving and searching the file index."""

import json
from pathlib import Path

import pytest

from indexer.file_index import (
    FileIndex,
    IndexedFile,
    IndexNotFoundError,
    build_index,
    is_excluded,
)


@pytest.fixture
def project(tmp_path, monkeypatch):
    """Small source tree; cwd is the project root so paths stay relative."""
    monkeypatch.chdir(tmp_path)
    files = {
        "src/app.ts": "export {}",
        "src/util/strings.ts": "export {}",
        "src/util/strings.test.ts": "test",
        "src/node_modules/pkg/index.js": "module",
        "src/debug.log": "log",
        "docs/README.md": "# docs",
        "docs/big.md": "x" * 2048,
    }
    for rel, content in files.items():
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return tmp_path


class TestIsExcluded:
    def test_component_match(self):
        assert is_excluded(Path("node_modules/pkg/a.js"), ["node_modules"])

    def test_glob_match(self):
        assert is_excluded(Path("logs/app.log"), ["*.log"])

    def test_not_excluded(self):
        assert not is_excluded(Path("src/app.ts"), ["node_modules", "*.log"])


class TestBuildIndex:
    def test_walks_and_excludes(self, project):
        files = build_index(["./src", "./docs"], exclude_patterns=["node_modules", "*.log"])
        paths = [f.path for f in files]
        assert "src/app.ts" in paths
        assert "src/util/strings.ts" in paths
        assert "docs/README.md" in paths
        assert not any("node_modules" in p for p in paths)
        assert not any(p.endswith(".log") for p in paths)
        assert paths == sorted(paths)

    def test_include_extensions(self, project):
        files = build_index(["./src", "./docs"], include_extensions=["md"])
        assert {f.ext for f in files} == {".md"}

    def test_max_file_size(self, project):
        files = build_index(["./docs"], max_file_size=1024)
        assert [f.name for f in files] == ["README.md"]

    def test_missing_root_is_skipped(self, project):
        assert build_index(["./does-not-exist"]) == []

    def test_overlapping_roots_deduplicated(self, project):
        files = build_index(["./src", "./src/util"])
        paths = [f.path for f in files]
        assert len(paths) == len(set(paths))

    def test_record_fields(self, project):
        files = build_index(["./docs"], include_extensions=[".md"], max_file_size=100)
        assert files == [IndexedFile(path="docs/README.md", name="README.md", ext=".md")]

    def test_absolute_root_under_cwd_stored_relative(self, project):
        files = build_index([Path.cwd() / "docs"], include_extensions=[".md"], max_file_size=100)
        assert [f.path for f in files] == ["docs/README.md"]

    def test_root_outside_cwd_keeps_absolute_path(self, project, tmp_path_factory):
        outside = tmp_path_factory.mktemp("outside")
        (outside / "notes.md").write_text("x")
        files = build_index([outside])
        assert [f.path for f in files] == [(outside / "notes.md").as_posix()]


class TestFileIndex:
    def test_load_missing_raises(self, tmp_path):
        with pytest.raises(IndexNotFoundError):
            FileIndex(tmp_path / "index" / "files.json").load()

    def test_save_writes_flat_json_list(self, tmp_path):
        index = FileIndex(tmp_path / "index" / "files.json")
        index.save([IndexedFile(path="src/a.ts", name="a.ts", ext=".ts")])
        data = json.loads(index.index_file.read_text())
        assert data == [{"path": "src/a.ts", "name": "a.ts", "ext": ".ts"}]
        assert index.count() == 1

    def test_search_names_only(self, tmp_path):
        index = FileIndex(tmp_path / "files.json")
        index.save(
            [
                IndexedFile(path="strings/a.ts", name="a.ts", ext=".ts"),
                IndexedFile(path="src/Strings.ts", name="Strings.ts", ext=".ts"),
                IndexedFile(path="docs/strings.md", name="strings.md", ext=".md"),
            ]
        )
        assert [f.path for f in index.search("strings")] == ["src/Strings.ts", "docs/strings.md"]

    def test_search_ext_filter_and_limit(self, tmp_path):
        index = FileIndex(tmp_path / "files.json")
        index.save([IndexedFile(path=f"f{i}.ts", name=f"f{i}.ts", ext=".ts") for i in range(5)])
        assert len(index.search("f", ext="ts", limit=3)) == 3
        assert index.search("f", ext=".md") == []
