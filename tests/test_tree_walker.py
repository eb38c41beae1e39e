"""Tests for directory traversal"""

import os
from unittest.mock import patch

import pytest

from phrasesearch.domain.models.scan_outcome import ItemKind, OutcomeStatus, ScanDiagnostics
from phrasesearch.infrastructure.file_filter import DirectoryExcludeFilter
from phrasesearch.infrastructure.tree_walker import walk


def _make_tree(root, files):
    for relative in files:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("content\n", encoding="utf-8")


def _walk_paths(root, **kwargs):
    visited = []
    walk(str(root), visited.append, **kwargs)
    return [os.path.relpath(p, root) for p in visited]


class TestWalk:
    """Tests for walk"""

    def test_visits_every_file(self, tmp_path):
        """Test that all regular files are visited in name order"""
        _make_tree(tmp_path, ["b.txt", "a/x.js", "a/deep/y.js", "c/z.js"])

        visited = _walk_paths(tmp_path)

        assert visited == [
            "b.txt",
            os.path.join("a", "x.js"),
            os.path.join("a", "deep", "y.js"),
            os.path.join("c", "z.js"),
        ]

    def test_excluded_directory_not_descended(self, tmp_path):
        """Test that node_modules is never entered"""
        _make_tree(tmp_path, ["src/a.js", "node_modules/pkg/index.js", "src/node_modules/b.js"])
        diagnostics = ScanDiagnostics()

        visited = _walk_paths(
            tmp_path,
            should_skip_dir=DirectoryExcludeFilter(["node_modules"]),
            diagnostics=diagnostics,
        )

        assert visited == [os.path.join("src", "a.js")]
        assert sorted(diagnostics.excluded_directories) == sorted(
            [str(tmp_path / "node_modules"), str(tmp_path / "src" / "node_modules")]
        )

    def test_wildcard_exclusion(self, tmp_path):
        """Test that '*cache' excludes 'mycache'"""
        _make_tree(tmp_path, ["mycache/a.js", "cached/b.js"])

        visited = _walk_paths(tmp_path, should_skip_dir=DirectoryExcludeFilter(["*cache"]))

        assert visited == [os.path.join("cached", "b.js")]

    def test_exclusion_applies_to_directories_only(self, tmp_path):
        """Test that a file with an excluded name is still visited"""
        _make_tree(tmp_path, ["dist"])

        visited = _walk_paths(tmp_path, should_skip_dir=DirectoryExcludeFilter(["dist"]))

        assert visited == ["dist"]

    def test_missing_root_recorded(self, tmp_path):
        """Test that a missing root is recorded, not raised"""
        diagnostics = ScanDiagnostics()
        visited = []

        walk(str(tmp_path / "missing"), visited.append, diagnostics=diagnostics)

        assert visited == []
        assert diagnostics.errors[0].kind == ItemKind.DIRECTORY

    def test_unreadable_directory_does_not_stop_siblings(self, tmp_path):
        """Test that a listing error is local to its directory"""
        _make_tree(tmp_path, ["bad/a.js", "good/b.js"])
        real_scandir = os.scandir
        bad = str(tmp_path / "bad")

        def fake_scandir(path):
            if path == bad:
                raise PermissionError("denied")
            return real_scandir(path)

        diagnostics = ScanDiagnostics()
        with patch("phrasesearch.infrastructure.tree_walker.os.scandir", side_effect=fake_scandir):
            visited = _walk_paths(tmp_path, diagnostics=diagnostics)

        assert visited == [os.path.join("good", "b.js")]
        assert [o.path for o in diagnostics.errors] == [bad]
        assert diagnostics.errors[0].status == OutcomeStatus.ERROR

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
    def test_broken_symlink_recorded(self, tmp_path):
        """Test that broken links are recorded and siblings still visited"""
        _make_tree(tmp_path, ["a.js"])
        try:
            os.symlink(tmp_path / "nowhere", tmp_path / "broken")
        except OSError:
            pytest.skip("cannot create symlinks")
        diagnostics = ScanDiagnostics()

        visited = _walk_paths(tmp_path, diagnostics=diagnostics)

        assert visited == ["a.js"]
        assert [o.path for o in diagnostics.errors] == [str(tmp_path / "broken")]
