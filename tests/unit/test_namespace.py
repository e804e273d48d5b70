#!/usr/bin/env python3
"""
Tests for top-level directory grouping.
"""

import os

import pytest

from core.model import FileModel
from core.namespace import build_namespace_tree, is_grouped_directory, top_level_directory


class TestGroupedDirectories:

    @pytest.mark.parametrize("name", [
        "Tests", "tests", "test", "MyApp.Tests", "Shop.Test", "test_data", "UnitTests", "IntegrationTest",
        ".git", ".vs",
    ])
    def test_excluded(self, name):
        assert not is_grouped_directory(name)

    @pytest.mark.parametrize("name", ["Models", "Contest", "Attestation", "Latest", "Protests", "Views"])
    def test_grouped(self, name):
        assert is_grouped_directory(name)


class TestNamespaceTree:

    def test_files_grouped_by_first_directory(self, tmp_path):
        root = str(tmp_path)
        files = [
            FileModel(path=os.path.join(root, "Program.cs")),
            FileModel(path=os.path.join(root, "Models", "Order.cs")),
            FileModel(path=os.path.join(root, "Models", "Deep", "Line.cs")),
            FileModel(path=os.path.join(root, "Views", "Main.xaml")),
        ]
        tree = build_namespace_tree(files, root)
        assert [fm.path for fm in tree.files] == [files[0].path]
        assert list(tree.children) == ["Models", "Views"]
        assert tree.children["Models"].files == files[1:3]

    def test_top_level_directory(self, tmp_path):
        root = str(tmp_path)
        assert top_level_directory(os.path.join(root, "A.cs"), root) == ""
        assert top_level_directory(os.path.join(root, "Core", "X", "A.cs"), root) == "Core"
