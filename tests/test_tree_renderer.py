"""Tests for tree_renderer module."""

from FileTree.models import Dirent, NodeKind
from FileTree.store import FileTreeStore
from FileTree.tree_renderer import node_label, render_lines, render_text

FILE = Dirent(type=NodeKind.FILE)


def _store():
    store = FileTreeStore()
    store.set_files({"/src/main.py": FILE, "/tests/test_main.py": FILE, "/README.md": FILE})
    return store


class TestNodeLabel:
    def test_labels(self):
        store = _store()
        store.collapse_folder("/tests")
        labels = {
            n.full_path: node_label(n, store.collapsed_folders)
            for n in store.state.file_list
        }
        assert labels["/src"] == "▾ src"
        assert labels["/tests"] == "▸ tests"
        assert labels["/README.md"] == "  README.md"


class TestRenderLines:
    def test_expanded(self):
        store = _store()
        lines = render_lines(store.get_filtered_file_list(), store.collapsed_folders)
        assert lines == [
            "▾ /",
            "  ▾ src",
            "      main.py",
            "  ▾ tests",
            "      test_main.py",
            "    README.md",
        ]

    def test_collapsed(self):
        store = _store()
        store.collapse_folder("/tests")
        text = render_text(store.get_filtered_file_list(), store.collapsed_folders)
        assert text == "\n".join([
            "▾ /",
            "  ▾ src",
            "      main.py",
            "  ▸ tests",
            "    README.md",
        ])

    def test_empty(self):
        assert render_lines([], frozenset()) == []
        assert render_text([], frozenset()) == ""
