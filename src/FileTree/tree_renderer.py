"""Plain-text rendering of a visible node list."""

from __future__ import annotations

from typing import AbstractSet, Iterable

from FileTree.models import Node

# Horizontal indent per depth level, in pixels (used by the Streamlit view)
NODE_PADDING_LEFT = 8

_INDENT = "  "
_COLLAPSED_MARKER = "▸ "
_EXPANDED_MARKER = "▾ "
_FILE_MARKER = "  "


def node_label(node: Node, collapsed: AbstractSet[str]) -> str:
    """Marker plus name: ``▸ src`` / ``▾ src`` for folders, ``  main.py`` for files."""
    if not node.is_folder:
        return f"{_FILE_MARKER}{node.name}"
    marker = _COLLAPSED_MARKER if node.full_path in collapsed else _EXPANDED_MARKER
    return f"{marker}{node.name}"


def render_lines(nodes: Iterable[Node], collapsed: AbstractSet[str]) -> list[str]:
    """One line per node, indented by its depth.

    Example output:
        ▾ /
          ▾ src
              main.py
          ▸ tests
            README.md
    """
    return [f"{_INDENT * node.depth}{node_label(node, collapsed)}" for node in nodes]


def render_text(nodes: Iterable[Node], collapsed: AbstractSet[str]) -> str:
    return "\n".join(render_lines(nodes, collapsed))
