"""Depth-first, folder-first ordering of tree nodes."""

from __future__ import annotations

import logging
import re
import unicodedata

from FileTree.models import ROOT_PATH, Node, NodeKind, TraversalRoot

logger = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"(\d+)")


def _fold(text: str) -> str:
    """Case- and accent-insensitive form of ``text``."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def natural_key(name: str) -> tuple:
    """Collation key comparing digit runs by value: ``file2`` < ``file10``.

    Digit runs sort before letters. Names that differ only in case or accents
    are tie-broken by their raw text.
    """
    parts = []
    for chunk in _DIGITS_RE.split(_fold(name)):
        if not chunk:
            continue
        if chunk.isdigit():
            parts.append((0, int(chunk), ""))
        else:
            parts.append((1, 0, chunk))
    return (tuple(parts), name)


def sort_key(node: Node) -> tuple:
    """Sibling order: folders before files, then natural name order."""
    return (0 if node.kind is NodeKind.FOLDER else 1, natural_key(node.name))


def parent_path(full_path: str) -> str:
    """Path up to the last ``/``; top-level paths have ``/`` as parent."""
    parent = full_path[: full_path.rfind("/")]
    return parent or ROOT_PATH


def sort_nodes(root: TraversalRoot, nodes: list[Node]) -> list[Node]:
    """Order ``nodes`` so every folder precedes its sorted descendants."""
    logger.debug("Sorting %d nodes under %s", len(nodes), root.path)

    ordered = sorted(nodes, key=sort_key)
    node_map: dict[str, Node] = {}
    for node in ordered:
        node_map[node.full_path] = node

    children: dict[str, list[Node]] = {}
    for node in ordered:
        if node.full_path == root.path:
            continue
        parent = parent_path(node.full_path)
        if parent != root.path and parent not in node_map:
            # Orphans hang directly off the traversal root
            parent = root.path
        children.setdefault(parent, []).append(node)

    sorted_list: list[Node] = []

    def visit(node: Node) -> None:
        sorted_list.append(node)
        if node.kind is not NodeKind.FOLDER:
            return
        for child in children.get(node.full_path, []):
            visit(child)

    if root.hide_root or root.path not in node_map:
        for child in children.get(root.path, []):
            visit(child)
    else:
        visit(node_map[root.path])

    return sorted_list
