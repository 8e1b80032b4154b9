"""Visible subset of a sorted node list given the collapsed folders."""

from __future__ import annotations

from typing import AbstractSet, Iterable

from FileTree.models import Node


def project(nodes: Iterable[Node], collapsed: AbstractSet[str]) -> list[Node]:
    """Return the nodes visible when the folders in ``collapsed`` are closed.

    ``nodes`` must be in depth-first pre-order (see ``tree_sorter``). A
    collapsed folder stays visible; everything deeper is skipped until the
    next node back at the collapsed folder's depth.
    """
    visible: list[Node] = []
    suppress_depth: int | None = None

    for node in nodes:
        depth = node.depth

        # back at the collapsed folder's level: its subtree has ended
        if suppress_depth is not None and depth == suppress_depth:
            suppress_depth = None

        if node.full_path in collapsed:
            if suppress_depth is None or depth < suppress_depth:
                suppress_depth = depth

        if suppress_depth is not None and depth > suppress_depth:
            continue

        visible.append(node)

    return visible
