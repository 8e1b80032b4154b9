"""Flat path map -> unordered, depth-annotated node list."""

from __future__ import annotations

import logging
from typing import Iterable

from FileTree.models import (
    ROOT_PATH,
    FileMap,
    HiddenRule,
    Node,
    NodeKind,
    TraversalRoot,
)
from FileTree.path_filter import is_hidden

logger = logging.getLogger(__name__)


def split_segments(path: str) -> list[str]:
    """Split a path into its non-empty segments."""
    return [segment for segment in path.split("/") if segment]


def normalize_path(path: str) -> str:
    """Normalize to ``/a/b`` form: leading slash, no trailing or doubled slashes."""
    segments = split_segments(path)
    if not segments:
        return ROOT_PATH
    return "/" + "/".join(segments)


def build_nodes(
    files: FileMap,
    root: TraversalRoot,
    hidden_rules: Iterable[HiddenRule],
) -> list[Node]:
    """Build one node per visible file and folder under ``root``.

    The result is unordered; pass it through ``tree_sorter.sort_nodes``.

    A path listed as a file while also being an ancestor of other entries
    becomes a folder only. The global root node is only added when at least
    one entry is visible below it.
    """
    rules = tuple(hidden_rules)
    folders: dict[str, Node] = {}
    file_nodes: dict[str, Node] = {}
    next_id = 0

    if root.show_global_root:
        folders[ROOT_PATH] = Node(
            id=next_id, depth=0, name=ROOT_PATH, full_path=ROOT_PATH, kind=NodeKind.FOLDER
        )
        next_id += 1

    for file_path, dirent in files.items():
        segments = split_segments(file_path)
        if not segments or is_hidden(file_path, segments[-1], rules):
            continue

        is_file = dirent is not None and dirent.type is NodeKind.FILE
        current_path = ""
        depth = 0

        for i, name in enumerate(segments):
            current_path += f"/{name}"

            if not root.contains(current_path) or (
                root.hide_root and current_path == root.path
            ):
                continue

            node_depth = depth + root.depth_offset
            depth += 1

            if i == len(segments) - 1 and is_file:
                if current_path not in file_nodes:
                    file_nodes[current_path] = Node(
                        id=next_id,
                        depth=node_depth,
                        name=name,
                        full_path=current_path,
                        kind=NodeKind.FILE,
                    )
                    next_id += 1
            elif current_path not in folders:
                folders[current_path] = Node(
                    id=next_id,
                    depth=node_depth,
                    name=name,
                    full_path=current_path,
                    kind=NodeKind.FOLDER,
                )
                next_id += 1

    if root.show_global_root and len(folders) == 1 and not file_nodes:
        return []

    nodes = list(folders.values())
    for path, node in file_nodes.items():
        if path in folders:
            logger.debug("Dropping file %s: path is also a folder", path)
            continue
        nodes.append(node)
    return nodes
