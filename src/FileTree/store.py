"""File tree store: the built tree snapshot plus collapsed-folder state."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from FileTree.collapse_state import CollapseState
from FileTree.models import ROOT_PATH, FileMap, FileTreeState, Node, TraversalRoot
from FileTree.path_filter import DEFAULT_HIDDEN_RULES, RuleInput, to_rules
from FileTree.projection import project
from FileTree.tree_builder import build_nodes, normalize_path
from FileTree.tree_sorter import sort_nodes

logger = logging.getLogger(__name__)

StateListener = Callable[[FileTreeState], None]


class FileTreeStore:
    """Owns one file tree and its view state.

    Construct one per session/project and pass it to whatever renders it.
    The tree snapshot and the collapsed set are independent: collapsing a
    folder never rebuilds, and a rebuild only prunes the collapsed set.
    """

    def __init__(self) -> None:
        self._state = FileTreeState(hidden_files=DEFAULT_HIDDEN_RULES)
        self._state_listeners: list[StateListener] = []
        self._collapsed = CollapseState()

    @property
    def state(self) -> FileTreeState:
        return self._state

    @property
    def collapsed_folders(self) -> frozenset[str]:
        return self._collapsed.paths

    def subscribe_state(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with every new snapshot; returns an unsubscribe callable."""
        self._state_listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._state_listeners:
                self._state_listeners.remove(listener)

        return unsubscribe

    def subscribe_collapsed(
        self, listener: Callable[[frozenset], None]
    ) -> Callable[[], None]:
        return self._collapsed.subscribe(listener)

    def set_files(
        self,
        files: FileMap,
        root_folder: str = ROOT_PATH,
        hide_root: bool = False,
        extra_hidden_rules: Iterable[RuleInput] = (),
    ) -> None:
        """Rebuild the tree from ``files`` and prune stale collapsed folders."""
        hidden_files = DEFAULT_HIDDEN_RULES + tuple(to_rules(extra_hidden_rules))
        root = TraversalRoot.from_options(normalize_path(root_folder), hide_root)

        nodes = build_nodes(files, root, hidden_files)
        file_list = tuple(sort_nodes(root, nodes))
        logger.debug(
            "Rebuilt tree under %s: %d entries -> %d nodes",
            root.path,
            len(files),
            len(file_list),
        )

        self._state = FileTreeState(
            file_list=file_list,
            hidden_files=hidden_files,
            root_folder=root.path,
            hide_root=hide_root,
        )
        for listener in list(self._state_listeners):
            listener(self._state)

        self._collapsed.reconcile(file_list)

    def get_filtered_file_list(self) -> list[Node]:
        """Nodes currently visible, with collapsed subtrees elided."""
        return project(self._state.file_list, self._collapsed.paths)

    def toggle_folder(self, full_path: str) -> None:
        self._collapsed.toggle(full_path)

    def collapse_folder(self, full_path: str) -> None:
        self._collapsed.collapse(full_path)

    def expand_folder(self, full_path: str) -> None:
        self._collapsed.expand(full_path)

    def collapse_all(self) -> None:
        self._collapsed.collapse_all(self._state.file_list)

    def expand_all(self) -> None:
        self._collapsed.expand_all()

    def close(self) -> None:
        """Drop all subscribers."""
        self._state_listeners.clear()
        self._collapsed.clear_listeners()
