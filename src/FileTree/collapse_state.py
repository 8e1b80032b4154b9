"""Collapsed-folder view state that outlives tree rebuilds."""

from __future__ import annotations

from typing import Callable, Iterable

from FileTree.models import Node

Listener = Callable[[frozenset], None]


class CollapseState:
    """Set of collapsed folder paths.

    Every mutation installs a new frozenset; listeners are called with it
    only when the contents actually change.
    """

    def __init__(self) -> None:
        self._paths: frozenset[str] = frozenset()
        self._listeners: list[Listener] = []

    @property
    def paths(self) -> frozenset[str]:
        return self._paths

    def is_collapsed(self, full_path: str) -> bool:
        return full_path in self._paths

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def clear_listeners(self) -> None:
        self._listeners.clear()

    def _set(self, paths: frozenset[str]) -> None:
        if paths == self._paths:
            return
        self._paths = paths
        for listener in list(self._listeners):
            listener(paths)

    def toggle(self, full_path: str) -> None:
        if full_path in self._paths:
            self._set(self._paths - {full_path})
        else:
            self._set(self._paths | {full_path})

    def collapse(self, full_path: str) -> None:
        if full_path in self._paths:
            return
        self._set(self._paths | {full_path})

    def expand(self, full_path: str) -> None:
        if full_path not in self._paths:
            return
        self._set(self._paths - {full_path})

    def collapse_all(self, nodes: Iterable[Node]) -> None:
        self._set(frozenset(node.full_path for node in nodes if node.is_folder))

    def expand_all(self) -> None:
        self._set(frozenset())

    def reconcile(self, nodes: Iterable[Node]) -> None:
        """Drop collapsed paths that are no longer folders in ``nodes``."""
        folders = {node.full_path for node in nodes if node.is_folder}
        self._set(self._paths & folders)
