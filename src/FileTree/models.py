"""Data classes for FileTree."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

ROOT_PATH = "/"


class NodeKind(Enum):
    FILE = "file"
    FOLDER = "folder"


@dataclass(frozen=True)
class Node:
    id: int
    depth: int
    name: str
    full_path: str
    kind: NodeKind

    @property
    def is_folder(self) -> bool:
        return self.kind is NodeKind.FOLDER


@dataclass(frozen=True)
class Dirent:
    """Descriptor attached to a path in a file map. Content is opaque."""

    type: NodeKind
    content: str | None = None


# Absolute path -> descriptor. A missing descriptor is treated as a folder.
FileMap = dict[str, Union[Dirent, None]]


@dataclass(frozen=True)
class ExactName:
    """Hide entries whose final segment equals ``name``."""

    name: str


@dataclass(frozen=True)
class PathPattern:
    """Hide entries whose full path matches ``pattern`` (``re.search``)."""

    pattern: re.Pattern[str]


HiddenRule = Union[ExactName, PathPattern]


@dataclass(frozen=True)
class TraversalRoot:
    """Where a build starts and how depths are offset.

    Computed once per build and handed to both the builder and the sorter.
    """

    path: str
    hide_root: bool
    depth_offset: int
    show_global_root: bool

    @classmethod
    def from_options(cls, root_folder: str, hide_root: bool) -> TraversalRoot:
        show_global_root = root_folder == ROOT_PATH and not hide_root
        return cls(
            path=root_folder,
            hide_root=hide_root,
            depth_offset=1 if show_global_root else 0,
            show_global_root=show_global_root,
        )

    def contains(self, full_path: str) -> bool:
        """True if ``full_path`` is the root folder or lies below it."""
        if self.path == ROOT_PATH:
            return True
        return full_path == self.path or full_path.startswith(self.path + "/")


@dataclass(frozen=True)
class FileTreeState:
    file_list: tuple[Node, ...] = ()
    hidden_files: tuple[HiddenRule, ...] = ()
    root_folder: str = ROOT_PATH
    hide_root: bool = False


@dataclass
class RepoInfo:
    owner: str
    repo: str
    branch: str | None = None
    raw_url: str = ""
