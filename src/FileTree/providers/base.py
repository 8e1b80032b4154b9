"""Abstract base class for file map providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from FileTree.models import Dirent, FileMap, NodeKind


class FileMapProvider(ABC):
    """Base class for sources that produce a flat path -> Dirent map."""

    @abstractmethod
    def list_file_map(self, source: Any) -> FileMap:
        """Return every file and folder of ``source`` keyed by absolute path."""


def file_dirent() -> Dirent:
    return Dirent(type=NodeKind.FILE)


def folder_dirent() -> Dirent:
    return Dirent(type=NodeKind.FOLDER)
