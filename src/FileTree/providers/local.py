"""Local directory provider."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from FileTree.models import FileMap
from FileTree.providers.base import FileMapProvider, file_dirent, folder_dirent

logger = logging.getLogger(__name__)


class LocalDirectoryProvider(FileMapProvider):
    """Lists a directory on disk under the virtual root ``/{directory name}``."""

    def __init__(self, show_hidden: bool = False):
        self.show_hidden = show_hidden

    def list_file_map(self, directory: Path | str) -> FileMap:
        directory = Path(directory).resolve()
        if not directory.is_dir():
            raise NotADirectoryError(f"Not a directory: {directory}")

        root = f"/{directory.name}" if directory.name else ""
        files: FileMap = {root or "/": folder_dirent()}
        pending: list[tuple[Path, str]] = [(directory, root)]

        while pending:
            current, virtual = pending.pop()
            try:
                with os.scandir(current) as entries:
                    for entry in entries:
                        if not self.show_hidden and entry.name.startswith("."):
                            continue
                        child = f"{virtual}/{entry.name}"
                        try:
                            is_dir = entry.is_dir(follow_symlinks=False)
                        except OSError:
                            is_dir = False
                        if is_dir:
                            files[child] = folder_dirent()
                            pending.append((Path(entry.path), child))
                        else:
                            files[child] = file_dirent()
            except OSError as exc:
                logger.warning("Cannot list %s: %s", current, exc)
        return files
