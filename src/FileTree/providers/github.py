"""GitHub REST API provider."""

from __future__ import annotations

import logging
import time

import requests

from FileTree.models import FileMap, RepoInfo
from FileTree.providers.base import FileMapProvider, file_dirent, folder_dirent

logger = logging.getLogger(__name__)


class GitHubError(Exception):
    """Raised for GitHub API errors."""


class RateLimitError(GitHubError):
    """Raised when GitHub rate limit is exceeded."""

    def __init__(self, reset_at: int):
        self.reset_at = reset_at
        wait = max(0, reset_at - int(time.time()))
        super().__init__(
            f"GitHub API rate limit exceeded. Resets in {wait} seconds."
        )


class GitHubProvider(FileMapProvider):
    """Lists a repository's files and folders through the Git Trees API."""

    API_BASE = "https://api.github.com"

    def __init__(self, token: str | None = None):
        self.session = requests.Session()
        self.session.headers["Accept"] = "application/vnd.github+json"
        self.session.headers["User-Agent"] = "FileTree/1.0"
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def _check_rate_limit(self, response: requests.Response) -> None:
        remaining = response.headers.get("X-RateLimit-Remaining")
        if remaining is not None and int(remaining) == 0:
            reset_at = int(response.headers.get("X-RateLimit-Reset", 0))
            raise RateLimitError(reset_at)

    def _api_get(self, path: str, params: dict | None = None) -> dict:
        resp = self.session.get(f"{self.API_BASE}{path}", params=params, timeout=30)
        self._check_rate_limit(resp)

        if resp.status_code == 404:
            raise GitHubError(
                "Repository not found. Check the URL, or provide a token for private repos."
            )
        if resp.status_code == 401:
            raise GitHubError("Authentication failed. Check your GitHub token.")
        if resp.status_code == 403:
            raise GitHubError(
                "Access denied. The token may lack permissions, or rate limit exceeded."
            )
        resp.raise_for_status()
        return resp.json()

    def get_default_branch(self, repo_info: RepoInfo) -> str:
        data = self._api_get(f"/repos/{repo_info.owner}/{repo_info.repo}")
        return data["default_branch"]

    def _get_tree(self, repo_info: RepoInfo, ref: str, recursive: bool) -> dict:
        return self._api_get(
            f"/repos/{repo_info.owner}/{repo_info.repo}/git/trees/{ref}",
            params={"recursive": "1"} if recursive else None,
        )

    def list_file_map(self, repo_info: RepoInfo) -> FileMap:
        """Map ``/{repo}/{path}`` to a file or folder Dirent for every tree item."""
        if not repo_info.branch:
            repo_info.branch = self.get_default_branch(repo_info)

        files: FileMap = {}
        self._collect_tree(repo_info, repo_info.branch, f"/{repo_info.repo}", files)
        return files

    def _collect_tree(
        self, repo_info: RepoInfo, ref: str, prefix: str, files: FileMap
    ) -> None:
        """Add the tree at ``ref`` under ``prefix``.

        A truncated recursive listing is replaced by this level's plain
        listing, and each subdirectory is then collected on its own.
        """
        data = self._get_tree(repo_info, ref, recursive=True)
        if not data.get("truncated"):
            _add_items(data, prefix, files)
            return

        logger.info("Listing of %s is truncated; walking subdirectories", prefix)
        data = self._get_tree(repo_info, ref, recursive=False)
        _add_items(data, prefix, files)

        for item in data.get("tree", []):
            if item["type"] != "tree":
                continue
            subdir = f"{prefix}/{item['path']}"
            try:
                self._collect_tree(repo_info, item["sha"], subdir, files)
            except RateLimitError:
                raise
            except (GitHubError, requests.RequestException) as exc:
                logger.warning("Skipping %s: %s", subdir, exc)


def _add_items(data: dict, prefix: str, files: FileMap) -> None:
    for item in data.get("tree", []):
        path = f"{prefix}/{item['path']}"
        if item["type"] == "blob":
            files[path] = file_dirent()
        elif item["type"] == "tree":
            files[path] = folder_dirent()
        # "commit" items are submodules; they have no listing here
