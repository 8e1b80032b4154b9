"""Tests for url_parser module."""

import pytest

from FileTree.url_parser import URLParseError, parse_repo_url


class TestGitHubURLs:
    def test_basic(self):
        info = parse_repo_url("https://github.com/owner/repo")
        assert info.owner == "owner"
        assert info.repo == "repo"
        assert info.branch is None
        assert info.raw_url == "https://github.com/owner/repo"

    def test_with_branch(self):
        info = parse_repo_url("https://github.com/owner/repo/tree/main")
        assert info.branch == "main"

    def test_with_branch_slashes(self):
        info = parse_repo_url("https://github.com/owner/repo/tree/feature/my-branch")
        assert info.branch == "feature/my-branch"

    def test_dot_git_suffix(self):
        assert parse_repo_url("https://github.com/owner/repo.git").repo == "repo"

    def test_trailing_slash(self):
        assert parse_repo_url("https://github.com/owner/repo/").repo == "repo"

    def test_whitespace_stripped(self):
        assert parse_repo_url("  https://github.com/owner/repo  ").repo == "repo"


class TestInvalidURLs:
    def test_empty(self):
        with pytest.raises(URLParseError, match="empty"):
            parse_repo_url("")

    def test_no_scheme(self):
        with pytest.raises(URLParseError, match="no scheme"):
            parse_repo_url("github.com/owner/repo")

    def test_unsupported_scheme(self):
        with pytest.raises(URLParseError, match="Unsupported scheme"):
            parse_repo_url("ftp://github.com/owner/repo")

    def test_unsupported_host(self):
        with pytest.raises(URLParseError, match="Unsupported host"):
            parse_repo_url("https://gitlab.com/owner/repo")

    def test_missing_repo(self):
        with pytest.raises(URLParseError, match="owner/repo"):
            parse_repo_url("https://github.com/owner")
