"""Streamlit explorer UI for FileTree."""

from __future__ import annotations

import html

import streamlit as st

from FileTree.models import FileMap, Node
from FileTree.path_filter import compile_rule_input, parse_rule_input, validate_patterns
from FileTree.providers.github import GitHubError, GitHubProvider, RateLimitError
from FileTree.providers.local import LocalDirectoryProvider
from FileTree.store import FileTreeStore
from FileTree.tree_renderer import NODE_PADDING_LEFT, node_label
from FileTree.url_parser import URLParseError, parse_repo_url

_SOURCE_GITHUB = "GitHub repository"
_SOURCE_LOCAL = "Local directory"


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def _get_store() -> FileTreeStore:
    """One store per browser session."""
    if "store" not in st.session_state:
        st.session_state["store"] = FileTreeStore()
    return st.session_state["store"]


def main() -> None:
    st.set_page_config(
        page_title="FileTree",
        page_icon="📁",
        layout="wide",
    )
    st.title("FileTree")
    st.caption("Browse a GitHub repository or a local directory as a collapsible tree.")

    store = _get_store()

    source = st.radio(
        "Source",
        [_SOURCE_GITHUB, _SOURCE_LOCAL],
        index=1 if _qp("path") else 0,
        horizontal=True,
    )

    if source == _SOURCE_GITHUB:
        url = st.text_input(
            "Repository URL",
            value=_qp("url"),
            placeholder="https://github.com/owner/repo",
        )
        github_token = st.text_input(
            "GitHub Token (optional)",
            type="password",
            help="Required for private repos. Increases rate limit from 60 to 5,000 requests/hour.",
        )
    else:
        local_path = st.text_input(
            "Directory",
            value=_qp("path"),
            placeholder="/path/to/project",
        )

    col_root, col_hide = st.columns([4, 1])
    with col_root:
        root_folder = st.text_input("Root folder", value=_qp("root", "/"))
    with col_hide:
        st.markdown("<div style='height: 1.8rem'></div>", unsafe_allow_html=True)
        hide_root = st.checkbox("Hide root", value=_qp("hide_root") in ("1", "true"))

    hidden_raw = st.text_input(
        "Hidden files (names or /regex/, comma-separated)",
        value=_qp("hidden"),
        placeholder=r".DS_Store, /\.pyc$/, //dist//",
        help=(
            "Plain names hide files and folders with exactly that name. "
            "Entries wrapped in slashes are regexes matched against the full path."
        ),
    )
    hidden_entries = parse_rule_input(hidden_raw)
    for err in validate_patterns(hidden_entries):
        st.error(f"Invalid regex: {err}")
    hidden_rules = compile_rule_input(hidden_entries)

    if st.button("Load", type="primary", use_container_width=True):
        if source == _SOURCE_GITHUB:
            file_map = _load_github(url, github_token)
        else:
            file_map = _load_local(local_path)
        if file_map is not None:
            st.session_state["file_map"] = file_map

    file_map = st.session_state.get("file_map")
    if file_map is None:
        return

    store.set_files(file_map, root_folder, hide_root, hidden_rules)
    _show_tree(store)


def _load_github(url: str, token: str) -> FileMap | None:
    if not url:
        st.error("Please enter a repository URL.")
        return None
    try:
        repo_info = parse_repo_url(url)
    except URLParseError as exc:
        st.error(f"Invalid URL: {exc}")
        return None

    provider = GitHubProvider(token=token.strip() or None)
    try:
        with st.spinner("Fetching file list..."):
            return provider.list_file_map(repo_info)
    except RateLimitError as exc:
        st.error(str(exc))
        st.info("Tip: Add a GitHub token to increase your rate limit.")
    except GitHubError as exc:
        st.error(str(exc))
    except Exception as exc:
        st.error(f"Unexpected error: {exc}")
    return None


def _load_local(path: str) -> FileMap | None:
    if not path:
        st.error("Please enter a directory.")
        return None
    try:
        return LocalDirectoryProvider().list_file_map(path)
    except OSError as exc:
        st.error(str(exc))
    return None


def _show_tree(store: FileTreeStore) -> None:
    """Render the visible nodes with a toggle button per folder."""
    state = store.state
    if not state.file_list:
        st.warning("No files to show under this root folder.")
        return

    col_collapse, col_expand, col_info = st.columns([1, 1, 4])
    with col_collapse:
        st.button("Collapse all", on_click=store.collapse_all, use_container_width=True)
    with col_expand:
        st.button("Expand all", on_click=store.expand_all, use_container_width=True)
    with col_info:
        folders = sum(1 for node in state.file_list if node.is_folder)
        st.caption(
            f"{len(state.file_list) - folders} files, {folders} folders, "
            f"{len(store.collapsed_folders)} collapsed"
        )

    collapsed = store.collapsed_folders
    for node in store.get_filtered_file_list():
        _show_node(store, node, collapsed)


def _show_node(store: FileTreeStore, node: Node, collapsed: frozenset[str]) -> None:
    if node.is_folder:
        # buttons cannot be padded, so indent the label with figure spaces
        st.button(
            "\u2007" * node.depth + node_label(node, collapsed),
            key=f"node:{node.full_path}",
            on_click=store.toggle_folder,
            args=(node.full_path,),
            type="tertiary",
        )
    else:
        padding = node.depth * NODE_PADDING_LEFT
        st.markdown(
            f"<div style='padding-left: {padding}px; font-family: monospace'>"
            f"{html.escape(node_label(node, collapsed))}</div>",
            unsafe_allow_html=True,
        )


if __name__ == "__main__":
    main()
