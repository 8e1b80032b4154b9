"""Hidden-path rules: exact file names and regex path patterns."""

from __future__ import annotations

import logging
import re
from typing import Iterable, Union

from FileTree.models import ExactName, HiddenRule, PathPattern

logger = logging.getLogger(__name__)

# Generated-artifact directories hidden from every tree
DEFAULT_HIDDEN_RULES: tuple[HiddenRule, ...] = (
    PathPattern(re.compile(r"/node_modules/")),
    PathPattern(re.compile(r"/\.next")),
    PathPattern(re.compile(r"/\.astro")),
)

RuleInput = Union[HiddenRule, re.Pattern, str]


def rule_matches(rule: HiddenRule, path: str, name: str) -> bool:
    """Evaluate a single rule against a path and its final segment."""
    if isinstance(rule, ExactName):
        return name == rule.name
    return rule.pattern.search(path) is not None


def is_hidden(path: str, name: str, rules: Iterable[HiddenRule]) -> bool:
    """Return True if any rule hides ``path`` (first match wins)."""
    return any(rule_matches(rule, path, name) for rule in rules)


def parse_rule_input(raw: str) -> list[str]:
    """Split a comma-separated rule string into a list of stripped entries."""
    if not raw or not raw.strip():
        return []
    return [p.strip() for p in raw.split(",") if p.strip()]


def is_delimited_pattern(entry: str) -> bool:
    """True for ``/regex/`` entries typed into the hidden-files box."""
    return len(entry) > 2 and entry.startswith("/") and entry.endswith("/")


def validate_patterns(entries: list[str]) -> list[str]:
    """Return a list of error messages for ``/regex/`` entries that fail to compile.

    Undelimited entries are exact names and always valid.
    """
    errors: list[str] = []
    for entry in entries:
        if not is_delimited_pattern(entry):
            continue
        try:
            re.compile(entry[1:-1])
        except re.error as exc:
            errors.append(f"`{entry}`: {exc}")
    return errors


def compile_rule_input(entries: list[str]) -> list[RuleInput]:
    """Turn parsed text entries into rule inputs.

    ``/regex/`` entries become compiled patterns matched against the full
    path (invalid ones are skipped); anything else stays an exact name.
    """
    items: list[RuleInput] = []
    for entry in entries:
        if not is_delimited_pattern(entry):
            items.append(entry)
            continue
        try:
            items.append(re.compile(entry[1:-1]))
        except re.error as exc:
            logger.warning("Skipping invalid hidden-path pattern %r: %s", entry, exc)
    return items


def to_rules(items: Iterable[RuleInput]) -> list[HiddenRule]:
    """Convert rule inputs into tagged rules.

    Strings are always exact file names; only compiled patterns match paths.
    """
    rules: list[HiddenRule] = []
    for item in items:
        if isinstance(item, (ExactName, PathPattern)):
            rules.append(item)
        elif isinstance(item, re.Pattern):
            rules.append(PathPattern(item))
        else:
            rules.append(ExactName(item))
    return rules
