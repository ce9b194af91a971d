"""Configuration and result types for file collection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class CollectorConfig:
    """
    Exclusion policy shared by `ExcludeMatcher` and `FileCollector`.

    `excludes` are ad-hoc glob patterns (any match excludes, no negation).
    `exclude_files` are read as gitignore rule files, in order.
    `ignore_case` applies to the ad-hoc patterns and to search patterns only;
    gitignore rules stay case-sensitive.
    """

    excludes: tuple[str, ...] = ()
    exclude_files: tuple[str, ...] = ()
    ignore_case: bool = False


class InputKind(Enum):
    """How an input token is turned into files."""

    LITERAL = "literal"
    DIRECTORY = "directory"
    SEARCH_PATTERN = "search_pattern"
    UNRESOLVABLE = "unresolvable"


class WalkAction(Enum):
    """What the walker does with a visited entry."""

    DESCEND = "descend"
    """Keep the entry: descend into a directory, accept a file."""

    SKIP_ENTRY = "skip_entry"
    """Drop a single excluded file."""

    SKIP_SUBTREE = "skip_subtree"
    """Prune an excluded directory and everything below it."""


@dataclass
class CollectResult:
    """Sorted absolute file paths plus any warnings raised along the way."""

    files: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
