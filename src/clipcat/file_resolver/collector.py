"""
FileCollector: main entry point for file collection.

Resolves a mix of files, directories, and search patterns into a deduplicated,
sorted list of absolute file paths, applying the exclusion policy at every
visited entry.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator, Sequence

from clipcat.file_resolver.classify import classify_token
from clipcat.file_resolver.errors import CollectionError
from clipcat.file_resolver.exclude import ExcludeMatcher
from clipcat.file_resolver.patterns import matches, strip_curdir
from clipcat.file_resolver.types import CollectorConfig, CollectResult, InputKind, WalkAction

WarningHandler = Callable[[str], None]


class FileCollector:
    """
    Collects files for a list of input tokens. Each token is handled as:

    - Existing file: included directly, unless excluded.
    - Existing directory: walked recursively, pruning excluded directories.
    - Nonexistent token with glob characters: searched for across the whole tree
      below the working directory.
    - Anything else: skipped with a warning.
    """

    def __init__(self, config: CollectorConfig, matcher: ExcludeMatcher | None = None) -> None:
        self._config: CollectorConfig = config
        self._matcher: ExcludeMatcher = matcher if matcher is not None else ExcludeMatcher(config)

    def collect(
        self, tokens: Sequence[str], on_warning: WarningHandler | None = None
    ) -> CollectResult:
        """
        Resolve `tokens` into a `CollectResult`. Warnings are also passed to
        `on_warning` as soon as they happen. Raises `CollectionError` if the root of
        a walk cannot be listed.
        """
        seen: set[str] = set()
        result = CollectResult()

        def add(path: str) -> None:
            if path not in seen:
                seen.add(path)
                result.files.append(path)

        def warn(message: str) -> None:
            result.warnings.append(message)
            if on_warning is not None:
                on_warning(message)

        for token in tokens:
            kind = classify_token(token)
            if kind is InputKind.LITERAL:
                path = os.path.abspath(token)
                if not self._matcher.should_exclude(path, False):
                    add(path)
            elif kind is InputKind.DIRECTORY:
                for path in self._walk(token):
                    add(path)
            elif kind is InputKind.SEARCH_PATTERN:
                for path in self._search(token):
                    add(path)
            else:
                warn(f"Skipping non-existent path: {token}")

        result.files.sort()
        return result

    def _walk(self, root: str) -> Iterator[str]:
        """
        Walk `root` top-down, yielding absolute paths of files that survive the
        exclusion policy. Excluded directories are pruned in place so they are
        never entered. Listing errors below the root are skipped.
        """
        abs_root = os.path.abspath(root)
        if self._matcher.walk_action(abs_root, True) is not WalkAction.DESCEND:
            return

        def on_error(error: OSError) -> None:
            if error.filename is not None and os.path.abspath(error.filename) == abs_root:
                raise CollectionError(f"cannot read directory {root}: {error}") from error

        for dirpath, dirnames, filenames in os.walk(abs_root, onerror=on_error):
            dirnames[:] = sorted(
                d
                for d in dirnames
                if self._matcher.walk_action(os.path.join(dirpath, d), True)
                is WalkAction.DESCEND
            )
            for filename in sorted(filenames):
                path = os.path.join(dirpath, filename)
                if self._matcher.walk_action(path, False) is WalkAction.DESCEND:
                    yield path

    def _search(self, pattern: str) -> Iterator[str]:
        """
        Search the whole tree below the working directory for `pattern`. Patterns with
        a separator or a `**` segment match the relative path; others match the basename.
        """
        sep = os.sep
        pattern = pattern.replace("/", sep)
        path_aware = sep in pattern or "**" in pattern
        # "./*.go" stays anchored to the working directory.
        pattern = strip_curdir(pattern)
        ignore_case = self._config.ignore_case
        try:
            cwd = os.getcwd()
        except OSError as e:
            raise CollectionError(f"cannot determine the working directory: {e}") from e

        for path in self._walk(cwd):
            rel = os.path.relpath(path, cwd)
            target = rel if path_aware else os.path.basename(rel)
            if matches(pattern, target, ignore_case=ignore_case):
                yield path
