"""
ExcludeMatcher: decides whether a walked path is excluded.

Two rule sources are consulted, in order:

1. Gitignore rules loaded from exclude files (full gitignore semantics via pathspec,
   always case-sensitive).
2. Ad-hoc exclude patterns, OR'd together. Their shape decides what they match:
   - `name/` or `glob/` (trailing separator): directories and everything below them.
   - `dir/file.txt` (contains a separator): the full relative path of a file.
   - `file.txt` (no separator): the basename of a file, at any depth.
"""

from __future__ import annotations

import os

import pathspec

from clipcat.file_resolver.gitignore import load_exclude_files
from clipcat.file_resolver.patterns import matches, strip_curdir
from clipcat.file_resolver.types import CollectorConfig, WalkAction

_DIR_GLOB_CHARS = frozenset("*?[{")


class ExcludeMatcher:
    """
    Exclusion policy compiled from a `CollectorConfig`. Exclude files are read once,
    at construction; a missing or unreadable file raises `ExcludeFileError`.
    """

    def __init__(self, config: CollectorConfig) -> None:
        self._config: CollectorConfig = config
        self._gitignore: pathspec.GitIgnoreSpec | None = load_exclude_files(
            config.exclude_files
        )
        sep = os.sep
        # Patterns are normalized once: trimmed, native separators, blanks dropped.
        # Each is paired with whether it matches the full relative path; a leading
        # "./" is dropped but keeps the pattern anchored.
        self._patterns: list[tuple[str, bool]] = []
        for p in config.excludes:
            native = p.strip().replace("/", sep)
            pattern = strip_curdir(native)
            if pattern:
                self._patterns.append((pattern, sep in native.rstrip(sep)))

    @property
    def config(self) -> CollectorConfig:
        return self._config

    def walk_action(self, path: str, is_dir: bool) -> WalkAction:
        """Translate `should_exclude` into what the walker should do with the entry."""
        if not self.should_exclude(path, is_dir):
            return WalkAction.DESCEND
        return WalkAction.SKIP_SUBTREE if is_dir else WalkAction.SKIP_ENTRY

    def should_exclude(self, path: str, is_dir: bool) -> bool:
        """
        True if `path` (absolute, or relative to the working directory) is excluded.
        The working directory itself is never excluded.
        """
        sep = os.sep
        try:
            rel = os.path.relpath(path)
        except ValueError:
            # Different drive on Windows; there is no relative form.
            rel = path
        rel = rel.replace("/", sep)
        if rel == os.curdir:
            return False

        if self._gitignore is not None and _gitignore_excludes(self._gitignore, rel, is_dir):
            return True

        if not self._patterns:
            return False

        ignore_case = self._config.ignore_case
        rel_cmp = rel.lower() if ignore_case else rel
        base_cmp = os.path.basename(rel_cmp)

        for raw, path_aware in self._patterns:
            pattern = raw.lower() if ignore_case else raw

            if pattern.endswith(sep):
                if self._dir_pattern_excludes(pattern.rstrip(sep), rel_cmp, base_cmp, is_dir):
                    return True
                continue

            # File-shaped patterns never exclude directories, so the walk continues
            # into them.
            if is_dir:
                continue
            if path_aware:
                if matches(pattern, rel_cmp):
                    return True
            elif matches(pattern, base_cmp):
                return True

        return False

    @staticmethod
    def _dir_pattern_excludes(dir_pattern: str, rel: str, base: str, is_dir: bool) -> bool:
        sep = os.sep
        if not dir_pattern:
            return False
        if not any(c in dir_pattern for c in _DIR_GLOB_CHARS) and sep not in dir_pattern:
            # Bare directory name: the directory itself at any depth, and anything
            # below a path segment with that name.
            if is_dir and (rel == dir_pattern or base == dir_pattern):
                return True
            if rel.startswith(dir_pattern + sep):
                return True
            return f"{sep}{dir_pattern}{sep}" in rel
        # Glob or multi-segment directory pattern: an entry is excluded when it, or
        # any of its ancestors, matches "<pattern>/*".
        child_pattern = dir_pattern + sep + "*"
        parts = rel.split(sep)
        return any(
            matches(child_pattern, sep.join(parts[: i + 1])) for i in range(1, len(parts))
        )


def _gitignore_excludes(spec: pathspec.GitIgnoreSpec, rel: str, is_dir: bool) -> bool:
    posix = rel.replace(os.sep, "/")
    # A trailing slash lets directory-only rules ("build/") apply to directories.
    if is_dir:
        posix += "/"
    return spec.match_file(posix)
