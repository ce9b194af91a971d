"""Exclude-file handling: reads gitignore-style rule files and compiles them with pathspec."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pathspec

from clipcat.file_resolver.errors import ExcludeFileError


def read_exclude_lines(path: str | Path) -> list[str]:
    """
    Read every line of an exclude file, comments and blanks included; the rule
    compiler skips those itself. Raises `ExcludeFileError` if the file is missing,
    unreadable, or not UTF-8.
    """
    try:
        return Path(path).read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise ExcludeFileError(f"cannot read exclude file {path}: {e}") from e


def load_exclude_files(paths: Iterable[str | Path]) -> pathspec.GitIgnoreSpec | None:
    """
    Concatenate the rules of all exclude files, in order, into one gitignore spec
    so that a later file can negate a rule from an earlier one. Returns `None` when
    no file contributes an actual rule.
    """
    lines: list[str] = []
    for path in paths:
        lines.extend(read_exclude_lines(path))
    if not any(line.strip() and not line.lstrip().startswith("#") for line in lines):
        return None
    return pathspec.GitIgnoreSpec.from_lines(lines)
