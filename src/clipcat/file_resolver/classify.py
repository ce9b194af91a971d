"""Classification of input tokens into literal paths, directories and search patterns."""

from __future__ import annotations

from pathlib import Path

from clipcat.file_resolver.types import InputKind

# Characters that indicate a token is a glob pattern rather than a literal path.
_GLOB_CHARS = frozenset("*?[")


def has_glob_chars(token: str) -> bool:
    """True if `token` contains a wildcard or a `{...}` brace group."""
    if any(c in token for c in _GLOB_CHARS):
        return True
    brace = token.find("{")
    return brace != -1 and "}" in token[brace + 1 :]


def classify_token(token: str) -> InputKind:
    """
    Decide how an input token is collected. Existing paths win over patterns, so a
    file literally named `*.txt` is collected as that one file.
    """
    path = Path(token)
    if path.is_dir():
        return InputKind.DIRECTORY
    if path.exists():
        return InputKind.LITERAL
    if has_glob_chars(token):
        return InputKind.SEARCH_PATTERN
    return InputKind.UNRESOLVABLE
