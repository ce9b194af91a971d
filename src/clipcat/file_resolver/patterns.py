"""
Glob pattern matching for exclude and search patterns.

Two grammars share one translator:

- Simple globs (`*`, `?`, `[...]`) match a single string where `*` and `?` never
  cross a path separator.
- Recursive globs, selected whenever a pattern contains `**` or `{`, add `**`
  segments that span any number of directories and `{a,b}` brace alternation.

Patterns are translated to anchored regular expressions and cached. Matching
is a pure string predicate and never touches the filesystem.
"""

from __future__ import annotations

import os
import re
from functools import lru_cache

_POSIX_CLASSES: dict[str, str] = {
    "alpha": "a-zA-Z",
    "digit": "0-9",
    "alnum": "a-zA-Z0-9",
    "upper": "A-Z",
    "lower": "a-z",
    "space": r" \t\n\r\f\v",
    "xdigit": "0-9A-Fa-f",
    "punct": re.escape("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"),
}


def is_recursive_pattern(pattern: str) -> bool:
    """True if `pattern` needs the recursive grammar (`**` segments or braces)."""
    return "**" in pattern or "{" in pattern


def strip_curdir(pattern: str, sep: str = os.sep) -> str:
    """Drop leading `./` segments, which relative candidates never carry."""
    prefix = os.curdir + sep
    while pattern.startswith(prefix):
        pattern = pattern[len(prefix) :].lstrip(sep)
    return pattern


def matches(
    pattern: str, candidate: str, *, ignore_case: bool = False, sep: str = os.sep
) -> bool:
    """
    Match `candidate` against the glob `pattern`.

    With `ignore_case`, both sides are lowercased before comparison. A malformed
    pattern (unterminated bracket, dangling escape, reversed range) matches nothing.
    """
    if ignore_case:
        pattern = pattern.lower()
        candidate = candidate.lower()
    regex = _compile(pattern, is_recursive_pattern(pattern), sep)
    if regex is None:
        return False
    return regex.fullmatch(candidate) is not None


@lru_cache(maxsize=1024)
def _compile(pattern: str, recursive: bool, sep: str) -> re.Pattern[str] | None:
    try:
        return re.compile(_GlobTranslator(pattern, recursive, sep).translate(), re.DOTALL)
    except (ValueError, re.error):
        return None


class _GlobTranslator:
    """Recursive-descent translation of one glob into a regular expression."""

    def __init__(self, pattern: str, recursive: bool, sep: str) -> None:
        self.pattern = pattern
        self.recursive = recursive
        self.sep = sep
        self.pos = 0
        # Backslash is an escape character except where it is the separator.
        self.escapes = sep != "\\"
        self.esc_sep = re.escape(sep)
        self.not_sep = f"[^{self.esc_sep}]"

    def translate(self) -> str:
        return self._sequence(in_brace=False)

    def _sequence(self, in_brace: bool) -> str:
        p = self.pattern
        parts: list[str] = []
        while self.pos < len(p):
            c = p[self.pos]
            if in_brace and c in ",}":
                break
            if c == "*":
                start = self.pos
                while self.pos < len(p) and p[self.pos] == "*":
                    self.pos += 1
                if (
                    self.recursive
                    and self.pos - start >= 2
                    and self._at_segment_start(start, in_brace)
                    and self._at_segment_end(in_brace)
                ):
                    if self.pos < len(p) and p[self.pos] == self.sep:
                        # "**/" spans zero or more whole segments.
                        self.pos += 1
                        parts.append(f"(?:.*{self.esc_sep})?")
                    elif parts and parts[-1] == self.esc_sep:
                        # Trailing "/**" also matches the directory itself.
                        parts[-1] = f"(?:{self.esc_sep}.*)?"
                    else:
                        parts.append(".*")
                else:
                    parts.append(f"{self.not_sep}*")
            elif c == "?":
                self.pos += 1
                parts.append(self.not_sep)
            elif c == "[":
                parts.append(self._bracket())
            elif c == "{" and self.recursive and self._brace_end(self.pos) is not None:
                parts.append(self._brace())
            elif c == "\\" and self.escapes:
                if self.pos + 1 >= len(p):
                    raise ValueError(f"Dangling escape in pattern: {p!r}")
                parts.append(re.escape(p[self.pos + 1]))
                self.pos += 2
            else:
                parts.append(re.escape(c))
                self.pos += 1
        return "".join(parts)

    def _at_segment_start(self, index: int, in_brace: bool) -> bool:
        if index == 0:
            return True
        prev = self.pattern[index - 1]
        return prev == self.sep or (in_brace and prev in "{,")

    def _at_segment_end(self, in_brace: bool) -> bool:
        if self.pos >= len(self.pattern):
            return True
        nxt = self.pattern[self.pos]
        return nxt == self.sep or (in_brace and nxt in ",}")

    def _brace_end(self, start: int) -> int | None:
        """Index of the `}` closing the brace at `start`, or `None` if unbalanced."""
        p = self.pattern
        depth = 0
        i = start
        while i < len(p):
            c = p[i]
            if c == "\\" and self.escapes:
                i += 2
                continue
            if c == "{":
                depth += 1
            elif c == "}":
                depth -= 1
                if depth == 0:
                    return i
            i += 1
        return None

    def _brace(self) -> str:
        self.pos += 1
        alternatives: list[str] = []
        while True:
            alternatives.append(self._sequence(in_brace=True))
            if self.pos >= len(self.pattern):
                raise ValueError(f"Unterminated brace in pattern: {self.pattern!r}")
            closer = self.pattern[self.pos]
            self.pos += 1
            if closer == "}":
                break
        return "(?:" + "|".join(alternatives) + ")"

    def _bracket(self) -> str:
        p = self.pattern
        i = self.pos + 1
        negate = i < len(p) and p[i] in "!^"
        if negate:
            i += 1
        items: list[str] = []
        first = True
        while True:
            if i >= len(p):
                raise ValueError(f"Unterminated character class in pattern: {p!r}")
            c = p[i]
            if c == "]" and not first:
                i += 1
                break
            first = False
            if p.startswith("[:", i):
                end = p.find(":]", i + 2)
                if end != -1 and p[i + 2 : end] in _POSIX_CLASSES:
                    items.append(_POSIX_CLASSES[p[i + 2 : end]])
                    i = end + 2
                    continue
            lo, i = self._class_char(i)
            if i + 1 < len(p) and p[i] == "-" and p[i + 1] != "]":
                hi, i = self._class_char(i + 1)
                if hi < lo:
                    raise ValueError(f"Reversed range {lo}-{hi} in pattern: {p!r}")
                items.append(f"{re.escape(lo)}-{re.escape(hi)}")
            else:
                items.append(re.escape(lo))
        self.pos = i
        body = "".join(items)
        if negate:
            return f"[^{body}{self.esc_sep}]"
        return f"[{body}]"

    def _class_char(self, i: int) -> tuple[str, int]:
        p = self.pattern
        if p[i] == "\\" and self.escapes:
            if i + 1 >= len(p):
                raise ValueError(f"Dangling escape in pattern: {p!r}")
            return p[i + 1], i + 2
        return p[i], i + 1
