"""
Output assembly: path headers, the optional file hierarchy, and file contents
concatenated into one byte stream.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from io import BytesIO

from clipcat.file_resolver import has_glob_chars

TREE_TITLE = "FILE HIERARCHY"
UNREADABLE = b"[unreadable]\n"


def format_header(path: str) -> str:
    """A header for `path`: a bar of `=` as long as the path, the path, the bar, a blank line."""
    bar = "=" * len(path)
    return f"{bar}\n{path}\n{bar}\n\n"


def _root_label(file: str, roots: Sequence[str]) -> tuple[str, str]:
    """
    Pick the longest directory input that contains `file` and return
    `(label, path relative to it)`. Files outside every directory input are
    grouped under `.`, relative to the working directory.
    """
    best_root = ""
    best_label = ""
    for root in roots:
        if has_glob_chars(root) or not os.path.isdir(root):
            continue
        abs_root = os.path.abspath(root)
        prefix = abs_root if abs_root.endswith(os.sep) else abs_root + os.sep
        if file.startswith(prefix) and len(abs_root) > len(best_root):
            best_root = abs_root
            best_label = root
    if best_root:
        return best_label, os.path.relpath(file, best_root)
    return ".", os.path.relpath(file)


def render_tree(roots: Sequence[str], files: Sequence[str]) -> str:
    """
    Render the file hierarchy of `files` (sorted absolute paths), one block per
    input root in order of first appearance. Depth is shown with leading dashes.
    """
    groups: dict[str, list[str]] = {}
    for file in files:
        label, rel = _root_label(file, roots)
        groups.setdefault(label, []).append(rel)

    blocks: list[str] = []
    for label, rel_paths in groups.items():
        name = "." if label == "." else os.path.basename(os.path.normpath(label))
        lines = [f"{name}/"]
        seen_dirs: set[str] = set()
        for rel in rel_paths:
            parts = rel.split(os.sep)
            for depth in range(1, len(parts)):
                dir_key = os.sep.join(parts[:depth])
                if dir_key not in seen_dirs:
                    seen_dirs.add(dir_key)
                    lines.append(f"{'-' * depth}{parts[depth - 1]}/")
            lines.append(f"{'-' * len(parts)}{parts[-1]}")
        blocks.append("\n".join(lines) + "\n")
    return "\n".join(blocks)


def assemble_output(
    files: Sequence[str],
    roots: Sequence[str],
    show_tree: bool = False,
    only_tree: bool = False,
) -> bytes:
    """
    Build the clipboard stream: an optional file hierarchy section, then each file
    under its header. Files that cannot be read are marked `[unreadable]`.
    """
    out = BytesIO()
    if show_tree or only_tree:
        out.write(format_header(TREE_TITLE).encode("utf-8"))
        out.write(render_tree(roots, files).encode("utf-8"))
        out.write(b"\n")
    if not only_tree:
        for file in files:
            out.write(format_header(file).encode("utf-8"))
            try:
                with open(file, "rb") as f:
                    out.write(f.read())
            except OSError:
                out.write(UNREADABLE)
            out.write(b"\n")
    return out.getvalue()
