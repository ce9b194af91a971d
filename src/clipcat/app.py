"""
Top-level clipcat operation: collect files, assemble the stream, deliver it.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from clipcat.clipboard import copy_to_clipboard
from clipcat.errors import ClipboardError, NoFilesError
from clipcat.file_resolver import CollectorConfig, FileCollector
from clipcat.output import assemble_output


@dataclass
class RunSummary:
    """What a run produced; `copied` is False when the clipboard was skipped."""

    files: list[str]
    warnings: list[str]
    output: bytes
    copied: bool


def _print_warning(message: str) -> None:
    print(f"Warning: {message}", file=sys.stderr)


def run(
    paths: Sequence[str],
    config: CollectorConfig,
    show_tree: bool = False,
    only_tree: bool = False,
    print_out: bool = False,
    clipboard: Callable[[bytes], None] | None = None,
) -> RunSummary:
    """
    Collect `paths`, assemble the output stream and copy it to the clipboard,
    also writing it to stdout with `print_out`.

    Raises `ExcludeFileError` or `CollectionError` for structural problems,
    `NoFilesError` when nothing survives exclusion, and `ClipboardError` when the
    clipboard fails (only reported as a warning with `print_out`).
    """
    result = FileCollector(config).collect(paths, on_warning=_print_warning)
    if not result.files:
        raise NoFilesError("no files matched after applying excludes")

    output = assemble_output(result.files, paths, show_tree=show_tree, only_tree=only_tree)

    copy = clipboard if clipboard is not None else copy_to_clipboard
    copied = True
    try:
        copy(output)
    except ClipboardError as e:
        if not print_out:
            raise
        copied = False
        _print_warning(str(e))
        result.warnings.append(str(e))

    if print_out:
        sys.stdout.flush()
        sys.stdout.buffer.write(output)
        sys.stdout.flush()

    return RunSummary(
        files=result.files, warnings=result.warnings, output=output, copied=copied
    )
