"""Clipboard delivery using pyperclip."""

from __future__ import annotations

import pyperclip

from clipcat.errors import ClipboardError


def copy_to_clipboard(data: bytes) -> None:
    """
    Copy `data` to the system clipboard. Bytes that are not valid UTF-8 are replaced.
    Raises `ClipboardError` if no clipboard mechanism is available or the copy fails.
    """
    text = data.decode("utf-8", errors="replace")
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"copying to clipboard: {e}") from e
