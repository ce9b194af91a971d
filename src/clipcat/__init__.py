"""Clipcat: concatenate files with path headers and copy them to the clipboard."""
