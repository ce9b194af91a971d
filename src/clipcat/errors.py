"""Errors that abort a clipcat run."""

from __future__ import annotations


class ClipcatError(Exception):
    """Base class for fatal clipcat errors; the CLI reports them as `Error: ...`."""


class ConfigError(ClipcatError):
    """A config file could not be parsed or holds values of the wrong type."""


class NoFilesError(ClipcatError):
    """Nothing was left to copy after applying the exclusion rules."""


class ClipboardError(ClipcatError):
    """The clipboard could not be written."""
