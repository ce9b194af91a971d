"""Errors that stop file collection."""

from __future__ import annotations


class FileResolverError(Exception):
    """Base class for structural errors raised by the file resolver."""


class ExcludeFileError(FileResolverError):
    """An exclude file was named but could not be read."""


class CollectionError(FileResolverError):
    """The root of a walk could not be listed."""
