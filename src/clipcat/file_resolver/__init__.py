"""
Self-contained file collection module: turns literal paths, directories and
glob search patterns into a deduplicated, sorted list of files, applying
gitignore-style exclude files and ad-hoc exclude patterns.

No imports from `clipcat` outside this package.

Usage::

    from clipcat.file_resolver import CollectorConfig, FileCollector

    config = CollectorConfig(
        excludes=("**/*_test.go", "vendor/"),
        exclude_files=(".gitignore",),
    )
    result = FileCollector(config).collect(["src", "**/*.go"])
    print(result.files, result.warnings)
"""

from clipcat.file_resolver.classify import classify_token, has_glob_chars
from clipcat.file_resolver.collector import FileCollector
from clipcat.file_resolver.errors import CollectionError, ExcludeFileError, FileResolverError
from clipcat.file_resolver.exclude import ExcludeMatcher
from clipcat.file_resolver.patterns import is_recursive_pattern, matches
from clipcat.file_resolver.types import CollectorConfig, CollectResult, InputKind, WalkAction

__all__ = [
    "CollectResult",
    "CollectionError",
    "CollectorConfig",
    "ExcludeFileError",
    "ExcludeMatcher",
    "FileCollector",
    "FileResolverError",
    "InputKind",
    "WalkAction",
    "classify_token",
    "has_glob_chars",
    "is_recursive_pattern",
    "matches",
]
