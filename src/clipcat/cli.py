#!/usr/bin/env python3
"""
Clipcat: Concatenate files with path headers and copy them to the clipboard

Each input is handled as:
  - a file: that file is included
  - a directory: all files below it are included, recursively
  - a pattern (* ? [ or {a,b}) that does not exist as a literal path: searched
    for across the tree below the current directory

Common usage:
  clipcat README.md src/
  clipcat src/ -t
  clipcat . -e go.mod -e go.sum
  clipcat '*checkin*' -i --exclude-from .gitignore
  clipcat '**/*.go' -e '**/*_test.go' -p

Exclude patterns ending in '/' exclude directories; patterns containing '/'
match the path relative to the current directory; other patterns match file
names at any depth.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import sys
from dataclasses import dataclass
from pathlib import Path

from clipcat.app import run
from clipcat.config import find_config_file, load_config, merge_cli_with_config
from clipcat.errors import ClipcatError
from clipcat.file_resolver import CollectorConfig, FileResolverError


@dataclass
class Options:
    """Command-line options for the clipcat tool."""

    paths: list[str]
    exclude: list[str]
    exclude_from: list[str]
    ignore_case: bool
    tree: bool
    only_tree: bool
    print: bool
    no_config: bool
    version: bool


def _build_parser() -> argparse.ArgumentParser:
    # Use the module's docstring as the description
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="clipcat",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=str,
        default=[],
        help="Files, directories, or glob patterns to copy",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Exclude glob pattern (e.g., '*.log', 'build/', 'src/gen.go'). Can be repeated",
    )
    parser.add_argument(
        "--exclude-from",
        action="append",
        default=[],
        dest="exclude_from",
        metavar="FILE",
        help="Read exclude rules from FILE with full .gitignore semantics. Can be repeated",
    )
    parser.add_argument(
        "-i",
        "--ignore-case",
        action="store_true",
        dest="ignore_case",
        help="Make glob pattern matching case-insensitive",
    )
    parser.add_argument(
        "-t", "--tree", action="store_true", help="Prepend a FILE HIERARCHY section"
    )
    parser.add_argument(
        "--only-tree",
        action="store_true",
        dest="only_tree",
        help="Copy only the FILE HIERARCHY (no file contents)",
    )
    parser.add_argument(
        "-p", "--print", action="store_true", help="Also print the copied text to stdout"
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help="Ignore .clipcat.toml, clipcat.toml and [tool.clipcat] in pyproject.toml",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    return parser


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments. Flags and paths may be intermixed.

    Returns `(options, explicit_flags)` where `explicit_flags` names the boolean
    flags given on the command line (for config merge precedence).
    """
    parser = _build_parser()
    opts = parser.parse_intermixed_args(args)

    if not opts.paths and not opts.version:
        parser.error("at least one path or pattern is required")

    options = Options(
        paths=opts.paths,
        exclude=opts.exclude,
        exclude_from=opts.exclude_from,
        ignore_case=opts.ignore_case,
        tree=opts.tree,
        only_tree=opts.only_tree,
        print=opts.print,
        no_config=opts.no_config,
        version=opts.version,
    )
    explicit_flags = {
        name
        for name in ("ignore_case", "tree", "only_tree", "print")
        if getattr(options, name)
    }
    return options, explicit_flags


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the clipcat CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, 1 for errors; usage errors exit with 2)
    """
    options, explicit_flags = _parse_args(args)

    # Display version information if requested
    if options.version:
        try:
            version = importlib.metadata.version("clipcat")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    try:
        # Load and merge config file settings
        if not options.no_config:
            config_path = find_config_file(Path.cwd())
            if config_path:
                merge_cli_with_config(options, load_config(config_path), explicit_flags)

        collector_config = CollectorConfig(
            excludes=tuple(options.exclude),
            exclude_files=tuple(options.exclude_from),
            ignore_case=options.ignore_case,
        )
        summary = run(
            options.paths,
            collector_config,
            show_tree=options.tree or options.only_tree,
            only_tree=options.only_tree,
            print_out=options.print,
        )
    except (ClipcatError, FileResolverError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if summary.copied:
        count = len(summary.files)
        if options.only_tree:
            print(f"Copied file hierarchy for {count} files to clipboard.", file=sys.stderr)
        else:
            print(f"Copied {count} files to clipboard.", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
