"""
TOML-based config file loading for clipcat.

Searches for `.clipcat.toml`, `clipcat.toml`, or `pyproject.toml [tool.clipcat]`
walking up from the current directory. List settings extend the command line;
boolean settings apply unless the flag was given explicitly.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, TypeVar, cast

from clipcat.errors import ConfigError

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]


@dataclass
class ClipcatConfig:
    """
    Parsed config from a TOML file. Fields are `None` when not set in the config,
    allowing the merge logic to distinguish "not configured" from "explicitly set
    to default value".
    """

    exclude: list[str] | None = None
    exclude_from: list[str] | None = None
    ignore_case: bool | None = None
    tree: bool | None = None
    only_tree: bool | None = None
    print: bool | None = None


# Config file search order (first match wins within each directory level)
_CONFIG_FILENAMES = [".clipcat.toml", "clipcat.toml", "pyproject.toml"]

_LIST_FIELDS = {"exclude", "exclude_from"}

_VALID_FIELDS = {f.name for f in fields(ClipcatConfig)}


def find_config_file(start_dir: Path) -> Path | None:
    """
    Walk up from `start_dir` looking for a config file. Returns the first
    found, or `None`. Search order per directory: `.clipcat.toml` >
    `clipcat.toml` > `pyproject.toml` (only if it has `[tool.clipcat]`).
    """
    start = start_dir.resolve()
    for directory in (start, *start.parents):
        found = _config_in_directory(directory)
        if found is not None:
            return found
    return None


def _config_in_directory(directory: Path) -> Path | None:
    for filename in _CONFIG_FILENAMES:
        candidate = directory / filename
        if not candidate.is_file():
            continue
        if filename != "pyproject.toml" or _pyproject_has_clipcat_section(candidate):
            return candidate
    return None


def _pyproject_has_clipcat_section(path: Path) -> bool:
    """Check if a pyproject.toml has a [tool.clipcat] section."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
        return "clipcat" in data.get("tool", {})
    except (tomllib.TOMLDecodeError, OSError, UnicodeDecodeError):
        return False


def load_config(config_path: Path) -> ClipcatConfig:
    """
    Load a `ClipcatConfig` from a TOML file. `exclude-from` entries are resolved
    relative to the directory holding the config file. Raises `ConfigError` if the
    file cannot be read or parsed, or a value has the wrong type.
    """
    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"cannot load config file {config_path}: {e}") from e

    if config_path.name == "pyproject.toml":
        data = data.get("tool", {}).get("clipcat", {})

    config = _parse_config_data(data, config_path)
    if config.exclude_from is not None:
        base = config_path.parent
        config.exclude_from = [str(base / p) for p in config.exclude_from]
    return config


def _parse_config_data(data: dict[str, Any], source: Path) -> ClipcatConfig:
    """Parse a flat or sectioned TOML dict into ClipcatConfig."""
    # Flatten sections: [exclusion], [output], etc. merge into top level
    flat: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            for sub_key, sub_value in cast(dict[str, Any], value).items():
                flat[sub_key] = sub_value
        else:
            flat[key] = value

    mapped: dict[str, Any] = {}
    for key, value in flat.items():
        snake_key = key.replace("-", "_")
        if snake_key not in _VALID_FIELDS:
            continue
        if snake_key in _LIST_FIELDS:
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigError(f"{source}: `{key}` must be a list of strings")
        elif not isinstance(value, bool):
            raise ConfigError(f"{source}: `{key}` must be true or false")
        mapped[snake_key] = value

    return ClipcatConfig(**mapped)


_T = TypeVar("_T")


def merge_cli_with_config(
    cli_opts: _T,
    config: ClipcatConfig | None,
    explicit_flags: set[str],
) -> _T:
    """
    Merge CLI options with config file settings.

    List settings are prepended to the command-line lists. Boolean settings
    apply only when the corresponding flag was not given on the command line.
    """
    if config is None:
        return cli_opts

    for cfg_field in fields(ClipcatConfig):
        cfg_value = getattr(config, cfg_field.name)
        if cfg_value is None or not hasattr(cli_opts, cfg_field.name):
            continue

        if cfg_field.name in _LIST_FIELDS:
            current = cast(list[str], getattr(cli_opts, cfg_field.name))
            setattr(cli_opts, cfg_field.name, list(cfg_value) + list(current))
            continue

        # Skip if CLI explicitly set this flag
        if cfg_field.name in explicit_flags:
            continue

        setattr(cli_opts, cfg_field.name, cfg_value)

    return cli_opts
