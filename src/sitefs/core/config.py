"""
Configuration and path management.

Provides site root detection, standard paths and the read-only
data source configuration. Configuration lives in a ``sitefs.yaml``
file at the site root.

Resolution order for site root:
  1. SITEFS_SITE_ROOT environment variable (highest priority)
  2. Walk up from cwd looking for sitefs.yaml
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from sitefs.core.errors import ConfigError

CONFIG_FILENAME = "sitefs.yaml"

DEFAULT_TEXT_EXTENSIONS = frozenset(
    {
        "coffee", "css", "erb", "haml", "handlebars", "hb", "htm", "html",
        "js", "less", "markdown", "md", "ms", "mustache", "php", "rb",
        "rdoc", "sass", "scss", "slim", "txt", "xhtml", "xml",
    }
)


@dataclass(frozen=True)
class DataSourceConfig:
    """Read-only settings consumed by the filesystem data source."""

    allow_periods_in_identifiers: bool = False
    encoding: str = "utf-8"
    text_extensions: frozenset[str] = field(default=DEFAULT_TEXT_EXTENSIONS)
    content_dir: str = "content"
    layouts_dir: str = "layouts"

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: str | None = None) -> DataSourceConfig:
        """Build a config from a decoded mapping, ignoring unknown keys.

        Raises:
            ConfigError: If a known key has a value of the wrong type
        """
        kwargs: dict[str, Any] = {}

        if "allow_periods_in_identifiers" in data:
            value = data["allow_periods_in_identifiers"]
            if not isinstance(value, bool):
                raise ConfigError(
                    f"allow_periods_in_identifiers must be a boolean, got {value!r}",
                    path=path,
                )
            kwargs["allow_periods_in_identifiers"] = value

        for key in ("encoding", "content_dir", "layouts_dir"):
            if key in data:
                value = data[key]
                if not isinstance(value, str) or not value:
                    raise ConfigError(f"{key} must be a non-empty string, got {value!r}", path=path)
                kwargs[key] = value

        if "text_extensions" in data:
            value = data["text_extensions"]
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigError(
                    f"text_extensions must be a list of strings, got {value!r}",
                    path=path,
                )
            kwargs["text_extensions"] = frozenset(v.lstrip(".") for v in value)

        return cls(**kwargs)


@dataclass(frozen=True)
class SitePaths:
    """Standard paths for a site."""

    root: Path
    config_file: Path
    content: Path
    layouts: Path


def load_config(config_path: Path) -> DataSourceConfig:
    """Load the data source configuration from a YAML file.

    Args:
        config_path: Path to sitefs.yaml (may not exist)

    Returns:
        DataSourceConfig; defaults if the file is missing or empty

    Raises:
        ConfigError: If the file cannot be read or is not a valid mapping
    """
    config_path = Path(config_path)
    if not config_path.is_file():
        return DataSourceConfig()

    try:
        text = config_path.read_text(encoding="utf-8")
        data = yaml.safe_load(text)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not load {config_path}: {e}", path=str(config_path)) from e

    if data is None:
        return DataSourceConfig()
    if not isinstance(data, dict):
        raise ConfigError(
            f"{config_path} must contain a mapping at the top level",
            path=str(config_path),
        )
    return DataSourceConfig.from_dict(data, path=str(config_path))


def _walk_up_for_config(start_path: Path) -> Path | None:
    """Walk up directory tree looking for sitefs.yaml.

    Args:
        start_path: Starting path for search.

    Returns:
        Directory containing sitefs.yaml, or None if not found.
    """
    current = start_path.resolve()
    while True:
        if (current / CONFIG_FILENAME).is_file():
            return current
        if current == current.parent:
            return None
        current = current.parent


def find_site_root(start_path: Path | None = None) -> Path:
    """Find the site root.

    Args:
        start_path: Starting path for the walk (defaults to cwd)

    Returns:
        Path to site root

    Raises:
        FileNotFoundError: If no site root can be found
    """
    env_root = os.environ.get("SITEFS_SITE_ROOT")
    if env_root:
        env_path = Path(env_root).resolve()
        if env_path.is_dir():
            return env_path
        raise FileNotFoundError(f"SITEFS_SITE_ROOT={env_root} is not a directory.")

    if start_path is None:
        start_path = Path.cwd()
    result = _walk_up_for_config(Path(start_path))
    if result is not None:
        return result

    raise FileNotFoundError(
        f"Could not find {CONFIG_FILENAME} starting from {start_path}. "
        f"Create one at the site root or set SITEFS_SITE_ROOT."
    )


def get_paths(site_root: Path, config: DataSourceConfig | None = None) -> SitePaths:
    """Get all standard paths for the site.

    Args:
        site_root: Site root path
        config: Data source config (directory names); defaults if omitted

    Returns:
        SitePaths dataclass with all paths
    """
    if config is None:
        config = DataSourceConfig()
    site_root = Path(site_root)
    return SitePaths(
        root=site_root,
        config_file=site_root / CONFIG_FILENAME,
        content=site_root / config.content_dir,
        layouts=site_root / config.layouts_dir,
    )
