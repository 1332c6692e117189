"""Core utilities for sitefs."""

from sitefs.core.config import (
    DEFAULT_TEXT_EXTENSIONS,
    DataSourceConfig,
    SitePaths,
    find_site_root,
    get_paths,
    load_config,
)
from sitefs.core.errors import (
    AmbiguousPairingError,
    ConfigError,
    EncodingError,
    InvalidIdentifierError,
    MalformedFrontMatterError,
    MetadataFormatError,
    MissingDataError,
    ReadError,
    SiteSourceError,
)
from sitefs.core.events import FILE_CREATED, EventBus

__all__ = [
    # Config
    "DataSourceConfig",
    "DEFAULT_TEXT_EXTENSIONS",
    "SitePaths",
    "find_site_root",
    "get_paths",
    "load_config",
    # Errors
    "SiteSourceError",
    "AmbiguousPairingError",
    "ConfigError",
    "EncodingError",
    "InvalidIdentifierError",
    "MalformedFrontMatterError",
    "MetadataFormatError",
    "MissingDataError",
    "ReadError",
    # Events
    "EventBus",
    "FILE_CREATED",
]
