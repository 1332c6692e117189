"""
Error taxonomy for content loading and creation.

Every error names the offending path (when there is one) and a
human-readable cause. None of them are recovered from inside the
library; they abort the current load or create call.
"""

from __future__ import annotations


class SiteSourceError(Exception):
    """Base exception for all data source errors."""

    def __init__(self, message: str, path: str | None = None):
        self.message = message
        self.path = path
        super().__init__(message)


class ConfigError(SiteSourceError):
    """Site configuration could not be loaded or has invalid values."""
    pass


class AmbiguousPairingError(SiteSourceError):
    """More than one meta file or content file share a basename key."""

    def __init__(self, key: str, kind: str, count: int):
        super().__init__(
            f"Found {count} {kind} files for {key}; expected 0 or 1",
            path=key,
        )
        self.key = key
        self.kind = kind
        self.count = count


class MissingDataError(SiteSourceError):
    """Neither a meta file nor a content file could be resolved."""
    pass


class MalformedFrontMatterError(SiteSourceError):
    """A file opens a metadata section but never closes it."""

    def __init__(self, path: str):
        super().__init__(
            f"The file '{path}' appears to start with a metadata section "
            "(three or five dashes at the top) but it does not seem to be "
            "in the correct format.",
            path=path,
        )


class MetadataFormatError(SiteSourceError):
    """Metadata could not be decoded as a YAML mapping."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not parse YAML for {path}: {reason}", path=path)
        self.reason = reason


class ReadError(SiteSourceError):
    """A file could not be opened or read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not read {path}: {reason}", path=path)
        self.reason = reason


class EncodingError(SiteSourceError):
    """File bytes are not valid for the configured encoding."""

    def __init__(self, path: str, encoding: str):
        super().__init__(
            f"Could not read {path} because the file is not valid {encoding}.",
            path=path,
        )
        self.encoding = encoding


class InvalidIdentifierError(SiteSourceError):
    """Identifier contains a period while periods are not allowed."""

    def __init__(self, identifier: str, dir_name: str):
        super().__init__(
            f"Attempted to create an object in {dir_name} with identifier "
            f"{identifier} containing a period, but allow_periods_in_identifiers "
            "is not enabled in the site configuration.",
        )
        self.identifier = identifier
        self.dir_name = dir_name
