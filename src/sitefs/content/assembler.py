"""
Content object assembly.

Turns one file pairing into a finished ContentObject: resolves the
filenames, picks the identifier, parses metadata and content, adds the
implicit attributes and the modification time.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import PurePosixPath
from typing import Any

from sitefs.content.identifiers import ext_of, identifier_for
from sitefs.content.pairing import FilePairing, FilenameStrategy, filename_for
from sitefs.content.parser import load_meta_file, parse
from sitefs.core.config import DataSourceConfig
from sitefs.core.errors import MissingDataError, ReadError, SiteSourceError

logger = logging.getLogger(__name__)


class ObjectKind(Enum):
    """Kind of content object; only items can be binary."""

    ITEM = "item"
    LAYOUT = "layout"

    def root_dir(self, config: DataSourceConfig) -> str:
        if self is ObjectKind.ITEM:
            return config.content_dir
        return config.layouts_dir


@dataclass(frozen=True)
class ContentObject:
    """A loaded item or layout.

    For binary items ``content`` is the path of the content file rather
    than its contents.
    """

    identifier: str
    attributes: dict[str, Any]
    content: str
    kind: ObjectKind
    mtime: datetime
    binary: bool = False

    @property
    def filename(self) -> str | None:
        return self.attributes.get("filename")

    @property
    def extension(self) -> str | None:
        return self.attributes.get("extension")

    @property
    def content_path(self) -> str | None:
        """Path of the content file for binary items, None otherwise."""
        return self.content if self.binary else None

    @property
    def title(self) -> str:
        return str(self.attributes.get("title", self.identifier))


@dataclass
class LoadResult:
    """Outcome of assembling one basename key: a value or an error."""

    key: str
    value: ContentObject | None = None
    error: SiteSourceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ContentObject:
        """Return the value or raise the captured error."""
        if self.error is not None:
            raise self.error
        if self.value is None:
            raise MissingDataError(f"No object loaded for {self.key}")
        return self.value


def _mtime_of(path: str | None) -> datetime | None:
    if path is None:
        return None
    try:
        return datetime.fromtimestamp(os.stat(path).st_mtime)
    except OSError as e:
        raise ReadError(path, repr(e)) from e


def latest_mtime(meta_filename: str | None, content_filename: str | None) -> datetime:
    """Return the later modification time of the two files.

    Raises:
        MissingDataError: If neither file is given
    """
    stamps = [m for m in (_mtime_of(meta_filename), _mtime_of(content_filename)) if m is not None]
    if not stamps:
        raise MissingDataError("No modification time available: meta and content files are both missing")
    return max(stamps)


def is_binary(content_filename: str | None, config: DataSourceConfig) -> bool:
    """Check whether a content file's last extension is not a text extension."""
    if content_filename is None:
        return False
    suffix = PurePosixPath(content_filename).suffix[1:]
    return suffix not in config.text_extensions


def relative_to_root(filename: str, root: str) -> str:
    """Return filename relative to the scanned root directory."""
    root = root.rstrip("/")
    if filename.startswith(root + "/"):
        return filename[len(root) + 1:]
    return filename


def assemble(
    pairing: FilePairing,
    root: str,
    kind: ObjectKind,
    config: DataSourceConfig,
    filename_strategy: FilenameStrategy = filename_for,
) -> ContentObject:
    """Build the content object for one file pairing.

    Args:
        pairing: Extension markers for one basename key
        root: Directory the files were scanned from
        kind: Item or layout
        config: Data source configuration
        filename_strategy: Maps (basename key, marker) to a filename

    Returns:
        The assembled ContentObject

    Raises:
        SiteSourceError: Any parsing, reading or consistency error
    """
    allow_periods = config.allow_periods_in_identifiers
    meta_filename = filename_strategy(pairing.key, pairing.meta_ext)
    content_filename = filename_strategy(pairing.key, pairing.content_ext)

    if meta_filename is not None:
        identifier = identifier_for(relative_to_root(meta_filename, root), allow_periods)
    elif content_filename is not None:
        identifier = identifier_for(relative_to_root(content_filename, root), allow_periods)
    else:
        raise MissingDataError(f"No meta file and no content file for {pairing.key}")

    binary = kind is ObjectKind.ITEM and is_binary(content_filename, config)
    if binary:
        meta = load_meta_file(meta_filename, config.encoding)
        content = content_filename
    else:
        meta, content = parse(content_filename, meta_filename, config.encoding)

    extension = ext_of(content_filename, allow_periods)[1:] if content_filename else None
    attributes = {
        "extension": extension,
        **meta,
        "filename": content_filename,
        "content_filename": content_filename,
        "meta_filename": meta_filename,
    }

    mtime = latest_mtime(meta_filename, content_filename)
    logger.debug("Loaded %s %s (binary=%s)", kind.value, identifier, binary)

    return ContentObject(
        identifier=identifier,
        attributes=attributes,
        content=content,
        kind=kind,
        mtime=mtime,
        binary=binary,
    )
