"""
Grouping of scanned files into meta/content pairs.

Files sharing a basename key belong to one object. A group holds at most
one ``.yaml`` meta file and at most one content file:

    {
        'content/foo': FilePairing('content/foo', 'yaml', 'html'),
        'content/bar': FilePairing('content/bar', 'yaml', None),
        'content/qux': FilePairing('content/qux', None, 'html'),
    }
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from sitefs.content.identifiers import ext_of, strip_extension
from sitefs.core.errors import AmbiguousPairingError

logger = logging.getLogger(__name__)

META_EXTENSION = "yaml"

FilenameStrategy = Callable[[str, str | None], str | None]


@dataclass(frozen=True)
class FilePairing:
    """Extension markers for one basename key.

    ``content_ext`` is ``''`` for a content file without extension, and
    ``None`` when there is no content file at all.
    """

    key: str
    meta_ext: str | None
    content_ext: str | None


def filename_for(base_filename: str, ext: str | None) -> str | None:
    """Return the on-disk filename for a basename key and extension marker."""
    if ext is None:
        return None
    if ext == "":
        return base_filename
    return f"{base_filename}.{ext}"


def group_by_key(paths: Iterable[str], allow_periods: bool) -> dict[str, list[str]]:
    """Group paths by basename key, preserving scan order."""
    groups: dict[str, list[str]] = {}
    for path in paths:
        groups.setdefault(strip_extension(path, allow_periods), []).append(path)
    return groups


def classify(key: str, paths: list[str], allow_periods: bool) -> FilePairing:
    """Split one group into its meta and content markers.

    Raises:
        AmbiguousPairingError: If the group has more than one meta file or
            more than one content file
    """
    meta_files = [p for p in paths if ext_of(p, allow_periods) == "." + META_EXTENSION]
    content_files = [p for p in paths if ext_of(p, allow_periods) != "." + META_EXTENSION]

    if len(meta_files) > 1:
        raise AmbiguousPairingError(key, "meta", len(meta_files))
    if len(content_files) > 1:
        raise AmbiguousPairingError(key, "content", len(content_files))

    meta_ext = META_EXTENSION if meta_files else None
    content_ext = ext_of(content_files[0], allow_periods)[1:] if content_files else None
    return FilePairing(key=key, meta_ext=meta_ext, content_ext=content_ext)


def group_files(paths: Iterable[str], allow_periods: bool) -> dict[str, FilePairing]:
    """Group scanned paths into pairings keyed by basename key.

    Raises:
        AmbiguousPairingError: On the first ambiguous group
    """
    pairings = {
        key: classify(key, group, allow_periods)
        for key, group in group_by_key(paths, allow_periods).items()
    }
    logger.debug("Grouped files into %d object(s)", len(pairings))
    return pairings
