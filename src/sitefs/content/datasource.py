"""
Filesystem data source.

Items live in the content directory and layouts in the layouts
directory. Each object is one or two files: a content file, a ``.yaml``
meta file with the same basename, or both. See
:mod:`sitefs.content.identifiers` for how identifiers are derived.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from sitefs.content.assembler import ContentObject, LoadResult, ObjectKind, assemble
from sitefs.content.pairing import FilenameStrategy, classify, filename_for, group_by_key
from sitefs.content.scanner import scan_files
from sitefs.content.writer import DEFAULT_EXTENSION, create_object
from sitefs.core.config import DataSourceConfig
from sitefs.core.errors import SiteSourceError
from sitefs.core.events import EventBus

logger = logging.getLogger(__name__)


class FilesystemDataSource:
    """Loads and creates items and layouts below a site root."""

    def __init__(
        self,
        site_root: Path | str,
        config: DataSourceConfig | None = None,
        events: EventBus | None = None,
        filename_strategy: FilenameStrategy = filename_for,
    ):
        """Initialize data source.

        Args:
            site_root: Directory holding the content and layouts directories
            config: Data source configuration (defaults if not provided)
            events: Bus notified when files are created
            filename_strategy: On-disk naming for (basename key, extension)
        """
        self.site_root = Path(site_root)
        self.config = config if config is not None else DataSourceConfig()
        self.events = events if events is not None else EventBus()
        self.filename_strategy = filename_strategy

    def directory_for(self, kind: ObjectKind) -> str:
        """Return the root directory for a kind, as a slash-delimited path."""
        return (self.site_root / kind.root_dir(self.config)).as_posix()

    def setup(self) -> None:
        """Create the content and layouts directories."""
        for kind in ObjectKind:
            Path(self.directory_for(kind)).mkdir(parents=True, exist_ok=True)

    def items(self) -> list[ContentObject]:
        return self.load_objects(ObjectKind.ITEM)

    def layouts(self) -> list[ContentObject]:
        return self.load_objects(ObjectKind.LAYOUT)

    def load_objects(self, kind: ObjectKind) -> list[ContentObject]:
        """Load every object of a kind, raising on the first error.

        Raises:
            SiteSourceError: The first error encountered
        """
        return [result.unwrap() for result in self.load_results(kind)]

    def load_results(self, kind: ObjectKind) -> list[LoadResult]:
        """Load every object of a kind, capturing errors per basename key.

        Filesystem errors while scanning the root itself still propagate.
        """
        root = self.directory_for(kind)
        allow_periods = self.config.allow_periods_in_identifiers

        results = []
        for key, paths in group_by_key(scan_files(root), allow_periods).items():
            try:
                pairing = classify(key, paths, allow_periods)
                obj = assemble(pairing, root, kind, self.config, self.filename_strategy)
            except SiteSourceError as e:
                logger.debug("Failed to load %s %s: %s", kind.value, key, e)
                results.append(LoadResult(key=key, error=e))
                continue
            results.append(LoadResult(key=key, value=obj))

        logger.debug("Loaded %d %s result(s) from %s", len(results), kind.value, root)
        return results

    def create_item(
        self,
        content: str,
        attributes: dict[str, Any],
        identifier: str,
        extension: str = DEFAULT_EXTENSION,
    ) -> str:
        return self._create(ObjectKind.ITEM, content, attributes, identifier, extension)

    def create_layout(
        self,
        content: str,
        attributes: dict[str, Any],
        identifier: str,
        extension: str = DEFAULT_EXTENSION,
    ) -> str:
        return self._create(ObjectKind.LAYOUT, content, attributes, identifier, extension)

    def _create(
        self,
        kind: ObjectKind,
        content: str,
        attributes: dict[str, Any],
        identifier: str,
        extension: str,
    ) -> str:
        return create_object(
            self.directory_for(kind),
            content,
            attributes,
            identifier,
            self.config,
            extension=extension,
            events=self.events,
        )
