"""
Writing new items and layouts to disk.

The file is named after the identifier: ``/`` becomes ``index.html`` in
the target directory, ``/foo/bar/`` becomes ``foo/bar.html``. Attributes
are written as a YAML header followed by a ``---`` line.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from sitefs.content.identifiers import clean_identifier
from sitefs.core.config import DataSourceConfig
from sitefs.core.errors import InvalidIdentifierError
from sitefs.core.events import FILE_CREATED, EventBus

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".html"


def stringify_keys(value: Any) -> Any:
    """Recursively convert mapping keys to strings."""
    if isinstance(value, dict):
        return {str(k): stringify_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [stringify_keys(v) for v in value]
    return value


def path_for(dir_name: str, identifier: str, extension: str = DEFAULT_EXTENSION) -> str:
    """Return the file path an identifier is written to.

    The identifier is normalized first, so '/foo' and 'foo/' both give
    '<dir_name>/foo<extension>'.
    """
    identifier = clean_identifier(identifier)
    if identifier == "/":
        return f"{dir_name}/index.html"
    return f"{dir_name}{identifier[:-1]}{extension}"


def generate_content(content: str, attributes: dict[str, Any]) -> str:
    """Return file text: optional YAML header, then content verbatim."""
    meta = stringify_keys(attributes)
    if not meta:
        return content

    yaml_str = yaml.safe_dump(
        meta,
        explicit_start=True,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
    )
    return f"{yaml_str.strip()}\n---\n\n{content}"


def create_object(
    dir_name: str,
    content: str,
    attributes: dict[str, Any],
    identifier: str,
    config: DataSourceConfig,
    extension: str = DEFAULT_EXTENSION,
    events: EventBus | None = None,
) -> str:
    """Write a new object file below dir_name.

    Overwrites any existing file at the computed path.

    Args:
        dir_name: Target directory, e.g. 'content' or 'layouts'
        content: Body to write
        attributes: Metadata to write as a YAML header (may be empty)
        identifier: Identifier like '/foo/bar/'
        config: Data source configuration
        extension: Extension for non-root identifiers, leading period included
        events: Bus notified with FILE_CREATED

    Returns:
        The path written to

    Raises:
        InvalidIdentifierError: If identifier has a period and periods
            are not allowed
    """
    if not config.allow_periods_in_identifiers and "." in identifier:
        raise InvalidIdentifierError(identifier, dir_name)

    path = path_for(dir_name, identifier, extension)
    text = generate_content(content, attributes)

    if events is not None:
        events.publish(FILE_CREATED, path)

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(text)

    logger.debug("Created %s for identifier %s", path, identifier)
    return path
