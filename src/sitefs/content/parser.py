"""
Metadata and content parsing.

An object's metadata comes either from a companion ``.yaml`` file or
from a front matter section at the top of the content file:

    ---
    title: "Moo!"
    ---
    h1. Hello!

Delimiter lines are exactly three or five dashes, optionally followed by
whitespace. A file that does not start with one is all content.
"""

from __future__ import annotations

import logging
import re
from typing import Any

import yaml

from sitefs.content.reader import DEFAULT_ENCODING, read_text
from sitefs.core.errors import MalformedFrontMatterError, MetadataFormatError

logger = logging.getLogger(__name__)

FRONT_MATTER_START = re.compile(r"\A(-{5}|-{3})[ \t\r]*$", re.MULTILINE)
FRONT_MATTER_DELIMITER = re.compile(r"^(-{5}|-{3})[ \t\r]*$", re.MULTILINE)


def parse_metadata(text: str, path: str) -> dict[str, Any]:
    """Decode YAML metadata text into a mapping.

    Empty documents decode to an empty mapping.

    Raises:
        MetadataFormatError: If the text is not YAML or not a mapping
    """
    try:
        meta = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise MetadataFormatError(path, str(e)) from e

    if meta is None:
        return {}
    if not isinstance(meta, dict):
        raise MetadataFormatError(path, f"expected a mapping, got {type(meta).__name__}")
    return meta


def load_meta_file(meta_filename: str | None, encoding: str = DEFAULT_ENCODING) -> dict[str, Any]:
    """Read and decode a meta file; no file means no metadata."""
    if meta_filename is None:
        return {}
    return parse_metadata(read_text(meta_filename, encoding), meta_filename)


def split_front_matter(data: str, filename: str) -> tuple[dict[str, Any], str]:
    """Split combined file text into metadata and content.

    Returns:
        Tuple of (metadata dict, content string). Content after a front
        matter section is stripped of surrounding whitespace.

    Raises:
        MalformedFrontMatterError: If the section is opened but not closed
        MetadataFormatError: If the section is not a YAML mapping
    """
    if not FRONT_MATTER_START.match(data):
        return {}, data

    # ['', '---', meta, '---', content, ...]; later delimiters stay in content
    pieces = FRONT_MATTER_DELIMITER.split(data)
    if len(pieces) < 4:
        raise MalformedFrontMatterError(filename)

    meta = parse_metadata(pieces[2], filename)
    content = "".join(pieces[4:]).strip()
    return meta, content


def parse(
    content_filename: str | None,
    meta_filename: str | None,
    encoding: str = DEFAULT_ENCODING,
) -> tuple[dict[str, Any], str]:
    """Read metadata and content for a text object.

    With a meta file, metadata comes from it and the content file (if
    any) is the body verbatim. Without one, the content file may carry
    front matter.

    Args:
        content_filename: Content file path, or None
        meta_filename: Meta file path, or None
        encoding: Encoding of both files

    Returns:
        Tuple of (metadata dict, content string)
    """
    if meta_filename is not None:
        content = read_text(content_filename, encoding) if content_filename else ""
        meta = load_meta_file(meta_filename, encoding)
        logger.debug("Parsed %s with meta file %s", content_filename, meta_filename)
        return meta, content

    if content_filename is None:
        return {}, ""

    data = read_text(content_filename, encoding)
    return split_front_matter(data, content_filename)
