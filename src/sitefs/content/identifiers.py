"""
Identifier and extension rules.

A file's identifier is its path relative to the content root with the
extension removed and ``index.*`` collapsed to its directory:

    index.html          -> /
    foo.html            -> /foo/
    foo/index.html      -> /foo/
    foo/bar.baz.html    -> /foo/bar/      (periods not allowed)
    foo/bar.baz.html    -> /foo/bar.baz/  (periods allowed)

When periods are allowed only the last extension is an extension;
otherwise everything from the first period of the filename on is.
"""

from __future__ import annotations

import re

# Group 1 is the whole extension, leading period included
_LAST_EXTENSION = re.compile(r"(\.[^/.]+)$")
_ALL_EXTENSIONS = re.compile(r"(\.[^/]+)$")

_INDEX_FILENAME = re.compile(r"(^|/)index\.[^/]+$")
_INDEX_LAST_EXTENSION = re.compile(r"/?index\.[^/.]+$")
_INDEX_ALL_EXTENSIONS = re.compile(r"/?index\.[^/]+$")


def extension_regex(allow_periods: bool) -> re.Pattern[str]:
    """Return the pattern matching a filename's identifier-relevant extension."""
    return _LAST_EXTENSION if allow_periods else _ALL_EXTENSIONS


def strip_extension(path: str, allow_periods: bool) -> str:
    """Return the basename key of path: path without its extension(s)."""
    return extension_regex(allow_periods).sub("", path, count=1)


def ext_of(path: str, allow_periods: bool) -> str:
    """Return the extension(s) of path including the leading period, or ''."""
    match = extension_regex(allow_periods).search(path)
    return match.group(1) if match else ""


def clean_identifier(identifier: str) -> str:
    """Normalize an identifier to ``/segment/.../``.

    Guarantees a single leading and trailing slash, collapses repeated
    slashes and drops ``.`` segments. The empty string becomes ``/``.
    """
    segments = [s for s in identifier.split("/") if s and s != "."]
    if not segments:
        return "/"
    return "/" + "/".join(segments) + "/"


def identifier_for(filename: str, allow_periods: bool) -> str:
    """Return the identifier for a path relative to the content root.

    Works for both content files and meta files.
    """
    if _INDEX_FILENAME.search(filename):
        regex = _INDEX_LAST_EXTENSION if allow_periods else _INDEX_ALL_EXTENSIONS
        stripped, count = regex.subn("", filename, count=1)
        if count:
            return clean_identifier(stripped)
        # index.erb.html with periods allowed: strip .html, then index.erb
        stripped = strip_extension(filename, allow_periods)
        return clean_identifier(_INDEX_ALL_EXTENSIONS.sub("", stripped, count=1))
    return clean_identifier(strip_extension(filename, allow_periods))
