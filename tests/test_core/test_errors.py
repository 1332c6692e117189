"""Tests for sitefs.core.errors module."""

import pytest

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


@pytest.mark.parametrize(
    "error",
    [
        AmbiguousPairingError("content/foo", "content", 2),
        ConfigError("bad", path="sitefs.yaml"),
        EncodingError("content/foo.html", "utf-8"),
        InvalidIdentifierError("/a.b/", "content"),
        MalformedFrontMatterError("content/foo.html"),
        MetadataFormatError("content/foo.yaml", "mapping values are not allowed"),
        MissingDataError("nothing"),
        ReadError("content/foo.html", "PermissionError(13)"),
    ],
)
def test_all_errors_share_base(error):
    """Test every error can be caught as SiteSourceError."""
    assert isinstance(error, SiteSourceError)
    assert str(error) == error.message


def test_ambiguous_pairing_message():
    err = AmbiguousPairingError("content/foo", "meta", 3)
    assert str(err) == "Found 3 meta files for content/foo; expected 0 or 1"
    assert err.path == "content/foo"


def test_metadata_format_error_keeps_reason():
    err = MetadataFormatError("m.yaml", "oops")
    assert err.reason == "oops"
    assert err.path == "m.yaml"
    assert "m.yaml" in str(err) and "oops" in str(err)


def test_invalid_identifier_message():
    err = InvalidIdentifierError("/a.b/", "content")
    assert "/a.b/" in str(err)
    assert "allow_periods_in_identifiers" in str(err)
    assert err.path is None
