"""Tests for the FilesystemDataSource."""

from datetime import date

import pytest

from sitefs.content.assembler import ObjectKind
from sitefs.content.datasource import FilesystemDataSource
from sitefs.core.config import DataSourceConfig
from sitefs.core.errors import (
    AmbiguousPairingError,
    InvalidIdentifierError,
    MalformedFrontMatterError,
)
from sitefs.core.events import FILE_CREATED


def _by_identifier(objects):
    return {obj.identifier: obj for obj in objects}


def test_setup_creates_directories(tmp_path):
    """Test setup creates content and layouts directories."""
    FilesystemDataSource(tmp_path).setup()
    assert (tmp_path / "content").is_dir()
    assert (tmp_path / "layouts").is_dir()


def test_setup_uses_configured_directories(tmp_path):
    """Test setup honors configured directory names."""
    config = DataSourceConfig(content_dir="src", layouts_dir="tpl")
    FilesystemDataSource(tmp_path, config).setup()
    assert (tmp_path / "src").is_dir()
    assert (tmp_path / "tpl").is_dir()


def test_items_identifiers(tmp_path, write_file):
    """Test the documented path-to-identifier examples."""
    write_file("content/index.html", "home")
    write_file("content/foo.html", "foo")
    write_file("content/foo/bar.baz.html", "bar")
    write_file("content/qux/index.html", "qux")

    items = _by_identifier(FilesystemDataSource(tmp_path).items())

    assert set(items) == {"/", "/foo/", "/foo/bar/", "/qux/"}
    assert items["/foo/bar/"].content == "bar"


def test_items_identifiers_with_periods(tmp_path, write_file):
    """Test periods in filenames survive when allowed."""
    write_file("content/foo/bar.baz.html", "bar")
    config = DataSourceConfig(allow_periods_in_identifiers=True)

    items = FilesystemDataSource(tmp_path, config).items()

    assert [i.identifier for i in items] == ["/foo/bar.baz/"]


def test_items_pair_meta_files(tmp_path, write_file):
    """Test meta files are merged with their content files."""
    write_file("content/foo.html", "Body")
    write_file("content/foo.yaml", "title: Foo\n")
    write_file("content/bar.yaml", "title: Bar\n")

    items = _by_identifier(FilesystemDataSource(tmp_path).items())

    assert items["/foo/"].attributes["title"] == "Foo"
    assert items["/foo/"].content == "Body"
    assert items["/bar/"].attributes["title"] == "Bar"
    assert items["/bar/"].content == ""


def test_items_ignore_backups(tmp_path, write_file):
    """Test backup files do not create ambiguity."""
    write_file("content/foo.html", "Body")
    write_file("content/foo.html~", "Old")
    write_file("content/foo.html.bak", "Older")

    items = FilesystemDataSource(tmp_path).items()

    assert len(items) == 1


def test_binary_items_and_text_layouts(tmp_path, write_file):
    """Test binary detection applies to items only."""
    write_file("content/logo.png", b"\x89PNG\xff")
    write_file("layouts/default.png", "not really an image")

    source = FilesystemDataSource(tmp_path)

    assert source.items()[0].binary is True
    assert source.layouts()[0].binary is False
    assert source.layouts()[0].kind is ObjectKind.LAYOUT


def test_items_raise_on_ambiguity(tmp_path, write_file):
    """Test two content files with one basename abort the load."""
    write_file("content/foo.html", "a")
    write_file("content/foo.md", "b")

    with pytest.raises(AmbiguousPairingError):
        FilesystemDataSource(tmp_path).items()


def test_load_results_collects_errors(tmp_path, write_file):
    """Test every problem is reported while valid objects still load."""
    write_file("content/good.html", "ok")
    write_file("content/dup.html", "a")
    write_file("content/dup.md", "b")
    write_file("content/broken.html", "---\ntitle: x\n")

    results = FilesystemDataSource(tmp_path).load_results(ObjectKind.ITEM)

    errors = {type(r.error) for r in results if not r.ok}
    values = [r.value.identifier for r in results if r.ok]
    assert errors == {AmbiguousPairingError, MalformedFrontMatterError}
    assert values == ["/good/"]


def test_missing_content_dir_is_empty(tmp_path):
    """Test a site without content directory has no items."""
    assert FilesystemDataSource(tmp_path).items() == []


def test_create_item_round_trip(tmp_path):
    """Test a created item loads back with the same attributes and content."""
    source = FilesystemDataSource(tmp_path)
    attributes = {"title": "Moo!", "tags": ["a", "b"], "nested": {"x": 1}}

    path = source.create_item("\nh1. Hello!\n", attributes, "/moo/")
    items = source.items()

    assert len(items) == 1
    item = items[0]
    assert item.identifier == "/moo/"
    assert item.content == "h1. Hello!"
    assert item.attributes == {
        **attributes,
        "extension": "html",
        "filename": path,
        "content_filename": path,
        "meta_filename": None,
    }


def test_create_item_without_attributes(tmp_path):
    """Test an item without attributes is written without header."""
    source = FilesystemDataSource(tmp_path)

    path = source.create_item("Plain", {}, "/")

    assert path == f"{tmp_path.as_posix()}/content/index.html"
    assert source.items()[0].content == "Plain"


def test_create_layout(tmp_path):
    """Test layouts are written to the layouts directory."""
    source = FilesystemDataSource(tmp_path)

    source.create_layout("<html/>", {"kind": "page"}, "/default/", extension=".haml")

    layouts = source.layouts()
    assert (tmp_path / "layouts" / "default.haml").exists()
    assert layouts[0].identifier == "/default/"
    assert layouts[0].attributes["kind"] == "page"


def test_create_rejects_periods(tmp_path):
    """Test creating an identifier with a period fails by default."""
    with pytest.raises(InvalidIdentifierError):
        FilesystemDataSource(tmp_path).create_item("x", {}, "/a.b/")


def test_create_publishes_event(tmp_path):
    """Test subscribers hear about created files."""
    source = FilesystemDataSource(tmp_path)
    created = []
    source.events.subscribe(lambda event, path: created.append((event, path)))

    path = source.create_item("x", {}, "/foo/")

    assert created == [(FILE_CREATED, path)]


def test_unreadable_content_dir_propagates(tmp_path, monkeypatch):
    """Test scan errors are raised as-is and never captured as results."""
    (tmp_path / "content").mkdir()

    def deny(path):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr("sitefs.content.scanner.os.scandir", deny)
    source = FilesystemDataSource(tmp_path)

    with pytest.raises(PermissionError):
        source.items()
    with pytest.raises(PermissionError):
        source.load_results(ObjectKind.ITEM)


def test_create_item_round_trip_with_dates(tmp_path):
    """Test dates and tuples in attributes survive a write and reload."""
    source = FilesystemDataSource(tmp_path)

    source.create_item("Body", {"published": date(2024, 5, 1), "tags": ("a", "b")}, "/dated/")
    item = source.items()[0]

    assert item.attributes["published"] == date(2024, 5, 1)
    assert item.attributes["tags"] == ["a", "b"]
