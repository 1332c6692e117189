"""Shared test fixtures for sitefs package."""

import os

import pytest

from sitefs.core.config import DataSourceConfig


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory."""
    return tmp_path


@pytest.fixture
def config():
    """Default data source configuration."""
    return DataSourceConfig()


@pytest.fixture
def periods_config():
    """Configuration with periods allowed in identifiers."""
    return DataSourceConfig(allow_periods_in_identifiers=True)


@pytest.fixture
def mock_site_root(tmp_path, monkeypatch):
    """Create a mock site with content/, layouts/ and sitefs.yaml."""
    (tmp_path / "content").mkdir()
    (tmp_path / "layouts").mkdir()
    (tmp_path / "sitefs.yaml").write_text("encoding: utf-8\n", encoding="utf-8")
    monkeypatch.delenv("SITEFS_SITE_ROOT", raising=False)
    return tmp_path


@pytest.fixture
def write_file(tmp_path):
    """Factory fixture for writing files below tmp_path.

    Accepts str or bytes; returns the slash-delimited path string.
    An optional mtime (epoch seconds) is applied to the file.
    """
    def _write(rel_path: str, data: str | bytes = "", mtime: float | None = None) -> str:
        path = tmp_path / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(data, bytes):
            path.write_bytes(data)
        else:
            path.write_bytes(data.encode("utf-8"))
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path.as_posix()

    return _write
