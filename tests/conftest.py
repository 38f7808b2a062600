# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
# =============================================================================

import logging
import os

os.environ.setdefault("PORT", "8080")

import pytest
from fastapi.testclient import TestClient
from jinja2 import Environment, FileSystemLoader

from static_site.config import get_logging_settings, get_settings
from static_site.main import create_app


# =============================================================================
# Fixtures
# =============================================================================

# Bytes that are not valid UTF-8, to check files are served untouched
SAMPLE_BINARY = bytes(range(256))

SAMPLE_CSS = "body { color: #243b53; }\n"


@pytest.fixture
def assets_dir(tmp_path):
    """Assets directory with a stylesheet and a binary file."""
    directory = tmp_path / "assets"
    (directory / "images").mkdir(parents=True)
    (directory / "main.css").write_text(SAMPLE_CSS)
    (directory / "images" / "blob.bin").write_bytes(SAMPLE_BINARY)
    return directory


@pytest.fixture
def app(assets_dir):
    """Application serving the temporary assets directory."""
    return create_app(assets_dir)


@pytest.fixture
def client(app):
    """Test client that returns 500 responses instead of raising."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def clean_settings():
    """Drop cached settings before and after the test."""
    get_settings.cache_clear()
    get_logging_settings.cache_clear()
    yield
    get_settings.cache_clear()
    get_logging_settings.cache_clear()


@pytest.fixture
def restore_log_levels():
    """Put back any logger levels a test changes."""
    names = ["", "static_site", "uvicorn", "app.db"]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


class DirectoryTemplate:
    """Renderable that loads its file from an arbitrary directory."""

    def __init__(self, directory, path: str):
        self.directory = directory
        self.path = path

    def render(self) -> str:
        env = Environment(loader=FileSystemLoader(str(self.directory)))
        return env.get_template(self.path).render()


@pytest.fixture
def non_utf8_template(tmp_path):
    """Template file whose bytes are not valid UTF-8."""
    directory = tmp_path / "templates"
    directory.mkdir()
    (directory / "latin1.html").write_bytes("<p>café</p>".encode("latin-1"))
    return DirectoryTemplate(directory, "latin1.html")
