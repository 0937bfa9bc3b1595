"""Shared pytest configuration and fixtures for all tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from mdlinkcheck.api.config.RunConfig import RunConfig
from mdlinkcheck.api.link._parsers import MarkdownItParser


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external programs")
    config.addinivalue_line("markers", "integration: tests that run external programs")


# =============================================================================
# Document tree helpers
# =============================================================================


@pytest.fixture
def write_docs(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Lay out Markdown files under ``tmp_path``.

    Keys are paths relative to ``tmp_path`` (subdirectories are created),
    values are file contents. Returns the root directory.
    """

    def _write(files: dict[str, str]) -> Path:
        for rel_path, content in files.items():
            path = tmp_path / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def markdown_parser() -> MarkdownItParser:
    return MarkdownItParser()


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., RunConfig]:
    """Build a RunConfig rooted at ``tmp_path`` without touching git or config files."""

    def _make(**overrides) -> RunConfig:
        values = {"base_path": tmp_path, **overrides}
        return RunConfig(**values)

    return _make
