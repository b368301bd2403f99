"""Shared test fixtures."""

from pathlib import Path

import pytest
from masteringjs.config import (
    AnalyticsConfig,
    Config,
    DocsConfig,
    LiveReloadConfig,
    ServerConfig,
    SiteConfig,
)


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Create a content directory with two dated tutorials and a draft."""
    content = tmp_path / "content"
    (content / "fundamentals").mkdir(parents=True)
    (content / "promises.md").write_text(
        '+++\n'
        'title = "Promises"\n'
        'description = "How promises chain"\n'
        'tags = ["async", "fundamentals"]\n'
        'date = 2019-05-13\n'
        '+++\n'
        '\n'
        'A promise is a **value** that resolves later.\n'
    )
    (content / "fundamentals" / "index.md").write_text(
        '+++\n'
        'title = "Fundamentals"\n'
        'date = 2020-01-02\n'
        '+++\n'
        '\n'
        'Start here.\n'
    )
    (content / "wip.md").write_text(
        '+++\n'
        'title = "Work in progress"\n'
        'draft = true\n'
        '+++\n'
        '\n'
        'Not yet.\n'
    )
    return content


@pytest.fixture
def test_config(tmp_path: Path, content_dir: Path) -> Config:
    """Create a test configuration with tmp_path directories."""
    return Config(
        server=ServerConfig(),
        docs=DocsConfig(
            source_dir=content_dir,
            output_dir=tmp_path / "dist",
            cache_dir=tmp_path / ".cache",
        ),
        site=SiteConfig(),
        analytics=AnalyticsConfig(),
        live_reload=LiveReloadConfig(enabled=False),
    )
