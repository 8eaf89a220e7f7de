from __future__ import annotations

from pathlib import Path

import pytest

from feeds import README_TEMPLATE, sample_feed_xml


@pytest.fixture
def feed_file(tmp_path: Path) -> Path:
    path = tmp_path / "shelf.rss"
    path.write_text(sample_feed_xml(), encoding="utf-8")
    return path


@pytest.fixture
def readme(tmp_path: Path) -> Path:
    path = tmp_path / "README.md"
    path.write_text(README_TEMPLATE, encoding="utf-8")
    return path
