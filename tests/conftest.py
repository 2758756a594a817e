"""Test configuration and fixtures."""

from pathlib import Path

import pytest

from docs_cache.config.settings import CacheCfg, Settings


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings rooted in a temporary base directory."""
    return Settings(cache=CacheCfg(base_dir=str(tmp_path / "base")))
