"""Unit test for settings configuration."""

from pathlib import Path

from docs_cache.config.settings import CacheCfg, Settings
from docs_cache.persist.paths import default_base_dir


def test_default_settings():
    """Test that default settings are correctly configured."""
    settings = Settings()
    assert settings.cache.base_dir is None
    assert settings.cache.cache_subdir == "cache"
    assert settings.cache.index_filename == "index.json"
    assert settings.cache.extension == ".md"
    assert settings.server.name == "local-docs-cache"
    assert settings.server.port == 8000


def test_default_paths_next_to_package():
    """Without a base dir the cache sits beside the package."""
    paths = Settings().paths()
    assert paths.base_dir == default_base_dir()
    assert (paths.base_dir / "docs_cache").is_dir()
    assert paths.cache_dir == paths.base_dir / "cache"
    assert paths.index_path == paths.base_dir / "index.json"


def test_custom_layout(tmp_path):
    """Subdir and index name are configurable."""
    settings = Settings(cache=CacheCfg(
        base_dir=str(tmp_path),
        cache_subdir="docs",
        index_filename="docs-index.json",
    ))
    paths = settings.paths()
    assert paths.cache_dir == tmp_path.resolve() / "docs"
    assert paths.index_path == tmp_path.resolve() / "docs-index.json"
