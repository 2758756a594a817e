"""
Shared fixtures for cache unit tests.
"""
import pytest
from pathlib import Path
from docs_cache.persist.doc_store import DocCache
from docs_cache.persist.paths import CachePaths, ensure_dirs, get_cache_paths


@pytest.fixture
def cache_paths(tmp_path) -> CachePaths:
    """Create a temporary cache layout with the cache directory in place."""
    paths = get_cache_paths(tmp_path)
    ensure_dirs(paths)
    return paths


@pytest.fixture
def doc_cache(cache_paths) -> DocCache:
    """Create a DocCache over the temporary layout."""
    return DocCache(cache_paths)


@pytest.fixture
def sample_docs():
    """Sample documentation keyed by library name."""
    return {
        "react": "# React docs\n\nA JavaScript library for building user interfaces.\n",
        "@types/node": "# Node typings\n",
        "fastapi": "# FastAPI\n\nUnicode: héllo wörld ✓\r\nCRLF kept.\n",
    }
