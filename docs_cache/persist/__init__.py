"""
Persistence layer for the documentation cache.

Provides:
- Library name sanitization
- Cache path layout
- Atomic index serialization/deserialization
- The DocCache store with async get/put
"""

from .sanitize import sanitize_library_name
from .errors import CacheError, IndexCorruptError, CacheWriteError
from .paths import CachePaths, default_base_dir, ensure_dirs, get_cache_paths
from .index_store import CacheIndex, atomic_write_text, load_index, save_index, validate_index
from .doc_store import CacheEntryInfo, DocCache, GetResult, PutResult

__all__ = [
    "sanitize_library_name",
    "CacheError",
    "IndexCorruptError",
    "CacheWriteError",
    "CachePaths",
    "default_base_dir",
    "ensure_dirs",
    "get_cache_paths",
    "CacheIndex",
    "atomic_write_text",
    "load_index",
    "save_index",
    "validate_index",
    "CacheEntryInfo",
    "DocCache",
    "GetResult",
    "PutResult",
]
