"""Exceptions raised by the cache persistence layer."""


class CacheError(Exception):
    """Base class for cache storage failures."""


class IndexCorruptError(CacheError):
    """Index file exists but cannot be read or does not hold a valid index."""


class CacheWriteError(CacheError):
    """Content file or index file could not be written."""
