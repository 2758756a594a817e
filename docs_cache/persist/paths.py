"""
Path management for the documentation cache.

Provides the fixed on-disk layout relative to a base directory:

    <base_dir>/index.json     sanitized name -> relative filename
    <base_dir>/cache/         one content file per entry
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import IndexCorruptError


@dataclass
class CachePaths:
    """Centralized paths for a cache and its index."""
    
    base_dir: Path             # e.g., project root
    cache_dir: Path            # e.g., <base_dir>/cache
    index_path: Path           # e.g., <base_dir>/index.json
    
    def content_path(self, filename: str) -> Path:
        """
        Resolve an index value to a file inside the cache directory.
        
        Args:
            filename: Relative filename as stored in the index
        
        Returns:
            Absolute path of the content file
        
        Raises:
            IndexCorruptError: If the filename escapes the cache directory
        """
        root = self.cache_dir.resolve()
        candidate = (root / filename).resolve()
        if candidate == root or root not in candidate.parents:
            raise IndexCorruptError(
                f"Index entry {filename!r} points outside {self.cache_dir}"
            )
        return candidate


def default_base_dir() -> Path:
    """
    Base directory derived from the installed package location.
    
    The package lives in ``<base_dir>/docs_cache``, so the cache sits next
    to it, the same way a compiled server keeps its data beside ``dist/``.
    """
    return Path(__file__).resolve().parent.parent.parent


def get_cache_paths(
    base_dir: Optional[Path] = None,
    cache_subdir: str = "cache",
    index_filename: str = "index.json",
) -> CachePaths:
    """
    Create CachePaths for a base directory.
    
    Args:
        base_dir: Base directory (defaults to default_base_dir())
        cache_subdir: Name of the content directory under base_dir
        index_filename: Name of the index file under base_dir
    
    Returns:
        CachePaths with the cache directory and index file resolved
    """
    if base_dir is None:
        base_dir = default_base_dir()
    base_dir = Path(base_dir).resolve()
    
    return CachePaths(
        base_dir=base_dir,
        cache_dir=base_dir / cache_subdir,
        index_path=base_dir / index_filename,
    )


def ensure_dirs(cp: CachePaths) -> None:
    """
    Create the base and cache directories if they don't exist.
    
    Args:
        cp: CachePaths instance
    """
    cp.base_dir.mkdir(parents=True, exist_ok=True)
    cp.cache_dir.mkdir(parents=True, exist_ok=True)
