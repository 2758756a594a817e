"""
Index persistence - load/save the name -> content file mapping.

The index is a flat JSON object stored at a single path. Saves replace the
whole file atomically so a crash never leaves a truncated index behind.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from .errors import CacheWriteError, IndexCorruptError
from .paths import CachePaths

logger = logging.getLogger(__name__)

CacheIndex = dict[str, str]

# Permissions for written index and content files (rw-r--r--)
FILE_MODE = 0o644


def _index_path(target: Union[Path, CachePaths]) -> Path:
    # Support both Path and CachePaths
    if hasattr(target, "index_path"):
        return target.index_path
    return Path(target)


def validate_index(data: object, cp: Optional[CachePaths] = None) -> CacheIndex:
    """
    Check that deserialized data is a valid index.
    
    Args:
        data: Result of json.loads on the index file
        cp: If given, every value must resolve inside cp.cache_dir
    
    Returns:
        The data, typed as a CacheIndex
    
    Raises:
        IndexCorruptError: If data is not a flat str -> str object, or a
            value escapes the cache directory
    """
    if not isinstance(data, dict):
        raise IndexCorruptError(
            f"Index must be a JSON object, got {type(data).__name__}"
        )
    
    for key, value in data.items():
        if not isinstance(value, str):
            raise IndexCorruptError(
                f"Index value for {key!r} must be a string, got {type(value).__name__}"
            )
        if cp is not None:
            cp.content_path(value)
    
    return data


def load_index(target: Union[Path, CachePaths]) -> CacheIndex:
    """
    Load the cache index from disk.
    
    Args:
        target: Index file path, or CachePaths (enables containment checks)
    
    Returns:
        Mapping of sanitized name to relative filename; empty if the file
        does not exist yet
    
    Raises:
        IndexCorruptError: If the file cannot be read or parsed
    """
    path = _index_path(target)
    cp = target if isinstance(target, CachePaths) else None
    
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading index file {path}: {e}")
        raise IndexCorruptError(f"Could not read cache index: {e}") from e
    
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error(f"Error parsing index file {path}: {e}")
        raise IndexCorruptError(f"Could not parse cache index: {e}") from e
    
    return validate_index(data, cp)


def atomic_write_text(path: Path, text: str, mode: int = FILE_MODE) -> None:
    """
    Replace path with text in one step.
    
    Writes UTF-8 to a temporary file beside path, sets its permissions, then
    renames it over path. Readers see either the old file or the new one.
    The temporary file is removed if anything fails.
    
    Raises:
        OSError: If the file cannot be written or renamed
        UnicodeEncodeError: If text cannot be encoded as UTF-8
    """
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def save_index(target: Union[Path, CachePaths], index: CacheIndex) -> Path:
    """
    Persist the full index, replacing the previous file atomically.
    
    Args:
        target: Index file path or CachePaths
        index: Complete mapping to persist
    
    Returns:
        Path of the written index file
    
    Raises:
        CacheWriteError: If the index cannot be written
    """
    path = _index_path(target)
    
    try:
        atomic_write_text(path, json.dumps(index, ensure_ascii=False, indent=2))
    except (OSError, UnicodeEncodeError) as e:
        logger.error(f"Error writing index file {path}: {e}")
        raise CacheWriteError(f"Could not update cache index: {e}") from e
    
    return path
