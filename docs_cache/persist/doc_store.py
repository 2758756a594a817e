"""
Documentation cache - store and retrieve documents by library name.

Each entry is one file under the cache directory; the index maps the
sanitized library name to that file. Blocking file I/O runs in a thread
pool so concurrent calls interleave at filesystem operations.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Literal, Optional

from .errors import CacheError, CacheWriteError
from .index_store import CacheIndex, atomic_write_text, load_index, save_index
from .paths import CachePaths
from .sanitize import sanitize_library_name

logger = logging.getLogger(__name__)


@dataclass
class GetResult:
    """Outcome of a cache lookup."""
    
    status: Literal["found", "not_found"]
    content: Optional[str] = None
    message: Optional[str] = None
    
    def to_dict(self) -> dict:
        """Convert to dict, omitting unset fields."""
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass
class PutResult:
    """Outcome of a cache write."""
    
    status: Literal["success", "error"]
    message: Optional[str] = None
    
    def to_dict(self) -> dict:
        """Convert to dict, omitting unset fields."""
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass
class CacheEntryInfo:
    """Index entry plus the state of its content file."""
    
    name: str
    filename: str
    size: int
    exists: bool


class DocCache:
    """
    File-backed documentation cache.
    
    Owns the index file and every file under the cache directory. The index
    is reloaded from disk on every call. Writers are serialized by an
    asyncio lock so concurrent puts never drop each other's index entries.
    """
    
    def __init__(
        self,
        paths: CachePaths,
        extension: str = ".md",
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        """
        Initialize cache over an existing directory layout.
        
        Args:
            paths: CachePaths; cache_dir must already exist
            extension: Suffix appended to the sanitized name for content files
            executor: Thread pool for file I/O (defaults to the loop's)
        """
        self.paths = paths
        self.extension = extension
        self.executor = executor
        
        self._lock = asyncio.Lock()
    
    async def _run(self, func, *args):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, func, *args)
    
    def _write_content(self, path: Path, content: str) -> None:
        try:
            atomic_write_text(path, content)
        except (OSError, UnicodeEncodeError) as e:
            raise CacheWriteError(f"Could not write {path.name}: {e}") from e
    
    async def get(self, library_name: str) -> GetResult:
        """
        Retrieve cached documentation.
        
        Args:
            library_name: Library name as supplied by the caller
        
        Returns:
            GetResult with status "found" and the content, or "not_found"
            when the name is not indexed or its file cannot be read
        """
        logger.info(f"Received request to get cached docs for: {library_name}")
        
        try:
            index = await self._run(load_index, self.paths)
        except CacheError as e:
            logger.error(f"Error in get_cached_docs for {library_name}: {e}")
            return GetResult(status="not_found", message=str(e))
        
        key = sanitize_library_name(library_name)
        filename = index.get(key)
        
        if filename is None:
            logger.info(f"{library_name} not found in index.")
            return GetResult(status="not_found")
        
        full_path = self.paths.content_path(filename)
        logger.info(f"Found in index. Reading from: {full_path}")
        
        try:
            content = await self._run(self._read_content, full_path)
        except (OSError, UnicodeDecodeError) as e:
            # Index/filesystem drift looks the same as a miss to the caller
            logger.error(f"Error reading cache file {full_path}: {e}")
            return GetResult(status="not_found")
        
        logger.info(f"Successfully read content for {library_name}.")
        return GetResult(status="found", content=content)
    
    def _read_content(self, path: Path) -> str:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    
    async def put(self, library_name: str, content: str) -> PutResult:
        """
        Store documentation, replacing any earlier entry for the same key.
        
        Args:
            library_name: Library name as supplied by the caller
            content: Documentation text
        
        Returns:
            PutResult with status "success", or "error" carrying the
            underlying failure. A content file written before a failed
            index save is left in place.
        """
        logger.info(f"Received request to cache docs for: {library_name}")
        
        key = sanitize_library_name(library_name)
        filename = f"{key}{self.extension}"
        
        try:
            async with self._lock:
                index = await self._run(load_index, self.paths)
                full_path = self.paths.content_path(filename)
                
                logger.info(f"Writing content to: {full_path}")
                await self._run(self._write_content, full_path, content)
                
                index[key] = filename
                await self._run(save_index, self.paths, index)
        except CacheError as e:
            logger.error(f"Error in cache_docs for {library_name}: {e}")
            return PutResult(status="error", message=str(e))
        
        logger.info(f"Successfully cached docs for {library_name}.")
        return PutResult(
            status="success",
            message=f"Successfully cached docs for {library_name}.",
        )
    
    async def list_entries(self) -> list[CacheEntryInfo]:
        """
        List indexed entries with the size of their content files.
        
        Returns:
            One CacheEntryInfo per index key, sorted by name; entries whose
            file is missing have exists=False and size 0
        
        Raises:
            IndexCorruptError: If the index cannot be loaded
        """
        index = await self._run(load_index, self.paths)
        return await self._run(self._describe, index)
    
    def _describe(self, index: CacheIndex) -> list[CacheEntryInfo]:
        entries = []
        for name in sorted(index):
            path = self.paths.content_path(index[name])
            exists = path.is_file()
            entries.append(CacheEntryInfo(
                name=name,
                filename=index[name],
                size=path.stat().st_size if exists else 0,
                exists=exists,
            ))
        return entries
