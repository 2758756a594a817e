"""Application settings and configuration schema."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from ..persist.paths import CachePaths, get_cache_paths


class CacheCfg(BaseModel):
    """On-disk cache layout."""
    base_dir: Optional[str] = None
    cache_subdir: str = "cache"
    index_filename: str = "index.json"
    extension: str = ".md"


class ServerCfg(BaseModel):
    """Server startup configuration."""
    name: str = "local-docs-cache"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"


class Settings(BaseModel):
    """Main application settings."""
    cache: CacheCfg = CacheCfg()
    server: ServerCfg = ServerCfg()

    def paths(self) -> CachePaths:
        """Resolve the cache layout, defaulting to the package's base dir."""
        base_dir = Path(self.cache.base_dir) if self.cache.base_dir else None
        return get_cache_paths(
            base_dir,
            cache_subdir=self.cache.cache_subdir,
            index_filename=self.cache.index_filename,
        )
