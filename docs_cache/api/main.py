"""Main FastAPI application exposing the cache tools over HTTP."""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Depends

from .. import __version__
from .schemas import (
    GetCachedDocsRequest,
    GetCachedDocsResponse,
    CacheDocsRequest,
    CacheDocsResponse,
    HealthResponse,
)
from ..config.settings import Settings
from ..persist import DocCache, ensure_dirs

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Local Docs Cache API",
    description="Cache and retrieve library documentation locally.",
    version=__version__,
)

# Global state (initialized on startup)
_settings: Settings = Settings()
_cache: Optional[DocCache] = None


def configure(settings: Settings) -> None:
    """Set the settings used by the next startup."""
    global _settings
    _settings = settings


def create_cache(settings: Settings) -> DocCache:
    """
    Build a DocCache from settings, creating the cache directory.
    
    Raises:
        OSError: If the cache directory cannot be created
    """
    paths = settings.paths()
    logger.info(f"Base directory: {paths.base_dir}")
    logger.info(f"Cache directory: {paths.cache_dir}")
    logger.info(f"Index file path: {paths.index_path}")
    
    ensure_dirs(paths)
    logger.info("Cache directory ensured.")
    
    return DocCache(paths, extension=settings.cache.extension)


def get_cache() -> DocCache:
    """Dependency to get the document cache."""
    if _cache is None:
        raise HTTPException(status_code=503, detail="Document cache not initialized")
    return _cache


@app.on_event("startup")
async def startup_event():
    """Initialize the cache on startup."""
    global _cache
    _cache = create_cache(_settings)


@app.on_event("shutdown")
async def shutdown_event():
    """Drop the cache on shutdown."""
    global _cache
    _cache = None


@app.get("/", response_model=dict)
async def root():
    """Root endpoint."""
    return {
        "message": "Local Docs Cache API is running",
        "version": __version__,
        "tools": ["get_cached_docs", "cache_docs"],
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(
        status="ok",
        components={"cache": _cache is not None},
    )


@app.post(
    "/tools/get_cached_docs",
    response_model=GetCachedDocsResponse,
    response_model_exclude_none=True,
)
async def get_cached_docs(
    request: GetCachedDocsRequest,
    cache: DocCache = Depends(get_cache),
):
    """Retrieves cached documentation for a given library."""
    result = await cache.get(request.library_name)
    return GetCachedDocsResponse(**result.to_dict())


@app.post(
    "/tools/cache_docs",
    response_model=CacheDocsResponse,
    response_model_exclude_none=True,
)
async def cache_docs(
    request: CacheDocsRequest,
    cache: DocCache = Depends(get_cache),
):
    """Saves documentation content to the local cache."""
    result = await cache.put(request.library_name, request.content)
    return CacheDocsResponse(**result.to_dict())
