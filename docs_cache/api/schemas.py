"""
Pydantic schemas for the cache tools.

Field aliases carry the wire names used by tool callers.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional, Dict


class GetCachedDocsRequest(BaseModel):
    """Request model for get_cached_docs."""
    
    model_config = ConfigDict(populate_by_name=True)
    
    library_name: str = Field(..., alias="libraryName", description="The name of the library/framework to retrieve documentation for.")


class GetCachedDocsResponse(BaseModel):
    """Result of the cache lookup."""
    
    status: Literal["found", "not_found"] = Field(..., description="Indicates if the documentation was found in the cache.")
    content: Optional[str] = Field(default=None, description="The cached documentation content, if found.")
    message: Optional[str] = Field(default=None, description="Failure description when the index could not be loaded.")


class CacheDocsRequest(BaseModel):
    """Request model for cache_docs."""
    
    model_config = ConfigDict(populate_by_name=True)
    
    library_name: str = Field(..., alias="libraryName", description="The name of the library/framework being cached.")
    content: str = Field(..., description="The documentation content to cache.")


class CacheDocsResponse(BaseModel):
    """Result of the caching operation."""
    
    status: Literal["success", "error"] = Field(..., description="Indicates if caching was successful.")
    message: Optional[str] = Field(default=None, description="An optional message, e.g., an error description.")


class HealthResponse(BaseModel):
    """Response model for /health endpoint."""
    
    status: str = Field(..., description="Service status")
    components: Dict[str, bool] = Field(default_factory=dict, description="Component availability")
