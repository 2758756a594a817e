"""
MCP server exposing the cache tools over stdio.

Tool arguments keep the camelCase wire names callers already send.
"""

import logging

from mcp.server.fastmcp import FastMCP

from ..persist import DocCache

logger = logging.getLogger(__name__)


async def handle_get_cached_docs(cache: DocCache, library_name: str) -> dict:
    """Look up a library and return the get_cached_docs result shape."""
    result = await cache.get(library_name)
    return result.to_dict()


async def handle_cache_docs(cache: DocCache, library_name: str, content: str) -> dict:
    """Store a document and return the cache_docs result shape."""
    result = await cache.put(library_name, content)
    return result.to_dict()


def register_cache_tools(mcp: FastMCP, cache: DocCache) -> None:

    @mcp.tool(
        name="get_cached_docs",
        description="Retrieves cached documentation for a given library.",
    )
    async def get_cached_docs(libraryName: str) -> dict:
        return await handle_get_cached_docs(cache, libraryName)

    @mcp.tool(
        name="cache_docs",
        description="Saves documentation content to the local cache.",
    )
    async def cache_docs(libraryName: str, content: str) -> dict:
        return await handle_cache_docs(cache, libraryName, content)


def build_server(cache: DocCache, name: str = "local-docs-cache") -> FastMCP:
    """
    Create an MCP server with both cache tools registered.
    
    Args:
        cache: Store backing the tools
        name: Server name announced to clients
    
    Returns:
        FastMCP instance; call .run() to serve over stdio
    """
    mcp = FastMCP(name)
    register_cache_tools(mcp, cache)
    return mcp


def serve_stdio(cache: DocCache, name: str = "local-docs-cache") -> None:
    """Run the MCP server on stdin/stdout until the client disconnects."""
    mcp = build_server(cache, name)
    logger.info("Connecting stdio transport...")
    mcp.run(transport="stdio")
