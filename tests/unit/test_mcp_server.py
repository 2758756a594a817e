"""
Unit tests for the MCP tool registration and handlers.
"""
import json

import pytest

from docs_cache.api.mcp_server import (
    build_server,
    handle_cache_docs,
    handle_get_cached_docs,
)

pytestmark = pytest.mark.asyncio


async def test_tools_registered(doc_cache):
    """Both tools are exposed with their wire argument names."""
    server = build_server(doc_cache)
    
    tools = {tool.name: tool for tool in await server.list_tools()}
    
    assert set(tools) == {"get_cached_docs", "cache_docs"}
    assert "libraryName" in tools["get_cached_docs"].inputSchema["properties"]
    assert set(tools["cache_docs"].inputSchema["required"]) == {"libraryName", "content"}


async def test_handlers_roundtrip(doc_cache):
    """Handlers return the structured result shapes."""
    stored = await handle_cache_docs(doc_cache, "react", "# React docs")
    
    assert stored == {"status": "success", "message": "Successfully cached docs for react."}
    assert await handle_get_cached_docs(doc_cache, "react") == {
        "status": "found",
        "content": "# React docs",
    }
    assert await handle_get_cached_docs(doc_cache, "react-dom") == {"status": "not_found"}


def _tool_json(result) -> dict:
    # Newer SDKs return (content, structured), older ones the content list
    content = result[0] if isinstance(result, tuple) else result
    return json.loads("".join(block.text for block in content))


async def test_registered_tools_roundtrip(doc_cache):
    """Calling the registered tools by wire name stores and reads content."""
    server = build_server(doc_cache)
    
    stored = await server.call_tool(
        "cache_docs", {"libraryName": "react", "content": "# React docs"}
    )
    assert _tool_json(stored)["status"] == "success"
    
    found = await server.call_tool("get_cached_docs", {"libraryName": "react"})
    assert _tool_json(found) == {"status": "found", "content": "# React docs"}
    
    missing = await server.call_tool("get_cached_docs", {"libraryName": "react-dom"})
    assert _tool_json(missing) == {"status": "not_found"}
