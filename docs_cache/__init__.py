"""Local documentation cache served over MCP and HTTP."""

__version__ = "0.1.0"
