"""
CLI for launching the documentation cache server.

Usage:
    python scripts/docs_serve.py                      # MCP over stdio
    python scripts/docs_serve.py --transport http --port 8080
    python scripts/docs_serve.py --base-dir /var/lib/docs-cache
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn

from docs_cache.api import main as http_api
from docs_cache.api.mcp_server import serve_stdio
from docs_cache.config.settings import CacheCfg, ServerCfg, Settings

logger = logging.getLogger("docs_cache.serve")


def build_settings(args: argparse.Namespace) -> Settings:
    """Apply CLI flags on top of default settings."""
    return Settings(
        cache=CacheCfg(base_dir=args.base_dir),
        server=ServerCfg(host=args.host, port=args.port, log_level=args.log_level),
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Launch the local documentation cache server"
    )
    
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="stdio for MCP clients, http for the FastAPI app",
    )
    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind to (http only)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind to (http only)",
    )
    parser.add_argument(
        "--base-dir",
        type=str,
        default=None,
        help="Directory holding index.json and cache/ (default: project root)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level",
    )
    
    args = parser.parse_args(argv)
    settings = build_settings(args)
    
    # stdout carries the MCP stream, so logs go to stderr
    logging.basicConfig(
        level=settings.server.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger.info("Starting Local Docs Cache server...")
    
    if args.transport == "http":
        http_api.configure(settings)
        uvicorn.run(
            http_api.app,
            host=settings.server.host,
            port=settings.server.port,
            log_level=settings.server.log_level.lower(),
        )
        return 0
    
    try:
        cache = http_api.create_cache(settings)
    except OSError as e:
        logger.error(f"Error creating cache directory: {e}")
        return 1
    
    serve_stdio(cache, settings.server.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
