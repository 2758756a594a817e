"""
CLI utility for inspecting the documentation cache.

Usage:
    python scripts/cache_admin.py --stats
    python scripts/cache_admin.py --list --base-dir /var/lib/docs-cache
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from docs_cache.persist import CacheError, DocCache, get_cache_paths


def format_bytes(bytes_val: int) -> str:
    """Format bytes as human-readable string."""
    for unit in ["B", "KB", "MB", "GB"]:
        if bytes_val < 1024:
            return f"{bytes_val:.1f} {unit}"
        bytes_val /= 1024
    return f"{bytes_val:.1f} TB"


def show_stats(cache: DocCache) -> int:
    """
    Display cache statistics.
    
    Args:
        cache: DocCache to inspect
    """
    entries = asyncio.run(cache.list_entries())
    total_bytes = sum(e.size for e in entries)
    drifted = [e for e in entries if not e.exists]
    
    print(f"📊 Cache Statistics: {cache.paths.base_dir}\n")
    print(f"{'Entries':<15} {len(entries):>10,}")
    print(f"{'Size':<15} {format_bytes(total_bytes):>10}")
    print(f"{'Missing files':<15} {len(drifted):>10,}")
    
    return 0


def list_entries(cache: DocCache) -> int:
    """
    Print one line per indexed entry.
    
    Args:
        cache: DocCache to inspect
    """
    entries = asyncio.run(cache.list_entries())
    
    print(f"{'Name':<40} {'File':<44} {'Size':>10}")
    print("=" * 96)
    
    for entry in entries:
        size = format_bytes(entry.size) if entry.exists else "missing"
        print(f"{entry.name:<40} {entry.filename:<44} {size:>10}")
    
    return 0


def main(argv=None):
    """CLI entrypoint."""
    parser = argparse.ArgumentParser(
        description="Inspect the local documentation cache"
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show cache statistics",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List cached entries",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Directory holding index.json and cache/ (default: project root)",
    )
    
    args = parser.parse_args(argv)
    
    # Require at least one action
    if not args.stats and not args.list:
        parser.print_help()
        print("\n❌ Error: Must specify --stats or --list")
        return 1
    
    cache = DocCache(get_cache_paths(args.base_dir))
    
    try:
        if args.stats:
            exit_code = show_stats(cache)
            if exit_code != 0:
                return exit_code
        
        if args.list:
            return list_entries(cache)
    except CacheError as e:
        print(f"❌ {e}")
        return 1
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
