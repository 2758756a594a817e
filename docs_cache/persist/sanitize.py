"""
Library name sanitization.

Maps caller-supplied library names to tokens that are safe to use as a
single filename component inside the cache directory.
"""

import re

_DISALLOWED = re.compile(r"[^A-Za-z0-9._-]")
_TRAVERSAL = re.compile(r"\.\.")


def sanitize_library_name(name: str) -> str:
    """
    Sanitize a library name for use as a cache key and filename stem.

    Every character outside ``[A-Za-z0-9._-]`` becomes ``_``, then every
    ``..`` pair in the result becomes ``_``.

    Distinct names can map to the same key (``"a/b"`` and ``"a_b"``);
    such names share one cache entry.

    Examples:
        >>> sanitize_library_name("@types/react")
        '_types_react'
        >>> sanitize_library_name("../../etc/passwd")
        '____etc_passwd'
    """
    replaced = _DISALLOWED.sub("_", name)
    return _TRAVERSAL.sub("_", replaced)
