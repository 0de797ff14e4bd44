from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the path primitives the configuration tree and the compiler rely
on: base-relative expansion into absolute paths, segment joining and glob
expansion of tracked path patterns.
"""

import glob
import os
from typing import Iterable, List, Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def expand_path(path: str, base: Optional[str] = None) -> str:
    """
    Resolve a path against a base directory into a normalized absolute path.

    User home shortcuts (~/) are expanded in both arguments. An absolute
    path ignores the base; a missing base means the current directory.

    Args:
        path: Raw path, absolute or relative.
        base: Directory relative paths are resolved against.

    Returns:
        str: Normalized absolute path.
    """
    p = os.path.expanduser(path)
    if os.path.isabs(p):
        return os.path.normpath(p)

    b = os.path.expanduser(base) if base else os.getcwd()
    return os.path.normpath(os.path.join(os.path.abspath(b), p))


def join_path(base: Optional[str], *segments: str) -> str:
    """Join fixed segments under a base directory (no normalization)."""
    return os.path.join(base or "", *segments)


def expand_patterns(patterns: Iterable[str]) -> List[str]:
    """
    Expand absolute glob patterns into the sorted list of matching files.

    Plain paths that do not exist are dropped. Directories matched by a
    pattern are skipped; only regular files are tracked.

    Args:
        patterns: Absolute paths or glob patterns (``**`` is recursive).

    Returns:
        List[str]: Unique file paths in lexical order.
    """
    found = set()
    for pattern in patterns:
        for match in glob.glob(pattern, recursive=True):
            if os.path.isfile(match):
                found.add(os.path.normpath(match))
    return sorted(found)


def ensure_dir(path: str) -> None:
    """Idempotently create a directory hierarchy."""
    os.makedirs(path, exist_ok=True)
