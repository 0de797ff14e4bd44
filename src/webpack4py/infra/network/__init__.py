from __future__ import annotations

"""
Network Communication Infrastructure.

Wraps the HTTP interactions with a webpack dev server that serves the
compiled-asset manifest from memory.
"""

from webpack4py.infra.network.common import is_remote_source
from webpack4py.infra.network.manifest_client import (
    fetch_manifest_data,
    probe_manifest,
)

__all__ = [
    "fetch_manifest_data",
    "probe_manifest",
    "is_remote_source",
]
