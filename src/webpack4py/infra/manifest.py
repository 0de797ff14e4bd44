from __future__ import annotations

"""
Compiled-Asset Manifest Loader.

Default implementation of the manifest handle consumed by the manifest
repository. A handle wraps one webpack manifest (the JSON object written by
webpack-manifest-plugin and friends, mapping logical entry keys to hashed
output files) stored on disk or served by a webpack dev server.

Loading is lazy. With ``cache=True`` the parsed mapping is memoized for the
handle's lifetime; otherwise the source is re-read on every query so that
rebuilds are picked up immediately during development.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from webpack4py.domain.errors import ManifestEntryNotFoundError, ManifestLoadError
from webpack4py.infra import network

logger = logging.getLogger(__name__)


class Manifest:
    """
    Handle over a single compiled-asset manifest.

    Args:
        path: Local file path or ``http(s)://`` URL of the manifest.
        cache: Memoize the parsed manifest instead of re-reading it per query.
        **options: Extra loader options; ``timeout`` applies to remote sources.
    """

    def __init__(self, path: Optional[str], cache: bool = False, **options: Any) -> None:
        self._path = path
        self._cache = bool(cache)
        self._options: Dict[str, Any] = dict(options)
        self._data: Optional[Dict[str, Any]] = None

    @property
    def path(self) -> Optional[str]:
        return self._path

    @property
    def cache(self) -> bool:
        return self._cache

    @property
    def options(self) -> Dict[str, Any]:
        return dict(self._options, cache=self._cache)

    @property
    def data(self) -> Dict[str, Any]:
        """The parsed manifest mapping, honoring the cache policy."""
        if self._cache and self._data is not None:
            return self._data

        data = self._load()
        if self._cache:
            self._data = data
        return data

    def lookup(self, key: str) -> Any:
        """
        Resolve a logical entry key to its compiled output.

        Raises:
            ManifestEntryNotFoundError: If the manifest has no such entry.
            ManifestLoadError: If the manifest itself cannot be loaded.
        """
        data = self.data
        if key not in data:
            raise ManifestEntryNotFoundError(key, self._path)
        return data[key]

    def get(self, key: str, default: Any = None) -> Any:
        """Resolve an entry key, returning ``default`` when it is absent."""
        return self.data.get(key, default)

    def exists(self) -> bool:
        """Tell whether the manifest source is currently available."""
        if not self._path:
            return False
        if network.is_remote_source(self._path):
            return network.probe_manifest(self._path)
        return os.path.isfile(self._path)

    def reload(self) -> None:
        """Drop memoized data so the next query reads the source again."""
        self._data = None

    def _load(self) -> Dict[str, Any]:
        if not self._path:
            raise ManifestLoadError(self._path, "no manifest path configured")

        if network.is_remote_source(self._path):
            timeout = self._options.get("timeout")
            if timeout is None:
                return network.fetch_manifest_data(self._path)
            return network.fetch_manifest_data(self._path, timeout=timeout)

        logger.debug(f"Reading manifest file: {self._path}")
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ManifestLoadError(self._path, "file not found") from e
        except json.JSONDecodeError as e:
            raise ManifestLoadError(self._path, f"invalid JSON: {e}") from e
        except OSError as e:
            raise ManifestLoadError(self._path, str(e)) from e

        if not isinstance(data, dict):
            raise ManifestLoadError(self._path, "root is not a JSON object")
        return data

    def __repr__(self) -> str:
        return f"Manifest(path={self._path!r}, cache={self._cache!r})"
