from __future__ import annotations

"""
Manifest Repository.

Indexes the compiled-asset manifests of every active site by site id and
designates the first registered one as the default (the single-site
manifest, or the conventional primary site).
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from webpack4py.domain.errors import ManifestNotFoundError
from webpack4py.infra.manifest import Manifest

logger = logging.getLogger(__name__)

ManifestFactory = Callable[..., Any]


class ManifestRepository:
    """
    Keyed set of manifest handles with a designated default.

    Handles are built by ``manifest_factory(path, **options)``; failures
    raised by the factory propagate unchanged. Entries are never updated or
    removed: the repository is rebuilt instead.
    """

    def __init__(self, manifest_factory: Optional[ManifestFactory] = None) -> None:
        self._factory: ManifestFactory = manifest_factory or Manifest
        self._manifests: Dict[str, Any] = {}
        self._default: Optional[Any] = None

    @property
    def default(self) -> Optional[Any]:
        """The first manifest added, or None for an empty repository."""
        return self._default

    @property
    def all_manifests(self) -> List[Any]:
        return list(self._manifests.values())

    def add(self, key: Any, path: Optional[str], **options: Any) -> None:
        manifest = self._factory(path, **options)
        if not self._manifests:
            self._default = manifest
        self._manifests[str(key)] = manifest
        logger.debug(f"Registered manifest '{key}' -> {path}")

    def get(self, key: Any) -> Any:
        """
        Return the manifest registered under ``key``.

        Raises:
            ManifestNotFoundError: If no manifest is registered under the key.
        """
        try:
            return self._manifests[str(key)]
        except KeyError:
            raise ManifestNotFoundError(str(key)) from None

    def keys(self) -> List[str]:
        return list(self._manifests)

    def __contains__(self, key: object) -> bool:
        return str(key) in self._manifests

    def __len__(self) -> int:
        return len(self._manifests)

    def __repr__(self) -> str:
        return f"ManifestRepository(keys={self.keys()!r})"
