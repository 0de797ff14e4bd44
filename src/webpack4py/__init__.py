from __future__ import annotations

"""
webpack4py: per-site webpack configuration and manifest resolution.

Typical single-site usage::

    config = Configuration(root_path="/app")
    config.manifest = "/app/public/assets/manifest.json"
    config.manifests.default.lookup("application.js")

With several sites, declare each under the root::

    config.add("web", "/app/public/manifest-web.json")
    config.add("admin", "/app/public/manifest-admin.json")
"""

from webpack4py.domain.configuration import (
    ConfigAttr,
    Configuration,
    ConfigurationCollection,
)
from webpack4py.domain.errors import (
    CollectionNotFoundError,
    ManifestEntryNotFoundError,
    ManifestLoadError,
    ManifestNotFoundError,
    StructuralError,
    Webpack4pyError,
)
from webpack4py.domain.manifest_repository import ManifestRepository
from webpack4py.infra.manifest import Manifest

__version__ = "0.1.0"

__all__ = [
    "ConfigAttr",
    "Configuration",
    "ConfigurationCollection",
    "ManifestRepository",
    "Manifest",
    "Webpack4pyError",
    "StructuralError",
    "CollectionNotFoundError",
    "ManifestNotFoundError",
    "ManifestLoadError",
    "ManifestEntryNotFoundError",
]
