from __future__ import annotations

"""
Configuration Tree Domain.

A one or two level configuration system. In the typical single-site setup
only the root configuration exists. When an application serves more than
one site, each site gets its own configuration on the second level of the
tree and inherits every attribute it does not override from the root.

Only a root may carry default values and own children; sites never nest.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from webpack4py.domain import constants as const
from webpack4py.domain.errors import CollectionNotFoundError, StructuralError
from webpack4py.domain.manifest_repository import ManifestFactory, ManifestRepository
from webpack4py.infra.fs import expand_path, join_path

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# INHERITED ATTRIBUTES
# -----------------------------------------------------------------------------

class ConfigAttr(str, Enum):
    """Closed set of attributes resolved through the configuration tree."""
    ROOT_PATH = "root_path"
    ID = "id"
    CACHE = "cache"
    BASE_PATH = "base_path"
    MANIFEST = "manifest"
    WATCHED_PATHS = "watched_paths"
    BUILD_COMMAND = "build_command"
    INSTALL_COMMAND = "install_command"


class _ConfigAttribute:
    """
    Descriptor exposing an inherited attribute as a plain property.

    Reads resolve through the parent chain; writes always land in the
    node's local overrides, shadowing the inherited value from then on.
    """

    def __init__(self, attr: ConfigAttr, doc: str = "") -> None:
        self.attr = attr
        self.__doc__ = doc

    def __get__(self, instance: Optional["Configuration"], owner: type) -> Any:
        if instance is None:
            return self
        return instance.resolve(self.attr)

    def __set__(self, instance: "Configuration", value: Any) -> None:
        instance._config[self.attr] = value


# -----------------------------------------------------------------------------
# CONFIGURATION NODE
# -----------------------------------------------------------------------------

class Configuration:
    """
    Node of the configuration tree: either the root or a site under it.

    Args:
        parent: Owning root when building a site; None for a root.
        root_path: Convenience initial value for ``root_path``.
        manifest_factory: Builds manifest handles from ``(path, **options)``.
            Held by the root; sites use their root's factory.
    """

    root_path = _ConfigAttribute(ConfigAttr.ROOT_PATH, "Application root directory.")
    id = _ConfigAttribute(ConfigAttr.ID, "Unique name of the site.")

    cache = _ConfigAttribute(ConfigAttr.CACHE, "Memoize loaded manifests.")

    base_path = _ConfigAttribute(
        ConfigAttr.BASE_PATH, "Base directory of the frontend, relative to root_path."
    )

    manifest = _ConfigAttribute(ConfigAttr.MANIFEST, "Path or URL of the manifest file.")

    watched_paths = _ConfigAttribute(
        ConfigAttr.WATCHED_PATHS,
        "Lazy compilation is cached until a file changes under these paths.",
    )

    build_command = _ConfigAttribute(ConfigAttr.BUILD_COMMAND, "Command bundling the assets.")

    install_command = _ConfigAttribute(
        ConfigAttr.INSTALL_COMMAND, "Command installing the npm packages."
    )

    def __init__(
            self,
            parent: Optional[Configuration] = None,
            *,
            root_path: Optional[str] = None,
            manifest_factory: Optional[ManifestFactory] = None,
    ) -> None:
        self._parent = parent
        self._children: Dict[str, Configuration] = {}
        self._config: Dict[ConfigAttr, Any] = {}
        self._manifest_factory = manifest_factory

        if self.is_root:
            self._reset_defaults()
        if root_path is not None:
            self.root_path = root_path

    # -------------------------------------------------------------------------
    # Tree position
    # -------------------------------------------------------------------------

    @property
    def is_root(self) -> bool:
        return self._parent is None

    @property
    def is_leaf(self) -> bool:
        return not self.is_root

    @property
    def parent(self) -> Optional[Configuration]:
        return self._parent

    @property
    def config(self) -> Dict[str, Any]:
        """Local overrides of this node only, keyed by attribute name."""
        return {attr.value: value for attr, value in self._config.items()}

    @property
    def manifest_factory(self) -> Optional[ManifestFactory]:
        if self.is_root:
            return self._manifest_factory
        return self.parent.manifest_factory

    def resolve(self, attr: Any) -> Any:
        """
        Resolve an attribute: local override, else the parent's value.

        Only a root holds defaults, so the recursion ends there with None
        for attributes nobody configured.
        """
        attr = ConfigAttr(attr)
        if attr in self._config:
            return self._config[attr]

        parent = self.parent
        if parent is None:
            return None
        return parent.resolve(attr)

    # -------------------------------------------------------------------------
    # Tree construction & navigation
    # -------------------------------------------------------------------------

    def add(
            self,
            id: Any,
            path: Optional[str] = None,
            configure: Optional[Callable[[Configuration], Any]] = None,
    ) -> Configuration:
        """
        Register a site configuration, optionally with its manifest path.

        A site registered with an id already in use replaces the previous
        one, keeping its position in the children order.

        Args:
            id: Unique name of the site, coerced to ``str``.
            path: Path of the site's manifest file.
            configure: Callback receiving the new site for further setup.

        Returns:
            Configuration: The new site.

        Raises:
            StructuralError: If called on a site.
        """
        if self.is_leaf:
            raise StructuralError("Defining a sub configuration under a sub is not allowed")

        key = str(id)
        config = type(self)(self)
        config.id = key
        if path is not None:
            config.manifest = path

        if key in self._children:
            logger.debug(f"Replacing site configuration '{key}'")
        self._children[key] = config

        if configure is not None:
            configure(config)

        return config

    @property
    def children(self) -> ConfigurationCollection:
        return ConfigurationCollection(self._children.values())

    @property
    def leaves(self) -> ConfigurationCollection:
        """
        Active configurations: self when no site is declared, else the sites.

        Sites inherit from the root, so every leaf is complete on its own.
        """
        return ConfigurationCollection(self._active())

    @property
    def manifests(self) -> ManifestRepository:
        """
        Build a fresh manifest repository from the active configurations.

        Raises:
            StructuralError: If called on a site.
        """
        if not self.is_root:
            raise StructuralError("Calling manifests is only allowed from a root")

        repo = ManifestRepository(self.manifest_factory)
        for config in self._active():
            repo.add(config.id, config.manifest, cache=config.cache)
        return repo

    # -------------------------------------------------------------------------
    # Path resolution
    # -------------------------------------------------------------------------

    @property
    def resolved_base_path(self) -> str:
        """``base_path`` as an absolute path under ``root_path``."""
        return expand_path(self.base_path or ".", self.root_path)

    @property
    def resolved_watched_paths(self) -> List[str]:
        base = self.resolved_base_path
        return [expand_path(path, base) for path in self.watched_paths or []]

    @property
    def cache_path(self) -> str:
        return join_path(self.root_path, *const.CACHE_DIR_SEGMENTS)

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of every resolved attribute plus the derived paths."""
        data: Dict[str, Any] = {attr.value: self.resolve(attr) for attr in ConfigAttr}
        data["resolved_base_path"] = self.resolved_base_path
        data["resolved_watched_paths"] = self.resolved_watched_paths
        data["cache_path"] = self.cache_path
        return data

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _active(self) -> List[Configuration]:
        return [self] if not self._children else list(self._children.values())

    def _reset_defaults(self) -> None:
        self._config = {
            ConfigAttr.ID: const.ROOT_DEFAULT_ID,
            ConfigAttr.CACHE: const.DEFAULT_CACHE,
            ConfigAttr.WATCHED_PATHS: list(const.DEFAULT_WATCHED_PATHS),
            ConfigAttr.BUILD_COMMAND: const.DEFAULT_BUILD_COMMAND,
            ConfigAttr.INSTALL_COMMAND: const.DEFAULT_INSTALL_COMMAND,
        }

    def __repr__(self) -> str:
        kind = "root" if self.is_root else "site"
        return f"<Configuration {kind} id={self._config.get(ConfigAttr.ID)!r}>"


# -----------------------------------------------------------------------------
# COLLECTION VIEW
# -----------------------------------------------------------------------------

class ConfigurationCollection:
    """
    Read-only snapshot of configurations indexed by id.

    Iterates in construction order. When two nodes share an id the last one
    wins, mirroring ``Configuration.add``.
    """

    def __init__(self, configs: Iterable[Configuration] = ()) -> None:
        self._configs: Dict[str, Configuration] = {str(c.id): c for c in configs}

    def find(self, id: Any) -> Configuration:
        """
        Return the configuration with the given id.

        Raises:
            CollectionNotFoundError: If no configuration has that id.
        """
        try:
            return self._configs[str(id)]
        except KeyError:
            raise CollectionNotFoundError(str(id)) from None

    def get(self, id: Any, default: Optional[Configuration] = None) -> Optional[Configuration]:
        return self._configs.get(str(id), default)

    @property
    def ids(self) -> List[str]:
        return list(self._configs)

    def __iter__(self) -> Iterator[Configuration]:
        return iter(list(self._configs.values()))

    def __contains__(self, id: object) -> bool:
        return str(id) in self._configs

    def __len__(self) -> int:
        return len(self._configs)

    def __repr__(self) -> str:
        return f"ConfigurationCollection(ids={self.ids!r})"
