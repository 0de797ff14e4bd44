from __future__ import annotations

"""
Domain Error Taxonomy.

Every failure raised by the configuration tree, the manifest repository
and the bundled manifest loader derives from Webpack4pyError. Keyed lookup
misses additionally derive from the builtin LookupError so callers can
catch them without importing this module.
"""


class Webpack4pyError(Exception):
    """Base class for all webpack4py failures."""


class StructuralError(Webpack4pyError):
    """An operation is not allowed at the node's position in the tree."""


class CollectionNotFoundError(Webpack4pyError, LookupError):
    """A configuration collection has no node with the requested id."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"collection not found by {key}")


class ManifestNotFoundError(Webpack4pyError, LookupError):
    """A manifest repository has no manifest under the requested key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"manifest associated with {key} not found")


class ManifestLoadError(Webpack4pyError):
    """The manifest source is unset, missing, unreachable or malformed."""

    def __init__(self, source: object, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load manifest from {source}: {reason}")


class ManifestEntryNotFoundError(Webpack4pyError, LookupError):
    """A loaded manifest has no entry for the requested logical key."""

    def __init__(self, key: str, source: object) -> None:
        self.key = key
        self.source = source
        super().__init__(f"Asset '{key}' not found in manifest {source}")
