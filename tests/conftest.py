from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Provides shared configuration trees and manifest fixtures.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from webpack4py.domain.configuration import Configuration  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
class FakeManifest:
    """Stand-in manifest handle recording its construction arguments."""

    def __init__(self, path: Any, **options: Any) -> None:
        self.path = path
        self.options = options


@pytest.fixture
def fake_manifest_factory() -> Tuple[Callable[..., FakeManifest], List[FakeManifest]]:
    """
    Return a manifest factory and the list of handles it built.
    """
    built: List[FakeManifest] = []

    def factory(path: Any, **options: Any) -> FakeManifest:
        handle = FakeManifest(path, **options)
        built.append(handle)
        return handle

    return factory, built


@pytest.fixture
def root_config(fake_manifest_factory) -> Configuration:
    """A root configuration under /app wired to the fake manifest factory."""
    factory, _ = fake_manifest_factory
    return Configuration(root_path="/app", manifest_factory=factory)


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[str, Dict[str, Any]], Path]:
    """Write a JSON manifest under tmp_path and return its path."""

    def _write(name: str, data: Dict[str, Any]) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
