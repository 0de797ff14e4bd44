from __future__ import annotations

"""
Domain Constants and Static Defaults.

Provides the hard-coded values that only a root configuration supplies,
plus the fixed segments used to derive cache locations.
"""

from typing import List, Tuple

# Identifier carried by a root configuration unless overridden
ROOT_DEFAULT_ID = ""

DEFAULT_CACHE = False
DEFAULT_BUILD_COMMAND = "node_modules/.bin/webpack"
DEFAULT_INSTALL_COMMAND = "npm install"

# Tracked by the lazy compiler; relative to the resolved base path
DEFAULT_WATCHED_PATHS: List[str] = [
    "package.json",
    "package-lock.json",
    "yarn.lock",
    "webpack.config.js",
    "webpackfile.js",
    "config/webpack.config.js",
    "config/webpackfile.js",
    "app/javascripts/**/*",
]

CACHE_DIR_SEGMENTS: Tuple[str, ...] = ("tmp", "cache", "webpack4r")

DIGEST_FILE_SUFFIX = ".digest"
DEFAULT_DIGEST_NAME = "default"
