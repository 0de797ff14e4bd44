from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates a parsed namespace into a
configuration tree: global options configure the root, each ``--site``
declares a site under it.
"""

import argparse
import os
from typing import List, Optional, Tuple

from webpack4py.domain.configuration import Configuration

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the webpack4py CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="webpack4py",
        description="Resolve webpack manifests and run lazy builds for one or more sites.",
    )

    # --- Root configuration ---
    p.add_argument(
        "--root-path",
        dest="root_path",
        default=None,
        help="Application root directory (default: current directory).",
    )
    p.add_argument(
        "--base-path",
        dest="base_path",
        default=None,
        help="Frontend directory relative to the root path.",
    )
    p.add_argument(
        "--manifest",
        dest="manifest",
        default=None,
        help="Manifest file or dev server URL of the root configuration.",
    )
    p.add_argument(
        "--site",
        dest="sites",
        action="append",
        default=None,
        metavar="ID[=MANIFEST]",
        help="Declare a site, optionally with its own manifest. Repeatable.",
    )
    p.add_argument(
        "--cache",
        action="store_true",
        help="Memoize loaded manifests.",
    )
    p.add_argument("--build-command", dest="build_command", default=None)
    p.add_argument("--install-command", dest="install_command", default=None)
    p.add_argument("--debug", action="store_true", help="Enable debug logging.")
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated).",
    )

    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    show = sub.add_parser("show", help="Print the resolved active configurations.")
    show.add_argument("--json", dest="json_output", action="store_true")

    watched = sub.add_parser("watched", help="Print the resolved watched paths.")
    _add_target(watched)

    lookup = sub.add_parser("lookup", help="Resolve an asset through the manifests.")
    lookup.add_argument("key", help="Logical entry key, e.g. 'application.js'.")
    _add_target(lookup)

    build = sub.add_parser("build", help="Run the bundler when watched files changed.")
    build.add_argument("--force", action="store_true", help="Build even when fresh.")
    _add_target(build)

    install = sub.add_parser("install", help="Install the npm packages.")
    _add_target(install)

    return p


def _add_target(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--target",
        dest="target",
        default=None,
        metavar="ID",
        help="Restrict the command to one site.",
    )

# -----------------------------------------------------------------------------
# NAMESPACE MAPPING
# -----------------------------------------------------------------------------

def parse_site_spec(spec: str) -> Tuple[str, Optional[str]]:
    """Split ``ID[=MANIFEST]`` into the site id and optional manifest path."""
    site_id, sep, path = spec.partition("=")
    site_id = site_id.strip()
    if not site_id:
        raise argparse.ArgumentTypeError(f"Invalid site declaration: '{spec}'")
    return site_id, (path.strip() or None) if sep else None


def args_to_configuration(args: argparse.Namespace) -> Configuration:
    """
    Build the configuration tree described by the parsed arguments.

    Args:
        args: Namespace produced by build_parser().

    Returns:
        Configuration: The root configuration.
    """
    root = Configuration(root_path=args.root_path or os.getcwd())

    if args.base_path:
        root.base_path = args.base_path
    if args.manifest:
        root.manifest = args.manifest
    if args.cache:
        root.cache = True
    if args.build_command:
        root.build_command = args.build_command
    if args.install_command:
        root.install_command = args.install_command

    sites: List[str] = args.sites or []
    for spec in sites:
        site_id, path = parse_site_spec(spec)
        root.add(site_id, path)

    return root
