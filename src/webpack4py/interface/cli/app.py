from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Bootstraps logging, builds the configuration tree from the arguments and
dispatches to the requested command. Maps domain failures to exit codes:
0 on success, 1 when an operation fails, 2 on usage errors.
"""

import argparse
import json
import sys
from typing import Callable, Dict, List, Optional

from webpack4py.core.services.compiler import CompileResult, Compiler
from webpack4py.domain.configuration import Configuration
from webpack4py.domain.errors import (
    CollectionNotFoundError,
    ManifestEntryNotFoundError,
    ManifestLoadError,
    ManifestNotFoundError,
    StructuralError,
)
from webpack4py.infra.logging import LoggingConfig, configure_logging, get_logger
from webpack4py.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    try:
        root = cli_args.args_to_configuration(args)
    except (argparse.ArgumentTypeError, StructuralError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE

    logger.debug(f"Active configurations: {root.leaves.ids}")

    commands: Dict[str, Callable[[Configuration, argparse.Namespace], int]] = {
        "show": _cmd_show,
        "watched": _cmd_watched,
        "lookup": _cmd_lookup,
        "build": _cmd_build,
        "install": _cmd_install,
    }

    try:
        return commands[args.command](root, args)
    except (CollectionNotFoundError, ManifestNotFoundError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE
    except (ManifestLoadError, ManifestEntryNotFoundError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

# -----------------------------------------------------------------------------
# COMMANDS
# -----------------------------------------------------------------------------

def _cmd_show(root: Configuration, args: argparse.Namespace) -> int:
    leaves = [leaf.to_dict() for leaf in root.leaves]
    if args.json_output:
        print(json.dumps(leaves, ensure_ascii=False, indent=2))
        return EXIT_OK

    for data in leaves:
        print(f"[{data['id'] or '(root)'}]")
        for key, value in data.items():
            if key == "resolved_watched_paths":
                continue
            print(f"  {key:<16} {value}")
    return EXIT_OK


def _cmd_watched(root: Configuration, args: argparse.Namespace) -> int:
    for leaf in _select(root, args.target):
        for path in leaf.resolved_watched_paths:
            print(path)
    return EXIT_OK


def _cmd_lookup(root: Configuration, args: argparse.Namespace) -> int:
    repo = root.manifests
    manifest = repo.get(args.target) if args.target else repo.default
    print(manifest.lookup(args.key))
    return EXIT_OK


def _cmd_build(root: Configuration, args: argparse.Namespace) -> int:
    results = [Compiler(leaf).compile(force=args.force) for leaf in _select(root, args.target)]
    return _report(results)


def _cmd_install(root: Configuration, args: argparse.Namespace) -> int:
    results = [Compiler(leaf).install() for leaf in _select(root, args.target)]
    return _report(results)

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _select(root: Configuration, target: Optional[str]) -> List[Configuration]:
    leaves = root.leaves
    if target is None:
        return list(leaves)
    return [leaves.find(target)]


def _report(results: List[CompileResult]) -> int:
    failed = False
    for res in results:
        if res.skipped:
            print(f"FRESH   {res.command}")
        elif res.ok:
            print(f"OK      {res.command}")
        else:
            failed = True
            print(f"FAILED  {res.command}: {res.error}", file=sys.stderr)
            if res.stderr:
                print(res.stderr, file=sys.stderr)
    return EXIT_FAILURE if failed else EXIT_OK
