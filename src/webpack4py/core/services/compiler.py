from __future__ import annotations

"""
Lazy Compilation Service.

Runs the bundler for one active configuration only when something under its
watched paths changed since the last successful build. Freshness is tracked
with a composite digest (path + mtime + size of every watched file) stored
under the configuration's cache directory.
"""

import hashlib
import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from webpack4py.domain import constants as const
from webpack4py.domain.configuration import Configuration
from webpack4py.infra.fs import ensure_dir, expand_patterns

logger = logging.getLogger(__name__)

Runner = Callable[..., Any]


# -----------------------------------------------------------------------------
# RESULT MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CompileResult:
    """
    Outcome of a build or install invocation.

    Attributes:
        ok: Whether the command succeeded (or was skipped as fresh).
        skipped: True when the build was not needed.
        command: The command line that was (or would have been) executed.
        returncode: Process exit status, None when the process never ran.
        stdout: Captured standard output.
        stderr: Captured standard error.
        error: Human readable failure description.
    """
    ok: bool
    skipped: bool = False
    command: str = ""
    returncode: Optional[int] = None
    stdout: str = ""
    stderr: str = ""
    error: str = ""


# -----------------------------------------------------------------------------
# COMPILER SERVICE
# -----------------------------------------------------------------------------

class Compiler:
    """
    Bundler runner bound to a single active configuration.

    Args:
        config: A leaf of the configuration tree (root or site).
        runner: ``subprocess.run`` compatible callable.
    """

    def __init__(self, config: Configuration, runner: Runner = subprocess.run) -> None:
        self._config = config
        self._runner = runner

    @property
    def config(self) -> Configuration:
        return self._config

    @property
    def digest_path(self) -> str:
        name = self._config.id or const.DEFAULT_DIGEST_NAME
        return os.path.join(self._config.cache_path, f"{name}{const.DIGEST_FILE_SUFFIX}")

    def watched_files(self) -> List[str]:
        return expand_patterns(self._config.resolved_watched_paths)

    def digest(self) -> str:
        """
        Compute the composite SHA-256 digest of the watched files.

        Any file added, removed, touched or resized changes the digest.
        """
        sha = hashlib.sha256()
        for path in self.watched_files():
            try:
                st = os.stat(path)
            except OSError:
                # Vanished between globbing and stat
                continue
            sha.update(f"{path}|{st.st_mtime}|{st.st_size}\n".encode("utf-8"))
        return sha.hexdigest()

    def stored_digest(self) -> Optional[str]:
        try:
            with open(self.digest_path, "r", encoding="utf-8") as f:
                return f.read().strip() or None
        except FileNotFoundError:
            return None

    def fresh(self) -> bool:
        stored = self.stored_digest()
        return stored is not None and stored == self.digest()

    def compile(self, force: bool = False) -> CompileResult:
        """
        Build the assets unless the watched files are unchanged.

        The digest is recorded only after a successful build, so a failed
        build is retried on the next call.

        Args:
            force: Build even if the previous build is still fresh.

        Returns:
            CompileResult: Outcome of the build.
        """
        command = self._config.build_command or ""

        # Computed before building so edits made during the build invalidate it
        current = self.digest()
        if not force and self.stored_digest() == current:
            logger.info(f"Assets of '{self._label}' are fresh. Skipping build.")
            return CompileResult(ok=True, skipped=True, command=command)

        result = self._run(command)
        if result.ok:
            self._store_digest(current)
            logger.info(f"Built assets of '{self._label}'.")
        else:
            logger.error(f"Build of '{self._label}' failed: {result.error}")
        return result

    def install(self) -> CompileResult:
        """Install the npm packages of the configuration."""
        result = self._run(self._config.install_command or "")
        if not result.ok:
            logger.error(f"Install for '{self._label}' failed: {result.error}")
        return result

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    @property
    def _label(self) -> str:
        return self._config.id or const.DEFAULT_DIGEST_NAME

    def _run(self, command: str) -> CompileResult:
        try:
            argv = shlex.split(command)
        except ValueError as e:
            return CompileResult(ok=False, command=command, error=f"Invalid command: {e}")
        if not argv:
            return CompileResult(ok=False, command=command, error="No command configured")

        cwd = self._config.resolved_base_path
        logger.debug(f"Running '{command}' in {cwd}")
        try:
            proc = self._runner(
                argv,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            return CompileResult(ok=False, command=command, error=str(e))

        ok = proc.returncode == 0
        return CompileResult(
            ok=ok,
            command=command,
            returncode=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
            error="" if ok else f"'{command}' exited with status {proc.returncode}",
        )

    def _store_digest(self, value: str) -> None:
        ensure_dir(os.path.dirname(self.digest_path))
        with open(self.digest_path, "w", encoding="utf-8") as f:
            f.write(value)
