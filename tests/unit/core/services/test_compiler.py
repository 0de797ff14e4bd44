from __future__ import annotations

"""
Unit tests for the lazy Compiler service.

Verifies:
1. Watched file discovery and digest sensitivity.
2. Build skipping while fresh, forced rebuilds.
3. Digest persistence only after successful builds.
4. Failure reporting (non-zero exit, missing executable, empty or malformed command).
"""

import os
import subprocess
from pathlib import Path
from typing import Any, List

import pytest

from webpack4py.core.services.compiler import CompileResult, Compiler
from webpack4py.domain.configuration import Configuration


class FakeRunner:
    """Records invocations and returns a canned CompletedProcess."""

    def __init__(self, returncode: int = 0, stderr: str = "") -> None:
        self.calls: List[Any] = []
        self.returncode = returncode
        self.stderr = stderr

    def __call__(self, argv, **kwargs) -> subprocess.CompletedProcess:
        self.calls.append((argv, kwargs))
        return subprocess.CompletedProcess(argv, self.returncode, stdout="built", stderr=self.stderr)


@pytest.fixture
def project(tmp_path: Path) -> Configuration:
    """A root configuration over a small frontend project."""
    (tmp_path / "package.json").write_text("{}", encoding="utf-8")
    js = tmp_path / "app" / "javascripts"
    js.mkdir(parents=True)
    (js / "application.js").write_text("console.log(1)", encoding="utf-8")
    return Configuration(root_path=str(tmp_path))


def test_watched_files_follow_configuration(project: Configuration, tmp_path: Path) -> None:
    files = Compiler(project).watched_files()

    assert files == sorted([
        str(tmp_path / "package.json"),
        str(tmp_path / "app" / "javascripts" / "application.js"),
    ])


def test_digest_changes_when_watched_file_changes(project: Configuration, tmp_path: Path) -> None:
    compiler = Compiler(project)
    before = compiler.digest()

    assert compiler.digest() == before

    (tmp_path / "app" / "javascripts" / "extra.js").write_text("x", encoding="utf-8")
    assert compiler.digest() != before


def test_digest_path_uses_site_id(project: Configuration, tmp_path: Path) -> None:
    site = project.add("admin")
    cache_dir = os.path.join(str(tmp_path), "tmp", "cache", "webpack4r")

    assert Compiler(project).digest_path == os.path.join(cache_dir, "default.digest")
    assert Compiler(site).digest_path == os.path.join(cache_dir, "admin.digest")


def test_compile_runs_build_then_skips_when_fresh(project: Configuration, tmp_path: Path) -> None:
    runner = FakeRunner()
    compiler = Compiler(project, runner=runner)

    first = compiler.compile()
    second = compiler.compile()

    assert first.ok and not first.skipped
    assert second == CompileResult(ok=True, skipped=True, command="node_modules/.bin/webpack")
    assert len(runner.calls) == 1

    argv, kwargs = runner.calls[0]
    assert argv == ["node_modules/.bin/webpack"]
    assert kwargs["cwd"] == str(tmp_path)
    assert compiler.fresh() is True


def test_compile_force_rebuilds(project: Configuration) -> None:
    runner = FakeRunner()
    compiler = Compiler(project, runner=runner)

    compiler.compile()
    result = compiler.compile(force=True)

    assert result.ok and not result.skipped
    assert len(runner.calls) == 2


def test_failed_build_does_not_record_digest(project: Configuration) -> None:
    runner = FakeRunner(returncode=2, stderr="Module not found")
    compiler = Compiler(project, runner=runner)

    result = compiler.compile()

    assert result.ok is False
    assert result.returncode == 2
    assert result.stderr == "Module not found"
    assert "exited with status 2" in result.error
    assert compiler.stored_digest() is None
    assert compiler.fresh() is False

    compiler.compile()
    assert len(runner.calls) == 2


def test_build_command_is_split_and_run_in_base_path(project: Configuration, tmp_path: Path) -> None:
    (tmp_path / "frontend").mkdir()
    project.base_path = "frontend"
    project.build_command = "npx webpack --mode production"
    runner = FakeRunner()

    Compiler(project, runner=runner).compile()

    argv, kwargs = runner.calls[0]
    assert argv == ["npx", "webpack", "--mode", "production"]
    assert kwargs["cwd"] == str(tmp_path / "frontend")


def test_missing_executable_is_reported(project: Configuration) -> None:
    def runner(argv, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", argv[0])

    result = Compiler(project, runner=runner).compile()

    assert result.ok is False
    assert "No such file or directory" in result.error


def test_empty_command_is_reported(project: Configuration) -> None:
    project.install_command = ""
    runner = FakeRunner()

    result = Compiler(project, runner=runner).install()

    assert result.ok is False
    assert result.error == "No command configured"
    assert runner.calls == []


def test_unbalanced_quotes_are_reported(project: Configuration) -> None:
    project.build_command = 'webpack "--mode'
    runner = FakeRunner()
    compiler = Compiler(project, runner=runner)

    result = compiler.compile()

    assert result.ok is False
    assert result.command == 'webpack "--mode'
    assert result.error.startswith("Invalid command:")
    assert runner.calls == []
    assert compiler.stored_digest() is None


def test_install_runs_inherited_install_command(project: Configuration) -> None:
    site = project.add("web")
    runner = FakeRunner()

    result = Compiler(site, runner=runner).install()

    assert result.ok is True
    assert runner.calls[0][0] == ["npm", "install"]
