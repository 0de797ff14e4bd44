from __future__ import annotations

"""Unit tests for the filesystem path primitives."""

import os
from pathlib import Path

from webpack4py.infra.fs import ensure_dir, expand_path, expand_patterns, join_path


def test_expand_path_relative_to_base() -> None:
    assert expand_path("package.json", "/app") == os.path.normpath("/app/package.json")
    assert expand_path(".", "/app") == os.path.normpath("/app")
    assert expand_path("../lib", "/app/frontend") == os.path.normpath("/app/lib")


def test_expand_path_absolute_ignores_base() -> None:
    assert expand_path("/etc/hosts", "/app") == os.path.normpath("/etc/hosts")


def test_expand_path_without_base_uses_cwd() -> None:
    assert expand_path("x.json") == os.path.join(os.getcwd(), "x.json")


def test_expand_path_expands_user_home() -> None:
    home = os.path.expanduser("~")
    assert expand_path("~/site", "/app") == os.path.normpath(os.path.join(home, "site"))


def test_join_path_without_base() -> None:
    assert join_path(None, "tmp", "cache") == os.path.join("tmp", "cache")


def test_expand_patterns_globs_recursively(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text("{}", encoding="utf-8")
    nested = tmp_path / "app" / "javascripts" / "components"
    nested.mkdir(parents=True)
    (nested / "button.js").write_text("", encoding="utf-8")
    (tmp_path / "app" / "javascripts" / "index.js").write_text("", encoding="utf-8")

    files = expand_patterns([
        str(tmp_path / "package.json"),
        str(tmp_path / "yarn.lock"),
        str(tmp_path / "app" / "javascripts" / "**" / "*"),
        str(tmp_path / "package.json"),
    ])

    assert files == sorted([
        str(tmp_path / "package.json"),
        str(nested / "button.js"),
        str(tmp_path / "app" / "javascripts" / "index.js"),
    ])


def test_ensure_dir_is_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b"
    ensure_dir(str(target))
    ensure_dir(str(target))
    assert target.is_dir()
