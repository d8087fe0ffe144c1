"""Shared fixtures for building fake repository trees."""

import logging
import os
from pathlib import Path

import pytest
import structlog

from svc_depgraph.config import NAMESPACE_PREFIX, GraphConfig, RepositoryConfig


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop logging configuration installed by a test."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def deny_listing(monkeypatch):
    """Make os.scandir fail with PermissionError for directories with the given name."""
    real_scandir = os.scandir

    def deny(name: str) -> None:
        def scandir(path="."):
            if Path(os.fsdecode(path)).name == name:
                raise PermissionError(13, "Permission denied", os.fsdecode(path))
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", scandir)

    return deny


def go_source(*modules: str, package: str = "main") -> str:
    """Build a Go file importing the given go-svc modules."""
    imports = "\n".join(f'\t"{NAMESPACE_PREFIX}/{m}"' for m in modules)
    return f"package {package}\n\nimport (\n\t\"fmt\"\n{imports}\n)\n"


def write_file(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def workspace(tmp_path):
    """
    Create two repositories and a local package root.

    Alpha uses auth and storage/kv, Beta uses log only (from cmd/).
    Local packages: auth (references itself and storage/kv), storage (no refs).
    """
    alpha = tmp_path / "alpha"
    write_file(alpha / "pkg" / "api" / "handler.go", go_source("auth"))
    write_file(alpha / "internal" / "store" / "store.go", go_source("storage/kv", "auth"))
    write_file(alpha / "internal" / "README.md", f'"{NAMESPACE_PREFIX}/ignored"')

    beta = tmp_path / "beta"
    write_file(beta / "cmd" / "main.go", go_source("log"))
    write_file(beta / "vendor" / "skip.go", go_source("not-scanned"))

    pkg_root = tmp_path / "pkg"
    write_file(pkg_root / "auth" / "auth.go", go_source("auth/jwt", "storage/kv", package="auth"))
    write_file(pkg_root / "auth" / "jwt" / "jwt.go", go_source("auth", package="jwt"))
    write_file(pkg_root / "storage" / "kv" / "kv.go", "package kv\n")

    return GraphConfig(
        repositories=(
            RepositoryConfig(path=str(alpha), name="Alpha"),
            RepositoryConfig(path=str(beta), name="Beta"),
        ),
        package_root=pkg_root,
        output_path=tmp_path / "out" / "dependencies.plantuml",
    )
