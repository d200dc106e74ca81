"""Shared pytest fixtures and test helpers for publish-easier tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from publish_easier.config.discovery import CONFIG_FILENAME, load_config
from publish_easier.config.logging import PACKAGE_LOGGER
from publish_easier.infrastructure.workspace import Workspace

BASIC_MANIFEST: dict[str, Any] = {
    "name": "demo-pkg",
    "version": "1.2.3",
    "scripts": {"build": "rollup -c", "test": "jest", "dev": "rollup -c -w"},
    "dependencies": {"left-pad": "1.0.0", "lodash": "4.0.0"},
    "devDependencies": {"jest": "29.0.0", "rollup": "4.0.0"},
    "files": ["index.js"],
}

BASIC_CONFIG = """\
build_command = "echo built > build.log"
publish_dir = "publish"

[filter]
scripts = ["test", "dev"]
dependencies = ["left-pad"]
"""


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's PUBLISH_EASIER_* environment out of the tests."""
    for var in (
        "PUBLISH_EASIER_CONFIG",
        "PUBLISH_EASIER_ROOT",
        "PUBLISH_EASIER_CONFIG_PATH",
        "PUBLISH_EASIER_QUIET",
        "PUBLISH_EASIER_VERBOSE",
        "PUBLISH_EASIER_JSON_OUTPUT",
        "PUBLISH_EASIER_LOG_JSON",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project with a manifest and a README, but no config."""
    write_json(tmp_path / "package.json", BASIC_MANIFEST)
    (tmp_path / "README.md").write_text("# demo\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def configured_root(project_root: Path) -> Path:
    """Project root with the basic ``publish.toml`` in place."""
    write_config(project_root, BASIC_CONFIG)
    return project_root


@pytest.fixture
def _isolated_project(configured_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a configured temp project so the CLI runs against it.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``. Tests that
    need the path can also request ``tmp_path`` directly (same directory).
    """
    monkeypatch.chdir(configured_root)


@pytest.fixture
def make_workspace() -> Callable[[Path], Workspace]:
    """Factory building a Workspace with ``<root>/publish.toml`` loaded."""

    def _make(root: Path) -> Workspace:
        return Workspace(root, load_config(root=root))

    return _make


def write_json(path: Path, data: dict[str, Any]) -> None:
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def write_config(root: Path, content: str) -> Path:
    path = root / CONFIG_FILENAME
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore logger state after each test (the CLI reconfigures logging)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
