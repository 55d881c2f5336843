"""Pytest configuration for goose recipe CLI tests."""

from pathlib import Path

import pytest

VALID_RECIPE = """\
title: "Test Recipe"
description: "A test recipe for deeplink generation"
prompt: "Test prompt content"
instructions: "Test instructions"
"""

UNRESOLVED_PLACEHOLDER_RECIPE = """\
title: "Test Recipe"
description: "A test recipe for deeplink generation"
prompt: "Test prompt content {{ name }}"
instructions: "Test instructions"
"""


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path_factory):
    """Keep the developer's goose configuration out of every test."""
    config_dir = tmp_path_factory.mktemp("goose-config")
    monkeypatch.delenv("GOOSE_RECIPE_PATH", raising=False)
    monkeypatch.delenv("GOOSE_RECIPE_GITHUB_REPO", raising=False)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.setenv("GOOSE_CONFIG_PATH", str(config_dir / "config.yaml"))
    return config_dir


@pytest.fixture
def valid_recipe() -> str:
    return VALID_RECIPE


@pytest.fixture
def placeholder_recipe() -> str:
    return UNRESOLVED_PLACEHOLDER_RECIPE


@pytest.fixture
def write_recipe():
    """Write a recipe file and return its path."""

    def _write(directory: Path, filename: str, content: str = VALID_RECIPE) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write
