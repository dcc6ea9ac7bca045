"""Shared fixtures for covsubmit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pygit2
import pytest
import structlog

from covsubmit.config.models import CovSubmitConfig
from covsubmit.coverage.models import FileCoverage


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Start every test from unconfigured structlog and a handler-free root logger."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if not type(handler).__module__.startswith("_pytest"):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.WARNING)


@pytest.fixture
def config() -> CovSubmitConfig:
    """Built-in defaults, independent of the user's config file and env."""
    return CovSubmitConfig()


@pytest.fixture
def sample_coverage() -> list[FileCoverage]:
    return [
        FileCoverage("src/Foo.jl", (None, 1, 0, None, 3)),
        FileCoverage("src/Bar.jl", (2, 2)),
    ]


@pytest.fixture
def temp_repo(tmp_path: Path) -> pygit2.Repository:
    """Create a temporary git repository on branch main with one commit."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()

    repo = pygit2.init_repository(str(repo_path), initial_head="main")
    repo.config["user.name"] = "Test User"
    repo.config["user.email"] = "test@example.com"

    (repo_path / "README.md").write_text("# Test Repo\n")
    repo.index.add("README.md")
    repo.index.write()
    tree = repo.index.write_tree()
    sig = pygit2.Signature("Test User", "test@example.com")
    repo.create_commit("refs/heads/main", sig, sig, "Initial commit", tree, [])
    repo.set_head("refs/heads/main")
    return repo
