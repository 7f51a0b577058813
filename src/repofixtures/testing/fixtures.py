"""Pytest fixtures providing fixture repository builders rooted at ``tmp_path``."""

from __future__ import annotations

from pathlib import Path

import pytest

from repofixtures.config.settings import FixtureConfig
from repofixtures.workspace.builder import FixtureRepositoryBuilder


@pytest.fixture()
def fixture_config() -> FixtureConfig:
    """Default configuration; override this fixture to change branch or identity."""
    return FixtureConfig()


@pytest.fixture()
def fixture_builder(tmp_path: Path, fixture_config: FixtureConfig) -> FixtureRepositoryBuilder:
    """Builder with an initialized ``remote`` repository."""
    builder = FixtureRepositoryBuilder(tmp_path, fixture_config)
    builder.init_remote_repository()
    return builder


@pytest.fixture()
def upstream_builder(fixture_builder: FixtureRepositoryBuilder) -> FixtureRepositoryBuilder:
    """Builder after the upstream topology has been set up on ``remote``."""
    fixture_builder.setup_upstream()
    return fixture_builder
