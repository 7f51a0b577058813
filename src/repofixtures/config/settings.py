from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

CONFIG_FILENAME = "repofixtures.yaml"


class ConfigurationError(Exception):
    pass


class IdentityConfig(BaseModel):
    owner: str = "example-org"
    name: str = "example-repo"


class HostsConfig(BaseModel):
    github: str = "github.com"
    bitbucket: str = "bitbucket.org"


class LayoutConfig(BaseModel):
    remote: str = "remote"
    upstream_remote: str = "upstream-remote"
    upstream_local: str = "upstream-local"
    local: str = "local"


class AuthorConfig(BaseModel):
    name: str = "Fixture Bot"
    email: str = "fixtures@example.com"


class FixtureConfig(BaseModel):
    main_branch: str = "main"
    identity: IdentityConfig = IdentityConfig()
    ssh_user: str = "git"
    hosts: HostsConfig = HostsConfig()
    layout: LayoutConfig = LayoutConfig()
    author: AuthorConfig = AuthorConfig()
    config_dir: Path | None = None


def _find_config_file(start: Path | None = None) -> Path | None:
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_config(start: Path | None = None) -> FixtureConfig:
    config_path = _find_config_file(start)

    if config_path is not None:
        try:
            with open(config_path) as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse {config_path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigurationError(f"{config_path} must contain a mapping at the top level")
        try:
            config = FixtureConfig.model_validate(raw)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {config_path}:\n{e}") from e
        config.config_dir = config_path.parent
    else:
        config = FixtureConfig()

    main_branch_env = os.environ.get("REPOFIXTURES_MAIN_BRANCH")
    if main_branch_env:
        config.main_branch = main_branch_env

    return config
