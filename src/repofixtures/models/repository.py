from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel

from repofixtures.config.settings import LayoutConfig


class Protocol(str, Enum):
    LOCAL = "local"
    HTTPS = "HTTPS"
    SSH = "SSH"


class RepositoryRole(BaseModel):
    name: str
    path: Path
    bare: bool = False


class RemoteLink(BaseModel):
    repository: Path
    remote_name: str
    url: str
    protocol: Protocol = Protocol.LOCAL


class FixtureLayout(BaseModel):
    """Path slots of one scenario, all directly under ``root``."""

    root: Path
    remote: Path
    upstream_remote: Path
    upstream_local: Path
    local: Path

    @classmethod
    def under(cls, root: Path, layout: LayoutConfig | None = None) -> FixtureLayout:
        layout = layout or LayoutConfig()
        return cls(
            root=root,
            remote=root / layout.remote,
            upstream_remote=root / layout.upstream_remote,
            upstream_local=root / layout.upstream_local,
            local=root / layout.local,
        )
