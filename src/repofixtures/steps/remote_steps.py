from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from repofixtures.workspace.builder import FixtureRepositoryBuilder


def my_repo_has_an_upstream_repo(builder: FixtureRepositoryBuilder) -> None:
    builder.setup_upstream()


def my_remote_origin_is_on(builder: FixtureRepositoryBuilder, domain: str, protocol: str) -> None:
    builder.set_origin_host(domain, protocol)
