from __future__ import annotations

from pathlib import Path

import typer

from repofixtures.config.hosting import url_hostname, url_repository_name
from repofixtures.config.settings import ConfigurationError, load_config
from repofixtures.workspace.builder import FixtureRepositoryBuilder
from repofixtures.workspace.git_ops import FixtureSetupError


def setup(
    root: Path = typer.Argument(..., help="Empty directory to build the repositories in"),
    upstream: bool = typer.Option(False, "--upstream", help="Add an upstream remote and its clones"),
    origin_domain: str = typer.Option(None, "--origin-domain", help="Point origin at GitHub or Bitbucket"),
    origin_protocol: str = typer.Option("HTTPS", "--origin-protocol", help="HTTPS or SSH"),
) -> None:
    """Build a remote repository, a developer clone and optional upstream links."""
    if root.exists() and (not root.is_dir() or any(root.iterdir())):
        typer.echo(f"Error: {root} is not an empty directory")
        raise typer.Exit(code=1)

    try:
        config = load_config()
        builder = FixtureRepositoryBuilder(root, config)
        builder.init_remote_repository()
        builder.create_local_repository()
        if upstream:
            builder.setup_upstream()
        if origin_domain:
            builder.set_origin_host(origin_domain, origin_protocol)
    except (ConfigurationError, FixtureSetupError) as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=1)

    for role in builder.roles:
        kind = "bare" if role.bare else "working copy"
        typer.echo(f"{role.name}: {role.path} ({kind})")
    for name in builder.remote_names(builder.working_repository):
        remote_url = builder.remote_url(builder.working_repository, name)
        hostname = url_hostname(remote_url)
        if hostname:
            typer.echo(f"  {name} -> {remote_url} (host {hostname}, repo {url_repository_name(remote_url)})")
        else:
            typer.echo(f"  {name} -> {remote_url}")
