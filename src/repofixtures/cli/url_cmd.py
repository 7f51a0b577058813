from __future__ import annotations

import typer

from repofixtures.config.hosting import build_url
from repofixtures.config.settings import ConfigurationError, load_config


def url(
    domain: str = typer.Argument(..., help="Hosting domain: GitHub or Bitbucket"),
    protocol: str = typer.Argument(..., help="Access protocol: HTTPS or SSH"),
) -> None:
    """Print the canonical origin URL for a hosting domain and protocol."""
    try:
        config = load_config()
        typer.echo(build_url(domain, protocol, config))
    except ConfigurationError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=1)
