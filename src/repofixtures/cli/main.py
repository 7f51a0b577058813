import logging

import typer

from repofixtures.cli.setup_cmd import setup as setup_command
from repofixtures.cli.url_cmd import url as url_command

app = typer.Typer(name="repofixtures", help="Linked git repository fixtures")
app.command(name="setup")(setup_command)
app.command(name="url")(url_command)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every git invocation"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


if __name__ == "__main__":
    app()
