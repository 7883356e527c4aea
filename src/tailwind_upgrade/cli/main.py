import logging

import typer

from tailwind_upgrade import __version__
from tailwind_upgrade.common import bus, catalog as nexus, L
from .rendering import CliRenderer

# Import commands
from .commands.upgrade import upgrade_command
from .commands.create import create_command

app = typer.Typer(
    name="tailwind-upgrade",
    help=nexus(L.cli.app.description),
    no_args_is_help=True,
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"tailwind-upgrade {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        envvar="TAILWIND_UPGRADE_VERBOSE",
        help=nexus(L.cli.option.verbose.help),
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help=nexus(L.cli.option.version.help),
    ),
):
    # The CLI is the composition root. It decides *which* renderer to use.
    # Commands may swap in a live renderer; the verbose flag travels in ctx.obj.
    configure_logging(verbose)
    ctx.obj = {"verbose": verbose}
    bus.set_renderer(CliRenderer(verbose=verbose))


# Register commands
app.command(name="upgrade", help=nexus(L.cli.command.upgrade.help))(upgrade_command)
app.command(name="create", help=nexus(L.cli.command.create.help))(create_command)


if __name__ == "__main__":
    app()
