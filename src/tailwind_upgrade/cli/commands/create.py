from pathlib import Path
from typing import Optional

import typer

from tailwind_upgrade.app.scaffold import parse_component_names
from tailwind_upgrade.common import bus, catalog as nexus, L
from tailwind_upgrade.common.errors import TailwindUpgradeError
from tailwind_upgrade.cli.factories import get_project_root, make_scaffolder


def create_command(
    path: Optional[Path] = typer.Option(
        None,
        "--path",
        "-p",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        help=nexus(L.cli.option.path.help),
    ),
):
    root_path = path or get_project_root()

    raw_names = typer.prompt(nexus(L.create.prompt), default="", show_default=False)
    names = parse_component_names(raw_names)
    if not names:
        bus.error(L.create.no_names)
        raise typer.Exit(code=1)

    try:
        make_scaffolder(root_path).create_components(names)
    except TailwindUpgradeError as e:
        bus.error(L.create.failed)
        bus.error(L.error.generic, error=e.message)
        raise typer.Exit(code=1)
