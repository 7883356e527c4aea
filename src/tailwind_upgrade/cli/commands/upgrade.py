from pathlib import Path
from typing import Optional

import typer

from tailwind_upgrade.common import bus, catalog as nexus, L
from tailwind_upgrade.common.errors import TailwindUpgradeError
from tailwind_upgrade.cli.factories import (
    get_project_root,
    make_pipeline,
    make_renderer,
)


def upgrade_command(
    ctx: typer.Context,
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
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    root_path = path or get_project_root()

    renderer = make_renderer(verbose=verbose)
    bus.set_renderer(renderer)

    try:
        pipeline = make_pipeline(root_path)
        start_message = nexus(L.upgrade.run.start).format(path=root_path)
        with renderer.live(start_message):
            pipeline.run()
    except TailwindUpgradeError as e:
        bus.error(L.upgrade.run.failed)
        bus.error(L.error.generic, error=e.message)
        raise typer.Exit(code=1)

    bus.success(L.upgrade.run.success)
