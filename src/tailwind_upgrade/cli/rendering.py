from contextlib import contextmanager
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.status import Status

from tailwind_upgrade.common.messaging import protocols


class CliRenderer(protocols.Renderer):
    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def render(self, message: str, level: str):
        if level == "debug" and not self.verbose:
            return

        color = None
        if level == "info":
            color = typer.colors.BLUE
        elif level == "success":
            color = typer.colors.GREEN
        elif level == "warning":
            color = typer.colors.YELLOW
        elif level == "error":
            color = typer.colors.RED
        elif level == "debug" or level == "progress":
            color = typer.colors.BRIGHT_BLACK  # Dim/Gray

        typer.secho(message, fg=color, err=(level == "error"))

    @contextmanager
    def live(self, message: str) -> Iterator["CliRenderer"]:
        self.render(message, "progress")
        yield self


class SpinnerRenderer(protocols.Renderer):
    """
    Keeps a spinner on screen while a command runs.

    "progress" messages replace the spinner text; every other level is printed
    above it, so the spinner always stays on the last line.
    """

    STYLES = {
        "info": "blue",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "debug": "bright_black",
        "progress": "bright_black",
    }

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        verbose: bool = False,
    ):
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.verbose = verbose
        self._status: Optional[Status] = None

    @contextmanager
    def live(self, message: str) -> Iterator["SpinnerRenderer"]:
        with self.console.status(message) as status:
            self._status = status
            try:
                yield self
            finally:
                self._status = None

    def render(self, message: str, level: str):
        if level == "debug" and not self.verbose:
            return

        if level == "progress" and self._status is not None:
            self._status.update(message)
            return

        console = self.err_console if level == "error" else self.console
        console.print(
            message, style=self.STYLES.get(level), markup=False, highlight=False
        )
