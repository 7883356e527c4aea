import io

from rich.console import Console

from tailwind_upgrade.cli.factories import make_renderer
from tailwind_upgrade.cli.rendering import CliRenderer, SpinnerRenderer


def make_spinner(verbose=False):
    out = io.StringIO()
    err = io.StringIO()
    renderer = SpinnerRenderer(
        console=Console(file=out, force_terminal=False, width=200),
        err_console=Console(file=err, force_terminal=False, width=200),
        verbose=verbose,
    )
    return renderer, out, err


def test_cli_renderer_hides_debug_unless_verbose(capsys):
    CliRenderer(verbose=False).render("hidden", "debug")
    CliRenderer(verbose=True).render("shown", "debug")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out


def test_cli_renderer_sends_errors_to_stderr(capsys):
    CliRenderer().render("boom", "error")
    CliRenderer().render("fine", "success")

    captured = capsys.readouterr()
    assert "boom" in captured.err
    assert "fine" in captured.out


def test_spinner_prints_messages_and_routes_errors():
    renderer, out, err = make_spinner()

    renderer.render("📦 Removed [x] from dependencies", "info")
    renderer.render("broken", "error")
    renderer.render("quiet", "debug")

    assert "📦 Removed [x] from dependencies" in out.getvalue()
    assert "broken" in err.getvalue()
    assert "quiet" not in out.getvalue()


def test_spinner_progress_updates_status_while_live():
    renderer, out, _ = make_spinner()

    with renderer.live("Starting..."):
        renderer.render("Installing @tailwindcss/postcss...", "progress")
        assert renderer._status is not None

    assert renderer._status is None
    # Outside a live session progress lines are printed like any other level
    renderer.render("Checking package.json...", "progress")
    assert "Checking package.json..." in out.getvalue()


def test_make_renderer_selects_implementation():
    assert isinstance(make_renderer(live=False), CliRenderer)
    assert isinstance(make_renderer(live=True, verbose=True), SpinnerRenderer)
    assert make_renderer(live=True, verbose=True).verbose is True
