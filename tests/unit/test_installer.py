import shutil
import subprocess

import pytest

from tailwind_upgrade.common.errors import PackageInstallError
from tailwind_upgrade.common.installer import SubprocessInstaller, package_spec


class RecordingRun:
    def __init__(self, returncode=0, stderr="", exc=None):
        self.returncode = returncode
        self.stderr = stderr
        self.exc = exc
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        if self.exc is not None:
            raise self.exc
        return subprocess.CompletedProcess(cmd, self.returncode, "", self.stderr)


def test_package_spec():
    assert package_spec("design-system") == "design-system"
    assert package_spec("design-system", "latest") == "design-system@latest"


def test_build_command_dev_and_prod(tmp_path):
    installer = SubprocessInstaller(tmp_path)

    assert installer.build_command("@tailwindcss/postcss", dev=True) == [
        "pnpm",
        "install",
        "@tailwindcss/postcss",
        "--save-dev",
    ]
    assert installer.build_command("design-system", "2.5.0") == [
        "pnpm",
        "install",
        "design-system@2.5.0",
        "--save",
    ]


def test_install_runs_in_project_root_with_output_captured(tmp_path, monkeypatch):
    fake_run = RecordingRun()
    monkeypatch.setattr(subprocess, "run", fake_run)
    monkeypatch.setattr(shutil, "which", lambda name: None)

    SubprocessInstaller(tmp_path, executable="npm", timeout=30).install(
        "design-system", version="latest"
    )

    cmd, kwargs = fake_run.calls[0]
    assert cmd == ["npm", "install", "design-system@latest", "--save"]
    assert kwargs["cwd"] == tmp_path
    assert kwargs["capture_output"] is True
    assert kwargs["timeout"] == 30


def test_nonzero_exit_raises_package_install_error(tmp_path, monkeypatch):
    monkeypatch.setattr(
        subprocess, "run", RecordingRun(returncode=1, stderr="ERR_PNPM_NO_MATCHING_VERSION\n")
    )

    with pytest.raises(PackageInstallError) as excinfo:
        SubprocessInstaller(tmp_path).install("design-system", version="9.9.9")

    error = excinfo.value
    assert error.code == "PACKAGE_INSTALL_ERROR"
    assert "design-system@9.9.9" in error.message
    assert "ERR_PNPM_NO_MATCHING_VERSION" in error.message
    assert isinstance(error.cause, subprocess.CalledProcessError)


@pytest.mark.parametrize(
    "exc",
    [
        FileNotFoundError("pnpm"),
        subprocess.TimeoutExpired(["pnpm"], 5),
    ],
)
def test_launch_failures_are_wrapped(tmp_path, monkeypatch, exc):
    monkeypatch.setattr(subprocess, "run", RecordingRun(exc=exc))

    with pytest.raises(PackageInstallError) as excinfo:
        SubprocessInstaller(tmp_path, timeout=5).install("@tailwindcss/postcss", dev=True)

    assert excinfo.value.cause is exc
    assert excinfo.value.__cause__ is exc


def test_install_uses_resolved_executable_path(tmp_path, monkeypatch):
    fake_run = RecordingRun()
    monkeypatch.setattr(subprocess, "run", fake_run)
    monkeypatch.setattr(
        shutil, "which", lambda name: r"C:\Program Files\nodejs\pnpm.CMD"
    )

    SubprocessInstaller(tmp_path).install("@tailwindcss/postcss", dev=True)

    cmd, _ = fake_run.calls[0]
    assert cmd == [
        r"C:\Program Files\nodejs\pnpm.CMD",
        "install",
        "@tailwindcss/postcss",
        "--save-dev",
    ]
