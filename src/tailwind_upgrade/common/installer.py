import logging
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Protocol

from tailwind_upgrade.common import bus, L
from .errors import PackageInstallError

log = logging.getLogger(__name__)


class PackageInstaller(Protocol):
    def install(
        self, package: str, version: Optional[str] = None, dev: bool = False
    ) -> None: ...


def package_spec(package: str, version: Optional[str] = None) -> str:
    return f"{package}@{version}" if version else package


class SubprocessInstaller:
    """Adds packages by shelling out to the project's package manager."""

    def __init__(
        self,
        root_path: Path,
        executable: str = "pnpm",
        timeout: Optional[float] = None,
    ):
        self.root_path = root_path
        self.executable = executable
        self.timeout = timeout

    def build_command(
        self, package: str, version: Optional[str] = None, dev: bool = False
    ) -> List[str]:
        return [
            self.executable,
            "install",
            package_spec(package, version),
            "--save-dev" if dev else "--save",
        ]

    def install(
        self, package: str, version: Optional[str] = None, dev: bool = False
    ) -> None:
        cmd = self.build_command(package, version, dev)
        # Resolves shims such as pnpm.cmd on Windows
        cmd[0] = shutil.which(self.executable) or self.executable
        spec = package_spec(package, version)
        bus.debug(L.debug.install.command, command=" ".join(cmd))
        log.debug(f"Running {cmd} in {self.root_path}")

        try:
            result = subprocess.run(
                cmd,
                cwd=self.root_path,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise PackageInstallError(spec, cause=e) from e

        if result.returncode != 0:
            error = subprocess.CalledProcessError(
                result.returncode, cmd, output=result.stdout, stderr=result.stderr
            )
            raise PackageInstallError(
                spec, cause=error, detail=(result.stderr or "").strip() or None
            ) from error
