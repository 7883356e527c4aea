from dataclasses import dataclass, field
from typing import List, Optional, Set

from tailwind_upgrade.common.errors import PackageInstallError
from tailwind_upgrade.common.installer import package_spec


@dataclass
class InstallCall:
    package: str
    version: Optional[str]
    dev: bool

    @property
    def spec(self) -> str:
        return package_spec(self.package, self.version)


@dataclass
class FakeInstaller:
    """Records install requests instead of running a package manager."""

    fail_on: Set[str] = field(default_factory=set)
    calls: List[InstallCall] = field(default_factory=list)

    def install(
        self, package: str, version: Optional[str] = None, dev: bool = False
    ) -> None:
        call = InstallCall(package, version, dev)
        self.calls.append(call)
        if package in self.fail_on:
            raise PackageInstallError(call.spec, detail="simulated install failure")

    @property
    def specs(self) -> List[str]:
        return [call.spec for call in self.calls]
