import logging
from pathlib import Path
from typing import List, Optional, Sequence

from tailwind_upgrade.common import bus
from tailwind_upgrade.common.errors import TailwindUpgradeError, wrap_error
from tailwind_upgrade.common.installer import PackageInstaller, SubprocessInstaller
from tailwind_upgrade.config import UpgradeConfig

from .steps import DEFAULT_STEPS, UpgradeContext, UpgradeStep

log = logging.getLogger(__name__)


class UpgradePipeline:
    """
    Applies the Tailwind v3 -> v4 migration steps to a project, in order.

    Every step is idempotent, so re-running the pipeline after a failure picks
    up where it stopped. The first fatal error aborts the run; mutations made
    by earlier steps are left in place.
    """

    def __init__(
        self,
        root_path: Path,
        config: Optional[UpgradeConfig] = None,
        installer: Optional[PackageInstaller] = None,
        steps: Optional[Sequence[UpgradeStep]] = None,
    ):
        self.root_path = root_path
        self.config = config or UpgradeConfig()
        self.installer = installer or SubprocessInstaller(
            root_path,
            executable=self.config.package_manager,
            timeout=self.config.install_timeout,
        )
        self.steps: List[UpgradeStep] = (
            list(steps) if steps is not None else [step() for step in DEFAULT_STEPS]
        )

    def run(self) -> None:
        ctx = UpgradeContext(
            root_path=self.root_path, config=self.config, installer=self.installer
        )
        for step in self.steps:
            bus.progress(step.title, **step.title_params(ctx))
            log.debug(f"Running upgrade step '{step.name}' in {self.root_path}")
            try:
                step.execute(ctx)
            except TailwindUpgradeError:
                raise
            except Exception as e:
                raise wrap_error(e) from e
