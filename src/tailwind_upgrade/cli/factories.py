import sys
from pathlib import Path
from typing import Optional, Union

from tailwind_upgrade.app import ComponentScaffolder, TemplateProvider, UpgradePipeline
from tailwind_upgrade.common import bus, L
from tailwind_upgrade.common.installer import PackageInstaller, SubprocessInstaller
from tailwind_upgrade.config import UpgradeConfig, load_config_from_path

from .rendering import CliRenderer, SpinnerRenderer


def get_project_root() -> Path:
    return Path.cwd()


def make_renderer(
    verbose: bool = False, live: Optional[bool] = None
) -> Union[CliRenderer, SpinnerRenderer]:
    if live is None:
        live = sys.stdout.isatty()
    if live:
        return SpinnerRenderer(verbose=verbose)
    return CliRenderer(verbose=verbose)


def load_config(root_path: Path) -> UpgradeConfig:
    config = load_config_from_path(root_path)
    if config.source:
        bus.debug(L.debug.config.loaded, path=config.source)
    return config


def make_installer(root_path: Path, config: UpgradeConfig) -> PackageInstaller:
    return SubprocessInstaller(
        root_path,
        executable=config.package_manager,
        timeout=config.install_timeout,
    )


def make_pipeline(root_path: Path) -> UpgradePipeline:
    # Composition Root: Assemble the dependencies
    config = load_config(root_path)
    return UpgradePipeline(
        root_path=root_path,
        config=config,
        installer=make_installer(root_path, config),
    )


def make_scaffolder(root_path: Path) -> ComponentScaffolder:
    config = load_config(root_path)
    return ComponentScaffolder(
        root_path=root_path, config=config, provider=TemplateProvider()
    )
