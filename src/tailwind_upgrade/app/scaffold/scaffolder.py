from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from tailwind_upgrade.common import bus, L
from tailwind_upgrade.common.errors import ConfigurationError, FileOperationError
from tailwind_upgrade.common.manifest import Manifest
from tailwind_upgrade.config import UpgradeConfig

from .naming import clean_component_names, component_filename, component_identifier
from .templates import TemplateProvider


@dataclass
class ScaffoldResult:
    created: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


class ComponentScaffolder:
    def __init__(
        self,
        root_path: Path,
        config: Optional[UpgradeConfig] = None,
        provider: Optional[TemplateProvider] = None,
    ):
        self.root_path = root_path
        self.config = config or UpgradeConfig()
        self.provider = provider or TemplateProvider()

    @property
    def components_dir(self) -> Path:
        return self.root_path / self.config.components_dir

    def _check_project(self) -> None:
        manifest_path = Manifest.path_for(self.root_path)
        if not manifest_path.exists():
            raise ConfigurationError(
                "No package.json found. Please run this command in a Next.js project directory."
            )

        manifest = Manifest.load(manifest_path)
        if not manifest.has_dependency(self.config.framework_dependency):
            raise ConfigurationError("This command should be run in a Next.js project.")

    def create_components(self, names: Iterable[str]) -> ScaffoldResult:
        requested = clean_component_names(names)
        if not requested:
            raise ConfigurationError("At least one component name is required")

        # All preconditions hold before anything touches the disk.
        self._check_project()

        try:
            self.components_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileOperationError(
                "create", self.components_dir, cause=e, kind="directory"
            ) from e
        bus.info(L.create.directory, path=self.components_dir)

        result = ScaffoldResult()
        for name in requested:
            if self._create_single(name):
                result.created.append(name)
            else:
                result.skipped.append(name)

        if result.created:
            bus.success(
                L.create.summary.created,
                count=len(result.created),
                names=", ".join(result.created),
            )
        if result.skipped:
            bus.warning(
                L.create.summary.skipped,
                count=len(result.skipped),
                names=", ".join(result.skipped),
            )
        return result

    def _create_single(self, name: str) -> bool:
        filename = component_filename(name)
        target = self.components_dir / filename

        identifier = component_identifier(name)
        kind = self.provider.resolve(name)
        bus.debug(L.debug.template.resolved, name=name, kind=kind.name)

        # Any I/O failure skips this name only.
        try:
            if target.exists():
                bus.warning(L.create.file.exists, name=name, file=filename)
                return False

            content = self.provider.render(name, identifier)
            # "x" refuses to clobber a file that appeared since the check above
            with target.open("x", encoding="utf-8") as f:
                f.write(content)
        except FileExistsError:
            bus.warning(L.create.file.exists, name=name, file=filename)
            return False
        except OSError as e:
            bus.warning(L.create.file.failed, name=name, error=e)
            return False

        bus.success(L.create.file.created, file=filename)
        bus.info(L.create.file.location, path=target)
        return True
