import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from tailwind_upgrade.common import bus, L, SemanticPointer
from tailwind_upgrade.common.errors import (
    FileOperationError,
    PackageInstallError,
)
from tailwind_upgrade.common.installer import PackageInstaller, package_spec
from tailwind_upgrade.common.manifest import Manifest
from tailwind_upgrade.config import UpgradeConfig

LEGACY_CONFIG_FILENAME = "tailwind.config.js"
OLD_POSTCSS_CONFIG_FILENAME = "postcss.config.js"
POSTCSS_CONFIG_FILENAME = "postcss.config.mjs"

POSTCSS_CONFIG_CONTENT = """/** @type {import('postcss-load-config').Config} */
const config = {
  plugins: {
    '@tailwindcss/postcss': {},
    autoprefixer: {},
  },
}
export default config;"""

STYLESHEET_FILENAME = "globals.css"
EXCLUDED_DIRS = frozenset({"node_modules", "dist", "build"})

LEGACY_DIRECTIVES = (
    "@tailwind base;",
    "@tailwind components;",
    "@tailwind utilities;",
)
TAILWIND_IMPORT = "@import 'tailwindcss';"
IMPORT_HEADER = (
    f"{TAILWIND_IMPORT}\n"
    "@import '../../node_modules/design-system/dist/globals.css';\n"
    "\n"
)


@dataclass
class UpgradeContext:
    root_path: Path
    config: UpgradeConfig
    installer: PackageInstaller

    @property
    def manifest_path(self) -> Path:
        return Manifest.path_for(self.root_path)

    def relative(self, path: Path) -> str:
        try:
            return path.relative_to(self.root_path).as_posix()
        except ValueError:
            return str(path)


class UpgradeStep(ABC):
    name: str = ""
    title: SemanticPointer = L.upgrade.step.unknown

    def title_params(self, ctx: UpgradeContext) -> Dict[str, Any]:
        return {}

    @abstractmethod
    def execute(self, ctx: UpgradeContext) -> None: ...


class PruneManifestStep(UpgradeStep):
    name = "prune-manifest"
    title = L.upgrade.step.manifest

    def execute(self, ctx: UpgradeContext) -> None:
        if not ctx.manifest_path.exists():
            bus.info(L.upgrade.manifest.missing)
            return

        manifest = Manifest.load(ctx.manifest_path)
        modified = False
        for package in ctx.config.legacy_packages:
            for section in manifest.remove_dependency(package):
                bus.info(L.upgrade.manifest.removed, package=package, section=section)
                modified = True

        if modified:
            manifest.save()
        else:
            bus.info(L.upgrade.manifest.unchanged)


class InstallPostcssStep(UpgradeStep):
    name = "install-postcss"
    title = L.upgrade.step.postcss_package

    def title_params(self, ctx: UpgradeContext) -> Dict[str, Any]:
        return {"package": ctx.config.postcss_package}

    def execute(self, ctx: UpgradeContext) -> None:
        package = ctx.config.postcss_package
        try:
            ctx.installer.install(package, dev=True)
        except PackageInstallError:
            raise
        except Exception as e:
            raise PackageInstallError(package, cause=e) from e
        bus.success(L.upgrade.install.done, package=package)


class DesignSystemStep(UpgradeStep):
    name = "design-system"
    title = L.upgrade.step.design_system

    def title_params(self, ctx: UpgradeContext) -> Dict[str, Any]:
        return {"package": ctx.config.design_system_package}

    def execute(self, ctx: UpgradeContext) -> None:
        package = ctx.config.design_system_package
        if not ctx.manifest_path.exists():
            bus.info(L.upgrade.design_system.no_manifest, package=package)
            return

        manifest = Manifest.load(ctx.manifest_path)
        # Presence alone decides; the currently declared range is irrelevant.
        if manifest.has_dependency(package):
            version = ctx.config.design_system_version
            message = L.upgrade.design_system.pinned
        else:
            version = "latest"
            message = L.upgrade.design_system.latest

        try:
            ctx.installer.install(package, version=version)
        except PackageInstallError:
            raise
        except Exception as e:
            raise PackageInstallError(package_spec(package, version), cause=e) from e
        bus.success(message, package=package, version=version)


class RemoveLegacyConfigStep(UpgradeStep):
    name = "remove-legacy-config"
    title = L.upgrade.step.legacy_config

    def title_params(self, ctx: UpgradeContext) -> Dict[str, Any]:
        return {"file": LEGACY_CONFIG_FILENAME}

    def execute(self, ctx: UpgradeContext) -> None:
        config_path = ctx.root_path / LEGACY_CONFIG_FILENAME
        if not config_path.exists():
            bus.info(L.upgrade.legacy_config.missing, file=LEGACY_CONFIG_FILENAME)
            return

        try:
            config_path.unlink()
        except OSError as e:
            raise FileOperationError("remove", config_path, cause=e) from e
        bus.success(L.upgrade.legacy_config.removed, file=LEGACY_CONFIG_FILENAME)


class PostcssConfigStep(UpgradeStep):
    name = "postcss-config"
    title = L.upgrade.step.postcss_config

    def execute(self, ctx: UpgradeContext) -> None:
        old_path = ctx.root_path / OLD_POSTCSS_CONFIG_FILENAME
        new_path = ctx.root_path / POSTCSS_CONFIG_FILENAME

        if old_path.exists():
            try:
                old_path.unlink()
            except OSError as e:
                raise FileOperationError("remove", old_path, cause=e) from e
            bus.success(L.upgrade.postcss.removed_old, file=OLD_POSTCSS_CONFIG_FILENAME)

        # Always rewritten, even when the content already matches.
        try:
            new_path.write_text(POSTCSS_CONFIG_CONTENT, encoding="utf-8")
        except OSError as e:
            raise FileOperationError("write", new_path, cause=e) from e
        bus.success(L.upgrade.postcss.written, file=POSTCSS_CONFIG_FILENAME)


def find_stylesheets(root_path: Path) -> List[Path]:
    found: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root_path):
        # Prune in-place so os.walk never descends into hidden or excluded dirs
        dirnames[:] = sorted(
            d for d in dirnames if not d.startswith(".") and d not in EXCLUDED_DIRS
        )
        if STYLESHEET_FILENAME in filenames:
            found.append(Path(dirpath) / STYLESHEET_FILENAME)
    return sorted(found)


def migrate_stylesheet(content: str) -> str:
    updated = content
    for directive in LEGACY_DIRECTIVES:
        updated = updated.replace(directive, "")

    if TAILWIND_IMPORT not in updated:
        updated = IMPORT_HEADER + updated.strip()
    return updated


class StylesheetStep(UpgradeStep):
    name = "stylesheets"
    title = L.upgrade.step.stylesheets

    def execute(self, ctx: UpgradeContext) -> None:
        stylesheets = find_stylesheets(ctx.root_path)
        if not stylesheets:
            bus.info(L.upgrade.stylesheets.none)
            return

        for path in stylesheets:
            self._migrate_file(ctx, path)

    def _migrate_file(self, ctx: UpgradeContext, path: Path) -> None:
        # newline="" keeps CRLF files CRLF
        try:
            with path.open("r", encoding="utf-8", newline="") as f:
                original = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileOperationError("read", path, cause=e) from e

        updated = migrate_stylesheet(original)
        if updated == original:
            bus.info(L.upgrade.stylesheets.up_to_date, path=ctx.relative(path))
            return

        try:
            path.write_text(updated, encoding="utf-8", newline="")
        except OSError as e:
            raise FileOperationError("update", path, cause=e) from e
        bus.success(L.upgrade.stylesheets.updated, path=ctx.relative(path))


DEFAULT_STEPS = (
    PruneManifestStep,
    InstallPostcssStep,
    DesignSystemStep,
    RemoveLegacyConfigStep,
    PostcssConfigStep,
    StylesheetStep,
)
