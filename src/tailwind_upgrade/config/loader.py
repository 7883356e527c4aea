import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

from tailwind_upgrade.common.errors import ConfigurationError

log = logging.getLogger(__name__)

CONFIG_FILENAME = "tailwind-upgrade.toml"
CONFIG_TABLE = "tailwind-upgrade"

DEFAULT_LEGACY_PACKAGES = ("@abc/tailwind-config", "@abc/typescript-utils")


@dataclass
class UpgradeConfig:
    package_manager: str = "pnpm"
    legacy_packages: List[str] = field(
        default_factory=lambda: list(DEFAULT_LEGACY_PACKAGES)
    )
    postcss_package: str = "@tailwindcss/postcss"
    design_system_package: str = "design-system"
    design_system_version: str = "2.5.0"
    framework_dependency: str = "next"
    components_dir: str = "components"
    install_timeout: Optional[float] = None
    source: Optional[Path] = None


def _check_value(key: str, value: Any, config_path: Path) -> Any:
    if key == "legacy_packages":
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigurationError(
                f"'{key}' in {config_path} must be a list of package names."
            )
        return list(value)

    if key == "install_timeout":
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ConfigurationError(
                f"'{key}' in {config_path} must be a positive number of seconds."
            )
        return float(value)

    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"'{key}' in {config_path} must be a non-empty string.")
    return value


def load_config_from_path(root_path: Path) -> UpgradeConfig:
    config_path = root_path / CONFIG_FILENAME
    if not config_path.is_file():
        return UpgradeConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {config_path}: {e}", cause=e) from e
    except OSError as e:
        raise ConfigurationError(f"Could not read {config_path}: {e}", cause=e) from e

    table: Dict[str, Any] = data.get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigurationError(f"[{CONFIG_TABLE}] in {config_path} must be a table.")

    known = {f.name for f in fields(UpgradeConfig)} - {"source"}
    overrides: Dict[str, Any] = {}
    for raw_key, value in table.items():
        # Accept both `package-manager` and `package_manager`
        key = raw_key.replace("-", "_")
        if key not in known:
            log.warning(f"Ignoring unknown option '{raw_key}' in {config_path}")
            continue
        overrides[key] = _check_value(key, value, config_path)

    log.debug(f"Loaded configuration from {config_path}: {overrides}")
    return UpgradeConfig(source=config_path, **overrides)
