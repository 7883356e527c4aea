from pathlib import Path
from textwrap import dedent

import pytest

from tailwind_upgrade.common.errors import ConfigurationError
from tailwind_upgrade.config import UpgradeConfig, load_config_from_path


def write_config(root: Path, body: str) -> Path:
    path = root / "tailwind-upgrade.toml"
    path.write_text(dedent(body), encoding="utf-8")
    return path


def test_defaults_without_config_file(tmp_path: Path):
    config = load_config_from_path(tmp_path)

    assert config == UpgradeConfig()
    assert config.package_manager == "pnpm"
    assert config.legacy_packages == ["@abc/tailwind-config", "@abc/typescript-utils"]
    assert config.design_system_version == "2.5.0"
    assert config.install_timeout is None
    assert config.source is None


def test_overrides_accept_kebab_and_snake_case(tmp_path: Path):
    path = write_config(
        tmp_path,
        """
        [tailwind-upgrade]
        package-manager = "npm"
        design_system_version = "3.0.0"
        legacy-packages = ["@abc/old"]
        install-timeout = 120
        """,
    )

    config = load_config_from_path(tmp_path)

    assert config.package_manager == "npm"
    assert config.design_system_version == "3.0.0"
    assert config.legacy_packages == ["@abc/old"]
    assert config.install_timeout == 120.0
    assert config.source == path
    # Untouched options keep their defaults
    assert config.framework_dependency == "next"


def test_unknown_keys_are_ignored(tmp_path: Path, caplog):
    write_config(
        tmp_path,
        """
        [tailwind-upgrade]
        colour = "blue"
        """,
    )

    config = load_config_from_path(tmp_path)

    assert config.package_manager == "pnpm"
    assert "colour" in caplog.text


def test_malformed_toml_is_a_configuration_error(tmp_path: Path):
    write_config(tmp_path, "[tailwind-upgrade\npackage-manager = ")

    with pytest.raises(ConfigurationError):
        load_config_from_path(tmp_path)


@pytest.mark.parametrize(
    "line",
    [
        'legacy-packages = "@abc/old"',
        "install-timeout = -5",
        "install-timeout = true",
        'package-manager = ""',
        "components-dir = 3",
    ],
)
def test_wrong_value_types_are_rejected(tmp_path: Path, line: str):
    write_config(tmp_path, f"[tailwind-upgrade]\n{line}\n")

    with pytest.raises(ConfigurationError):
        load_config_from_path(tmp_path)
