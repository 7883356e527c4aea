import json
from pathlib import Path

import pytest

from tailwind_upgrade.common.errors import ConfigurationError, FileOperationError
from tailwind_upgrade.common.manifest import Manifest


def write_manifest(path: Path, data) -> Path:
    manifest_path = path / "package.json"
    manifest_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return manifest_path


def test_remove_dependency_reports_each_section(tmp_path):
    path = write_manifest(
        tmp_path,
        {
            "dependencies": {"react": "18.2.0", "@abc/tailwind-config": "1.0.0"},
            "devDependencies": {"@abc/tailwind-config": "1.0.0"},
        },
    )
    manifest = Manifest.load(path)

    assert manifest.remove_dependency("@abc/tailwind-config") == [
        "dependencies",
        "devDependencies",
    ]
    assert "@abc/tailwind-config" not in manifest.dependencies
    assert "@abc/tailwind-config" not in manifest.dev_dependencies
    assert manifest.dependencies.get("react") == "18.2.0"


def test_missing_section_is_detached(tmp_path):
    path = write_manifest(tmp_path, {"name": "app", "dependencies": {"next": "14"}})
    manifest = Manifest.load(path)

    assert len(manifest.dev_dependencies) == 0
    assert manifest.dev_dependencies.remove("next") is False
    assert manifest.remove_dependency("next") == ["dependencies"]
    # Removing never invents a section that was not there.
    assert "devDependencies" not in manifest.data


def test_has_dependency_checks_both_sections(tmp_path):
    path = write_manifest(
        tmp_path, {"dependencies": {"next": "14"}, "devDependencies": {"vitest": "1"}}
    )
    manifest = Manifest.load(path)

    assert manifest.has_dependency("next")
    assert manifest.has_dependency("vitest")
    assert not manifest.has_dependency("design-system")


def test_save_preserves_field_order_and_indentation(tmp_path):
    path = write_manifest(
        tmp_path,
        {
            "name": "app",
            "scripts": {"dev": "next dev"},
            "dependencies": {"zeta": "1", "@abc/typescript-utils": "2", "alpha": "3"},
            "private": True,
        },
    )
    manifest = Manifest.load(path)
    manifest.remove_dependency("@abc/typescript-utils")
    manifest.save()

    content = path.read_text(encoding="utf-8")
    assert content.endswith("}\n")
    assert '\n  "name": "app",' in content
    assert list(json.loads(content).keys()) == ["name", "scripts", "dependencies", "private"]
    assert list(json.loads(content)["dependencies"].keys()) == ["zeta", "alpha"]


def test_save_keeps_non_ascii_verbatim(tmp_path):
    path = write_manifest(tmp_path, {"description": "Café ✨"})
    manifest = Manifest.load(path)
    manifest.save()

    assert "Café ✨" in path.read_text(encoding="utf-8")


def test_load_rejects_invalid_json(tmp_path):
    path = tmp_path / "package.json"
    path.write_text("{ not json", encoding="utf-8")

    with pytest.raises(ConfigurationError) as excinfo:
        Manifest.load(path)
    assert excinfo.value.code == "CONFIGURATION_ERROR"


def test_load_rejects_non_object_document(tmp_path):
    path = write_manifest(tmp_path, ["not", "an", "object"])

    with pytest.raises(ConfigurationError):
        Manifest.load(path)


def test_section_must_be_an_object(tmp_path):
    path = write_manifest(tmp_path, {"dependencies": ["next"]})
    manifest = Manifest.load(path)

    with pytest.raises(ConfigurationError):
        manifest.has_dependency("next")


def test_load_missing_file_is_file_operation_error(tmp_path):
    with pytest.raises(FileOperationError) as excinfo:
        Manifest.load(tmp_path / "package.json")
    assert excinfo.value.code == "FILE_OPERATION_ERROR"
    assert isinstance(excinfo.value.cause, OSError)


def test_load_non_utf8_file_is_file_operation_error(tmp_path):
    path = tmp_path / "package.json"
    path.write_bytes('{"name": "café"}'.encode("latin-1"))

    with pytest.raises(FileOperationError) as excinfo:
        Manifest.load(path)

    assert "Failed to read file" in excinfo.value.message
    assert isinstance(excinfo.value.cause, UnicodeDecodeError)
