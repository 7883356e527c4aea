import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from .errors import ConfigurationError, FileOperationError

MANIFEST_FILENAME = "package.json"
DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")


class DependencyMap:
    """
    A live, ordered view over one dependency section of a manifest.

    Removing an entry mutates the underlying document, so a later
    `Manifest.save()` persists the change. A section that is absent from the
    document is represented by a detached empty map: lookups miss and removals
    report False without adding the section.
    """

    def __init__(self, name: str, entries: Dict[str, Any]):
        self.name = name
        self._entries = entries

    def __contains__(self, package: object) -> bool:
        return package in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, package: str) -> Optional[str]:
        value = self._entries.get(package)
        return None if value is None else str(value)

    def remove(self, package: str) -> bool:
        if package not in self._entries:
            return False
        del self._entries[package]
        return True


class Manifest:
    def __init__(self, path: Path, data: Dict[str, Any]):
        self.path = path
        self.data = data

    @classmethod
    def path_for(cls, root_path: Path) -> Path:
        return root_path / MANIFEST_FILENAME

    @classmethod
    def load(cls, path: Path) -> "Manifest":
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileOperationError("read", path, cause=e) from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"{path} is not valid JSON: {e}", cause=e) from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"{path} must contain a JSON object.")
        return cls(path, data)

    def section(self, name: str) -> DependencyMap:
        entries = self.data.get(name)
        if entries is None:
            return DependencyMap(name, {})
        if not isinstance(entries, dict):
            raise ConfigurationError(
                f"'{name}' in {self.path} must be an object mapping package names to versions."
            )
        return DependencyMap(name, entries)

    @property
    def dependencies(self) -> DependencyMap:
        return self.section("dependencies")

    @property
    def dev_dependencies(self) -> DependencyMap:
        return self.section("devDependencies")

    def has_dependency(self, package: str) -> bool:
        return any(package in self.section(name) for name in DEPENDENCY_SECTIONS)

    def remove_dependency(self, package: str) -> List[str]:
        """Removes `package` from every dependency section, returning the sections it left."""
        removed_from: List[str] = []
        for name in DEPENDENCY_SECTIONS:
            if self.section(name).remove(package):
                removed_from.append(name)
        return removed_from

    def dumps(self) -> str:
        return json.dumps(self.data, indent=2, ensure_ascii=False) + "\n"

    def save(self) -> None:
        try:
            self.path.write_text(self.dumps(), encoding="utf-8")
        except OSError as e:
            raise FileOperationError("write", self.path, cause=e) from e
