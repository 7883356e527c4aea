import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..pointer import SemanticPointer

log = logging.getLogger(__name__)

DEFAULT_ASSETS_ROOT = Path(__file__).resolve().parents[2] / "assets" / "messages"


class MessageCatalog:
    """
    Resolves semantic pointers to message templates.

    Templates live in flat JSON files under `<root>/<domain>/`, e.g.
    `assets/messages/en/upgrade.json`. Roots added later take priority, so a
    project can override packaged wording. Unknown keys resolve to the key
    itself.
    """

    def __init__(
        self, roots: Optional[List[Path]] = None, default_domain: str = "en"
    ):
        self.roots = roots or [DEFAULT_ASSETS_ROOT]
        self.default_domain = default_domain
        self._views: Dict[str, Dict[str, str]] = {}

    def add_root(self, path: Path) -> None:
        if path not in self.roots:
            self.roots.append(path)
            self._views.clear()

    def load(self, domain: str) -> Dict[str, str]:
        if domain not in self._views:
            registry: Dict[str, str] = {}
            for root in self.roots:
                domain_dir = root / domain
                if domain_dir.is_dir():
                    registry.update(self._load_directory(domain_dir))
            self._views[domain] = registry
        return self._views[domain]

    def _load_directory(self, directory: Path) -> Dict[str, str]:
        registry: Dict[str, str] = {}
        for file_path in sorted(directory.glob("*.json")):
            try:
                with file_path.open("r", encoding="utf-8") as f:
                    data = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                log.warning(f"Could not load message file {file_path}: {e}")
                continue
            if not isinstance(data, dict):
                continue
            for key, value in data.items():
                registry[str(key)] = str(value)
        return registry

    def _resolve_domain(self) -> str:
        return os.getenv("TAILWIND_UPGRADE_LANG") or self.default_domain

    def get(self, pointer: Union[str, SemanticPointer]) -> str:
        key = str(pointer)
        domain = self._resolve_domain()

        value = self.load(domain).get(key)
        if value is None and domain != self.default_domain:
            value = self.load(self.default_domain).get(key)

        # Fallback to identity
        return value if value is not None else key

    def __call__(self, pointer: Union[str, SemanticPointer]) -> str:
        return self.get(pointer)
