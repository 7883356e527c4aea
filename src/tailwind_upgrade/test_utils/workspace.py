import json
from pathlib import Path
from textwrap import dedent
from typing import Any, Dict, List, Optional

import tomli_w


class ProjectFactory:
    def __init__(self, root_path: Path):
        self.root_path = root_path
        self._files_to_create: List[Dict[str, Any]] = []
        self._manifest_data: Optional[Dict[str, Any]] = None
        self._config_data: Optional[Dict[str, Any]] = None

    def with_manifest(
        self,
        dependencies: Optional[Dict[str, str]] = None,
        dev_dependencies: Optional[Dict[str, str]] = None,
        **fields: Any,
    ) -> "ProjectFactory":
        data: Dict[str, Any] = {"name": "sample-app", "version": "0.1.0"}
        data.update(fields)
        if dependencies is not None:
            data["dependencies"] = dependencies
        if dev_dependencies is not None:
            data["devDependencies"] = dev_dependencies
        self._manifest_data = data
        return self

    def with_config(self, options: Dict[str, Any]) -> "ProjectFactory":
        self._config_data = {"tailwind-upgrade": options}
        return self

    def with_source(self, path: str, content: str) -> "ProjectFactory":
        self._files_to_create.append(
            {"path": path, "content": dedent(content), "format": "raw"}
        )
        return self

    def with_raw_file(self, path: str, content: str) -> "ProjectFactory":
        self._files_to_create.append({"path": path, "content": content, "format": "raw"})
        return self

    def build(self) -> Path:
        self.root_path.mkdir(parents=True, exist_ok=True)

        # 1. Finalize package.json and the tool config if data was added
        if self._manifest_data is not None:
            self._files_to_create.append(
                {"path": "package.json", "content": self._manifest_data, "format": "json"}
            )
        if self._config_data is not None:
            self._files_to_create.append(
                {
                    "path": "tailwind-upgrade.toml",
                    "content": self._config_data,
                    "format": "toml",
                }
            )

        # 2. Write all files
        for file_spec in self._files_to_create:
            output_path = self.root_path / file_spec["path"]
            output_path.parent.mkdir(parents=True, exist_ok=True)

            fmt = file_spec["format"]
            content = file_spec["content"]

            if fmt == "toml":
                with output_path.open("wb") as f:
                    tomli_w.dump(content, f)
            elif fmt == "json":
                output_path.write_text(json.dumps(content, indent=2) + "\n", encoding="utf-8")
            else:  # raw
                output_path.write_text(content, encoding="utf-8")

        return self.root_path
