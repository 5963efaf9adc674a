import json
import os
from dataclasses import asdict
from pathlib import Path

from collector.models import EdgeXConfig, VersionsFile


class EdgeXConfigRepository:
    """Stores the per-version component configuration read by the controller.

    The document layout is ``{"versions": [{"name", "components", "configMaps"}]}``;
    architecture and security mode are implied by the file it lives in.
    """

    def __init__(self, file_path: str):
        self.file_path: str = file_path

    def find(self, arch: str, is_security: bool) -> EdgeXConfig:
        if not os.path.isfile(path=Path(self.file_path)):
            return EdgeXConfig(arch=arch, is_security=is_security)
        with open(self.file_path, "r") as f:
            data = json.load(f)
            try:
                for version in data.get("versions", []):
                    version["config_maps"] = version.pop("configMaps", [])
                parsed = VersionsFile(**data)
            except Exception as e:
                raise ValueError(f"Invalid EdgeX configuration file {self.file_path}: {e}") from e
        return EdgeXConfig(arch=arch, is_security=is_security, versions=list(parsed.versions))

    def save(self, config: EdgeXConfig) -> bool:
        versions = []
        for version in config.versions:
            data = asdict(version)
            data["configMaps"] = data.pop("config_maps")
            versions.append(data)
        try:
            with open(self.file_path, "w") as f:
                json.dump({"versions": versions}, f, indent=2)
                f.write("\n")
            return True
        except Exception as e:
            raise Exception(f"Error writing EdgeX configuration: {e}") from e
