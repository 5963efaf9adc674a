import os
from pathlib import Path

from ruamel.yaml import YAML
from collector.models import Manifest, ManifestFile
from collector.utils.yaml_loader import get_yaml_instance


class ManifestRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find(self) -> Manifest:
        if not os.path.isfile(path=Path(self.file_path)):
            return Manifest()
        with open(self.file_path, "r") as f:
            data = self.yaml.load(f)
            try:
                parsed = ManifestFile(**data)
            except Exception as e:
                raise ValueError(f"Invalid manifest.yaml: {e}") from e
        return Manifest(
            versions=list(parsed.versions),
            latest_version=parsed.latestVersion,
            count=parsed.count,
            updated=parsed.updated,
        )

    def save(self, manifest: Manifest) -> bool:
        data = {
            "updated": "true" if manifest.updated else "false",
            "count": manifest.count,
            "latestVersion": manifest.latest_version,
            "versions": list(manifest.versions),
        }
        try:
            with open(self.file_path, "w") as f:
                self.yaml.dump(data, f)
            return True
        except Exception as e:
            raise Exception(f"Error writing manifest: {e}") from e
