from pydantic.dataclasses import dataclass

from collector.models.version import Version

@dataclass(frozen=True)
class VersionsFile:
    versions: list[Version]

@dataclass(frozen=True)
class ManifestFile:
    versions: list[str]
    latestVersion: str
    count: int
    updated: bool
