from pydantic.dataclasses import dataclass
from .version import Version

@dataclass(frozen=True)
class Captured:
    version: Version

@dataclass(frozen=True)
class ConfigFileNotFound:
    name: str

@dataclass(frozen=True)
class VersionNotAdapted:
    name: str
    reason: str

CaptureResult = Captured | ConfigFileNotFound | VersionNotAdapted
