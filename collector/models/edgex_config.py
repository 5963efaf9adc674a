from dataclasses import field
from pydantic.dataclasses import dataclass
from .version import Version

@dataclass(frozen=True)
class EdgeXConfig:
    arch: str
    is_security: bool
    versions: list[Version] = field(default_factory=list)

    def version_names(self) -> list[str]:
        return [v.name for v in self.versions]
