from dataclasses import field
from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class Manifest:
    versions: list[str] = field(default_factory=list)
    latest_version: str = ""
    count: int = 0
    updated: bool = False
