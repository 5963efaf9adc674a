from dataclasses import field
from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class ImageClassification:
    multi_arch: list[str] = field(default_factory=list)
    single_arch: list[tuple[str, str]] = field(default_factory=list)
