from dataclasses import field
from pydantic.dataclasses import dataclass
from .component import Component
from .config_map import ConfigMap

@dataclass(frozen=True)
class Version:
    name: str
    components: list[Component]
    config_maps: list[ConfigMap] = field(default_factory=list)
