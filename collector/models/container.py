from dataclasses import field
from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class Container:
    name: str
    image: str
    ports: list[int] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)

@dataclass(frozen=True)
class PodSpec:
    containers: list[Container]

@dataclass(frozen=True)
class PodTemplate:
    spec: PodSpec

@dataclass(frozen=True)
class DeploymentSpec:
    template: PodTemplate
