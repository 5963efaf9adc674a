from pydantic.dataclasses import dataclass
from .container import DeploymentSpec

@dataclass(frozen=True)
class Component:
    name: str
    image: str
    deployment: DeploymentSpec
