import pytest
from collector.models import Component, Container, DeploymentSpec, EdgeXConfig, PodSpec, PodTemplate, Version


def make_component(name: str, image: str) -> Component:
    container = Container(name=name, image=image)
    return Component(name=name, image=image, deployment=DeploymentSpec(template=PodTemplate(spec=PodSpec(containers=[container]))))


def make_config(arch: str, versions: dict[str, list[tuple[str, str]]]) -> EdgeXConfig:
    return EdgeXConfig(arch=arch, is_security=True, versions=[
        Version(name=name, components=[make_component(c, image) for c, image in components])
        for name, components in versions.items()
    ])


@pytest.fixture
def component_factory():
    return make_component


@pytest.fixture
def config_factory():
    return make_config
