from collector.models import Component, Container, DeploymentSpec, EdgeXConfig, PodSpec, PodTemplate, Version
from collector.services.image_rewriter import ImageRewriter


def test_rewrite_components(config_factory):
    config = config_factory("amd64", {"jakarta": [
        ("edgex-core-data", "edgexfoundry/core-data:2.1.0"),
        ("edgex-core-consul", "consul:1.10.3"),
    ]})

    rewritten = ImageRewriter().rewrite(config, "openyurt")

    images = [(c.image, c.deployment.template.spec.containers[0].image) for c in rewritten.versions[0].components]
    assert images == [
        ("openyurt/core-data:2.1.0", "openyurt/core-data:2.1.0"),
        ("openyurt/consul:1.10.3", "openyurt/consul:1.10.3"),
    ]

def test_rewrite_leaves_input_untouched(config_factory):
    config = config_factory("amd64", {"jakarta": [("edgex-core-data", "edgexfoundry/core-data:2.1.0")]})

    ImageRewriter().rewrite(config, "openyurt")

    assert config.versions[0].components[0].image == "edgexfoundry/core-data:2.1.0"

def test_rewrite_keeps_structure(config_factory):
    config = config_factory("arm64", {
        "jakarta": [("a", "edgexfoundry/a:2.1")],
        "ireland": [("a", "edgexfoundry/a:2.0"), ("b", "edgexfoundry/b:2.0")],
    })

    rewritten = ImageRewriter().rewrite(config, "registry.example.com/edgex")

    assert rewritten.arch == "arm64"
    assert rewritten.version_names() == ["jakarta", "ireland"]
    assert [c.name for c in rewritten.versions[1].components] == ["a", "b"]
    assert rewritten.versions[1].components[1].image == "registry.example.com/edgex/b:2.0"

def test_rewrite_every_container():
    component = Component(
        name="edgex-core-data",
        image="edgexfoundry/core-data:2.1.0",
        deployment=DeploymentSpec(template=PodTemplate(spec=PodSpec(containers=[
            Container(name="edgex-core-data", image="edgexfoundry/core-data:2.1.0", ports=[59880]),
            Container(name="sidecar", image="busybox:1.35"),
        ]))),
    )
    config = EdgeXConfig(arch="amd64", is_security=True, versions=[Version(name="jakarta", components=[component])])

    rewritten = ImageRewriter().rewrite(config, "openyurt").versions[0].components[0]

    containers = rewritten.deployment.template.spec.containers
    assert [c.image for c in containers] == ["openyurt/core-data:2.1.0", "openyurt/busybox:1.35"]
    assert containers[0].ports == [59880]
    assert rewritten.image == containers[0].image
