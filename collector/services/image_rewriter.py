from dataclasses import replace

from collector.models import Component, EdgeXConfig
from collector.utils.image_ref import replace_prefix


class ImageRewriter:
    def rewrite(self, config: EdgeXConfig, repo: str) -> EdgeXConfig:
        versions = [
            replace(version, components=[self._rewrite_component(c, repo) for c in version.components])
            for version in config.versions
        ]
        return replace(config, versions=versions)

    def _rewrite_component(self, component: Component, repo: str) -> Component:
        spec = component.deployment.template.spec
        containers = [replace(c, image=replace_prefix(c.image, repo)) for c in spec.containers]
        deployment = replace(
            component.deployment,
            template=replace(component.deployment.template, spec=replace(spec, containers=containers)),
        )
        return replace(component, image=replace_prefix(component.image, repo), deployment=deployment)
