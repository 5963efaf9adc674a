import logging
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from collector.clients.edgex_compose_client import EdgeXComposeClient
from collector.errors import ConfigFileNotFoundError, VersionNotAdaptedError
from collector.models import (
    CaptureResult,
    Captured,
    Component,
    ConfigFileNotFound,
    ConfigMap,
    Container,
    DeploymentSpec,
    EdgeXConfig,
    PodSpec,
    PodTemplate,
    Version,
    VersionNotAdapted,
)
from collector.utils.logging import setup_logger
from collector.utils.yaml_loader import get_compose_loader

# the main branch is unstable, there is no need to synchronize it
UNSTABLE_BRANCH = "main"
COMMON_CONFIG_MAP = "common-variables"


class VersionConfigBuilder:
    def __init__(self, client: EdgeXComposeClient | None = None):
        self.client: EdgeXComposeClient = client or EdgeXComposeClient()
        self.yaml: YAML = get_compose_loader()
        self.logger: logging.Logger = setup_logger("VersionConfigBuilder")

    def build(self, version_names: list[str], is_security: bool, arch: str) -> EdgeXConfig:
        self.logger.info(f"Distributing versions for arch {arch} (security: {is_security})")
        versions: list[Version] = []
        seen: set[str] = set()
        for name in version_names:
            if name == UNSTABLE_BRANCH or name in seen:
                continue
            seen.add(name)
            match self.catch(name, is_security, arch):
                case Captured(version=version):
                    versions.append(version)
                case ConfigFileNotFound(name=missing):
                    self.logger.warning(f"The configuration file for this version could not be found, version: {missing}")
                case VersionNotAdapted(name=unadapted, reason=reason):
                    self.logger.warning(f"The configuration file of version {unadapted} cannot be captured: {reason}")
        return EdgeXConfig(arch=arch, is_security=is_security, versions=versions)

    def catch(self, name: str, is_security: bool, arch: str) -> CaptureResult:
        try:
            content = self.client.fetch(name, is_security, arch)
            return Captured(version=self.parse(name, content))
        except ConfigFileNotFoundError:
            return ConfigFileNotFound(name=name)
        except VersionNotAdaptedError as e:
            return VersionNotAdapted(name=name, reason=e.reason)

    def parse(self, name: str, content: str) -> Version:
        try:
            document = self.yaml.load(content)
        except YAMLError as e:
            raise VersionNotAdaptedError(name, f"invalid compose document: {e}") from e
        if not isinstance(document, dict) or not isinstance(document.get("services"), dict):
            raise VersionNotAdaptedError(name, "no services section")

        services = document["services"]
        environments = {key: self._environment(name, key, svc) for key, svc in services.items()}
        common = self._common_variables(list(environments.values()))

        components: list[Component] = []
        for key, svc in services.items():
            if not isinstance(svc, dict) or not svc.get("image"):
                raise VersionNotAdaptedError(name, f"service {key} has no image")
            image = str(svc["image"])
            component_name = str(svc.get("container_name") or key)
            env = {k: v for k, v in environments[key].items() if k not in common}
            container = Container(
                name=component_name,
                image=image,
                ports=[self._container_port(name, key, p) for p in svc.get("ports") or []],
                env=env,
            )
            components.append(Component(
                name=component_name,
                image=image,
                deployment=DeploymentSpec(template=PodTemplate(spec=PodSpec(containers=[container]))),
            ))

        config_maps = [ConfigMap(name=COMMON_CONFIG_MAP, data=common)] if common else []
        return Version(name=name, components=components, config_maps=config_maps)

    def _environment(self, name: str, key: str, svc: Any) -> dict[str, str]:
        raw = svc.get("environment") if isinstance(svc, dict) else None
        if raw is None:
            return {}
        if isinstance(raw, dict):
            return {str(k): "" if v is None else self._scalar(v) for k, v in raw.items()}
        if isinstance(raw, list):
            env = {}
            for entry in raw:
                k, _, v = str(entry).partition("=")
                env[k] = v
            return env
        raise VersionNotAdaptedError(name, f"unsupported environment format in service {key}")

    def _scalar(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def _common_variables(self, environments: list[dict[str, str]]) -> dict[str, str]:
        # a lone service has nothing to share
        if len(environments) < 2:
            return {}
        first, *rest = environments
        return {k: v for k, v in first.items() if all(env.get(k) == v for env in rest)}

    def _container_port(self, name: str, key: str, port: Any) -> int:
        # short syntax is [host_ip:][host_port:]container_port[/protocol]
        try:
            if isinstance(port, dict):
                return int(port["target"])
            if isinstance(port, int):
                return port
            return int(str(port).split("/", 1)[0].rsplit(":", 1)[-1])
        except (KeyError, ValueError) as e:
            raise VersionNotAdaptedError(name, f"unsupported port {port!r} in service {key}") from e
