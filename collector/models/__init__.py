from .capture import CaptureResult, Captured, ConfigFileNotFound, VersionNotAdapted
from .component import Component
from .config_map import ConfigMap
from .container import Container, DeploymentSpec, PodSpec, PodTemplate
from .edgex_config import EdgeXConfig
from .image_classification import ImageClassification
from .manifest import Manifest
from .version import Version
from .wrappers import ManifestFile, VersionsFile

__all__ = [
    "CaptureResult",
    "Captured",
    "ConfigFileNotFound",
    "VersionNotAdapted",
    "Component",
    "ConfigMap",
    "Container",
    "DeploymentSpec",
    "PodSpec",
    "PodTemplate",
    "EdgeXConfig",
    "ImageClassification",
    "Manifest",
    "Version",
    "ManifestFile",
    "VersionsFile",
]
