import logging

from collector.errors import CollectionMisalignedError
from collector.models import EdgeXConfig, ImageClassification
from collector.utils.image_ref import strip_tag, with_arch_suffix
from collector.utils.logging import setup_logger

ARCH_SUFFIX = "-arm64"


class ImageClassifier:
    """Splits the images of a default-architecture collection into multi-arch and single-arch lists.

    Components are correlated with the secondary-architecture collection by
    ``(version name, component name)``. An image is multi-arch when the secondary
    collection carries the same repository for that component; otherwise it is
    single-arch and gets a synthesized ``<tag>-arm64`` reference next to it.
    """

    def __init__(self, arch_suffix: str = ARCH_SUFFIX):
        self.arch_suffix: str = arch_suffix
        self.logger: logging.Logger = setup_logger("ImageClassifier")

    def classify(self, default: EdgeXConfig, secondary: EdgeXConfig) -> ImageClassification:
        self._check_alignment(default, secondary)

        secondary_images: dict[tuple[str, str], str] = {
            (version.name, component.name): strip_tag(component.image)
            for version in secondary.versions
            for component in version.components
        }

        multi_arch: list[str] = []
        single_arch: list[tuple[str, str]] = []
        for version in default.versions:
            for component in version.components:
                image = component.image
                if secondary_images.get((version.name, component.name)) == strip_tag(image):
                    multi_arch.append(image)
                else:
                    single_arch.append((image, with_arch_suffix(image, self.arch_suffix)))

        self.logger.info(f"Classified {len(multi_arch)} multi-arch and {len(single_arch)} single-arch images")
        return ImageClassification(multi_arch=multi_arch, single_arch=single_arch)

    def _check_alignment(self, default: EdgeXConfig, secondary: EdgeXConfig) -> None:
        default_names, secondary_names = default.version_names(), secondary.version_names()
        if default_names != secondary_names:
            raise CollectionMisalignedError(
                f"Versions collected for {default.arch} {default_names} "
                f"do not match versions collected for {secondary.arch} {secondary_names}"
            )
