import json
import logging
import os
from dataclasses import asdict
from typing import override

from collector.errors import NoVersionsDiscoveredError
from collector.repositories import EdgeXConfigRepository, ImageListRepository, ManifestRepository
from collector.services.branch_discoverer import BRANCHES_URL, EXTRACT_VERSION_REGEXP, BranchDiscoverer
from collector.services.image_classifier import ImageClassifier
from collector.services.image_rewriter import ImageRewriter
from collector.services.manifest_synchronizer import ManifestSynchronizer
from collector.services.service import Service
from collector.services.version_config_builder import VersionConfigBuilder
from collector.utils.logging import setup_logger

DEFAULT_ARCH = "amd64"
SECONDARY_ARCH = "arm64"


class EdgeXCollectionService(Service):
    def __init__(
        self,
        config_dir: str,
        image_list_dir: str,
        repo: str,
        branches_url: str = BRANCHES_URL,
        dry_run: bool = False,
    ):
        self.repo: str = repo
        self.branches_url: str = branches_url
        self.dry_run: bool = dry_run
        self.discoverer: BranchDiscoverer = BranchDiscoverer()
        self.builder: VersionConfigBuilder = VersionConfigBuilder()
        self.classifier: ImageClassifier = ImageClassifier()
        self.rewriter: ImageRewriter = ImageRewriter()
        self.synchronizer: ManifestSynchronizer = ManifestSynchronizer()
        self.security_repository: EdgeXConfigRepository = EdgeXConfigRepository(os.path.join(config_dir, "config.json"))
        self.nosecty_repository: EdgeXConfigRepository = EdgeXConfigRepository(os.path.join(config_dir, "config-nosecty.json"))
        self.manifest_repository: ManifestRepository = ManifestRepository(os.path.join(config_dir, "manifest.yaml"))
        self.image_list_repository: ImageListRepository = ImageListRepository(
            os.path.join(image_list_dir, "singlearch_imagelist.txt"),
            os.path.join(image_list_dir, "multiarch_imagelist.txt"),
        )
        self.logger: logging.Logger = setup_logger("EdgeXCollectionService")

    @override
    def run(self) -> None:
        branches = self.discoverer.discover(self.branches_url, EXTRACT_VERSION_REGEXP)
        if not branches:
            raise NoVersionsDiscoveredError(f"No branches discovered at {self.branches_url}. Exiting.")

        security = self.builder.build(branches, is_security=True, arch=DEFAULT_ARCH)
        security_arm = self.builder.build(branches, is_security=True, arch=SECONDARY_ARCH)
        nosecty = self.builder.build(branches, is_security=False, arch=DEFAULT_ARCH)

        classification = self.classifier.classify(security, security_arm)
        security = self.rewriter.rewrite(security, self.repo)
        nosecty = self.rewriter.rewrite(nosecty, self.repo)

        old_manifest = self.manifest_repository.find()
        manifest = self.synchronizer.synchronize(security.versions, old_manifest)
        self.logger.info(
            f"Manifest has {manifest.count} versions, latest {manifest.latest_version or '<none>'}, updated: {manifest.updated}"
        )

        if self.dry_run:
            print(json.dumps(asdict(manifest)))
            return

        self.image_list_repository.save(classification)
        self.security_repository.save(security)
        self.nosecty_repository.save(nosecty)
        if self.manifest_repository.save(manifest):
            self.logger.info("Manifest has been saved successfully.")
        else:
            error_msg = "Failed to save manifest"
            self.logger.error(error_msg)
            raise Exception(error_msg)
