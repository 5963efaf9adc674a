from collector.models import Manifest, Version


class ManifestSynchronizer:
    def synchronize(self, versions: list[Version], old: Manifest) -> Manifest:
        names = [v.name for v in versions]
        latest = next((n for n in names if n not in old.versions), old.latest_version)
        return Manifest(
            versions=names,
            latest_version=latest,
            count=len(names),
            updated=old.count < len(names),
        )
