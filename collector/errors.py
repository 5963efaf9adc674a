class CollectorError(Exception):
    pass


class FetchError(CollectorError):
    """A remote page or file could not be retrieved."""


class PatternError(CollectorError):
    """The version extraction pattern is malformed."""


class ConfigFileNotFoundError(CollectorError):
    def __init__(self, version: str, url: str):
        super().__init__(f"No configuration file for version {version} at {url}")
        self.version: str = version
        self.url: str = url


class VersionNotAdaptedError(CollectorError):
    def __init__(self, version: str, reason: str):
        super().__init__(f"Configuration of version {version} cannot be captured: {reason}")
        self.version: str = version
        self.reason: str = reason


class CollectionMisalignedError(CollectorError):
    """Architecture-specific collections do not enumerate the same versions."""


class NoVersionsDiscoveredError(CollectorError):
    """The branch listing yielded no version names."""
