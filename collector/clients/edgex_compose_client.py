import logging

import requests

from collector.errors import ConfigFileNotFoundError, FetchError

logger = logging.getLogger(__name__)

DEFAULT_ARCH = "amd64"


class EdgeXComposeClient:
    def __init__(
        self,
        base_url: str = "https://raw.githubusercontent.com/edgexfoundry/edgex-compose",
        timeout: int = 30,
    ):
        self.base_url: str = base_url.rstrip("/")
        self.timeout: int = timeout

    def compose_url(self, version: str, is_security: bool, arch: str) -> str:
        suffix = ""
        if not is_security:
            suffix += "-no-secty"
        if arch != DEFAULT_ARCH:
            suffix += f"-{arch}"
        return f"{self.base_url}/{version}/docker-compose{suffix}.yml"

    def fetch(self, version: str, is_security: bool, arch: str) -> str:
        url = self.compose_url(version, is_security, arch)
        logger.debug(f"Fetching compose file {url}")
        try:
            response = requests.get(url=url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f"Failed to fetch {url}: {e}") from e
        if response.status_code == 404:
            raise ConfigFileNotFoundError(version, url)
        if response.status_code != 200:
            raise FetchError(f"Failed to fetch {url} (status code {response.status_code})")
        return response.text
