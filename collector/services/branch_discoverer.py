import logging
import re

from collector.clients.web_page_client import WebPageClient
from collector.errors import PatternError
from collector.utils.logging import setup_logger

BRANCHES_URL = "https://github.com/edgexfoundry/edgex-compose/branches/all"
EXTRACT_VERSION_REGEXP = r'branch="(.*?)"'


class BranchDiscoverer:
    def __init__(self, client: WebPageClient | None = None):
        self.client: WebPageClient = client or WebPageClient()
        self.logger: logging.Logger = setup_logger("BranchDiscoverer")

    def discover(self, url: str = BRANCHES_URL, pattern: str = EXTRACT_VERSION_REGEXP) -> list[str]:
        try:
            regex = re.compile(pattern)
        except re.error as e:
            raise PatternError(f"Invalid version extraction pattern {pattern!r}: {e}") from e
        if regex.groups < 1:
            raise PatternError(f"Version extraction pattern {pattern!r} has no capture group")

        self.logger.info(f"Collecting versions from {url}")
        body = self.client.get_text(url)
        branches = [m.group(1) for m in regex.finditer(body)]
        self.logger.info(f"Found {len(branches)} branches")
        return branches
