import logging

import requests

from collector.errors import FetchError

logger = logging.getLogger(__name__)


class WebPageClient:
    def __init__(self, timeout: int = 30):
        self.timeout: int = timeout

    def get_text(self, url: str) -> str:
        try:
            response = requests.get(url=url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Error fetching {url}: {e}")
            raise FetchError(f"Failed to fetch {url}: {e}") from e
        if response.status_code != 200:
            raise FetchError(f"Failed to fetch {url} (status code {response.status_code})")
        return response.text
