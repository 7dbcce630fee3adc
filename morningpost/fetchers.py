"""
HTTP fetching for morningpost.
"""

import requests
from typing import Optional

from .exceptions import TransportError, UnexpectedStatusError
from .models import ClientConfig
from .logging_config import get_logger


class APIClient:
    """Performs bounded-timeout GET requests against a base URL."""

    def __init__(self, config: Optional[ClientConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or ClientConfig()
        self.base_url = self.config.base_url
        if session is None:
            session = requests.Session()
            session.headers.update({"User-Agent": self.config.user_agent})
        self.session = session
        self.logger = get_logger(self.__class__.__name__)
        self.logger.debug(f"Initialized APIClient with base URL: {self.base_url}")

    def get(self, path: str) -> bytes:
        """
        Fetch ``{base_url}{path}`` and return the raw response body.

        Raises:
            TransportError: On any network failure, including timeouts
            UnexpectedStatusError: If the status code is not 200
        """
        url = f"{self.base_url}{path}"
        self.logger.debug(f"GET {url}")

        try:
            response = self.session.get(url, timeout=self.config.timeout)
        except requests.RequestException as e:
            self.logger.debug(f"Request to {url} failed: {e}")
            raise TransportError(url, e) from e

        try:
            if response.status_code != 200:
                self.logger.debug(f"Unexpected status {response.status_code} from {url}")
                raise UnexpectedStatusError(response.status_code, url)
            try:
                body = response.content
            except requests.RequestException as e:
                self.logger.debug(f"Failed reading response body from {url}: {e}")
                raise TransportError(url, e) from e
            self.logger.debug(f"Fetched {len(body)} bytes from {url}")
            return body
        finally:
            response.close()

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
