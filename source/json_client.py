"""
HTTP client for fetching JSON documents with retries.
"""
import logging
from typing import Any, Optional

import requests

import config
from source.json_loader import JsonParseError, parse_json
from utils.retry import call_with_backoff

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a JSON document cannot be fetched."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Failed to fetch {url}: {message}")


class JsonClient:
    """Client for downloading JSON documents over HTTP(S)."""

    def __init__(
        self,
        timeout=config.REQUEST_TIMEOUT,
        max_retries: int = config.MAX_RETRIES,
        retry_delay: float = config.RETRY_DELAY,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize JSON client.

        Args:
            timeout: Request timeout in seconds (or tuple for (connect, read))
            max_retries: Maximum retry attempts for retryable failures
            retry_delay: Initial backoff delay in seconds
            session: Optional pre-configured session
        """
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.session = session or requests.Session()
        self.session.headers.update({
            'Accept': 'application/json',
            'User-Agent': config.USER_AGENT
        })

    def _get(self, url: str) -> requests.Response:
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response

    def fetch_text(self, url: str) -> str:
        """
        Download a document, retrying on transient failures.

        Raises:
            FetchError: On a non-retryable failure or when retries run out
        """
        logger.info(f"Fetching {url}")
        try:
            response = call_with_backoff(
                self._get,
                url,
                max_retries=self.max_retries,
                initial_delay=self.retry_delay
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed for {url}: {e}")
            raise FetchError(url, str(e)) from e
        return response.text

    def fetch_json(self, url: str) -> Any:
        """
        Download and parse a JSON document.

        Args:
            url: HTTP(S) URL of the document

        Returns:
            Parsed value tree

        Raises:
            FetchError: If the download fails
            JsonParseError: If the body is not valid JSON
        """
        text = self.fetch_text(url)
        try:
            return parse_json(text, source=url)
        except JsonParseError:
            logger.error(f"Response from {url} is not valid JSON")
            raise

    def close(self):
        self.session.close()
