"""Content provider using the requests library."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import urlparse

import requests
from bs4.dammit import EncodingDetector

from reflect_mcp.errors import FetchError, InvalidInput, NetworkError
from reflect_mcp.providers.base import ContentProvider, FetchResult

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)


class RequestsProvider(ContentProvider):
    """Fetches pages with a browser-like User-Agent.

    Each fetch opens and closes its own ``requests.Session``, so cookies and
    pooled connections never carry over from one run to the next. One attempt
    per call unless ``max_retries`` is raised; retries only cover transport
    faults, never HTTP status errors.
    """

    def __init__(
        self,
        timeout: int = 30,
        max_retries: int = 0,
        retry_delay: float = 1.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """Initialize the requests provider.

        Args:
            timeout: Request timeout in seconds (default: 30)
            max_retries: Retry attempts on transport faults (default: 0)
            retry_delay: Initial delay between retries in seconds (default: 1.0)
            user_agent: User agent string (default: Chrome 131 on Windows)
        """
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.user_agent = user_agent

    def supports_url(self, url: str) -> bool:
        """Check if this provider supports the given URL.

        Args:
            url: The URL to check

        Returns:
            True if the URL is absolute, uses http or https, and has a host
        """
        try:
            parsed = urlparse(url)
            return parsed.scheme in ("http", "https") and bool(parsed.hostname)
        except ValueError:
            return False

    async def fetch(self, url: str, **kwargs: Any) -> FetchResult:
        """Fetch raw markup from a URL.

        Args:
            url: The URL to fetch
            **kwargs: Additional options
                - timeout: Request timeout in seconds
                - max_retries: Retry attempts on transport faults
                - headers: Custom HTTP headers

        Returns:
            FetchResult containing the response body and metadata

        Raises:
            InvalidInput: If the URL is empty or not absolute http(s)
            NetworkError: If the target cannot be reached
            FetchError: If the target responds with a non-success status
        """
        if not url or not self.supports_url(url):
            raise InvalidInput(url)

        timeout = kwargs.get("timeout", self.timeout)
        max_retries = kwargs.get("max_retries", self.max_retries)
        headers = dict(kwargs.get("headers") or {})

        if "User-Agent" not in headers:
            headers["User-Agent"] = self.user_agent

        attempt = 0
        while True:
            try:
                # Run requests in thread pool to avoid blocking
                loop = asyncio.get_event_loop()
                response = await loop.run_in_executor(None, lambda: self._get(url, headers, timeout))
                break
            except requests.RequestException as e:
                attempt += 1
                if attempt > max_retries:
                    raise NetworkError(url, f"{type(e).__name__}: {e}") from e

                delay = self.retry_delay * (2 ** (attempt - 1))
                logger.debug(f"Retry attempt {attempt}/{max_retries} for {url} after {delay:.2f}s delay")
                await asyncio.sleep(delay)

        if not 200 <= response.status_code < 300:
            raise FetchError(url, response.status_code)

        content = decode_body(response)

        metadata = {
            "encoding": response.encoding,
            "elapsed_ms": response.elapsed.total_seconds() * 1000,
            "attempts": attempt + 1,
            "retries": attempt,
        }

        return FetchResult(
            url=url,
            content=content,
            status_code=response.status_code,
            content_type=response.headers.get("Content-Type"),
            metadata=metadata,
        )

    @staticmethod
    def _get(url: str, headers: dict[str, str], timeout: float) -> requests.Response:
        with requests.Session() as session:
            return session.get(url, headers=headers, timeout=timeout)


def decode_body(response: requests.Response) -> str:
    """Decode a response body, honoring a charset declared inside the document.

    requests falls back to ISO-8859-1 for ``text/*`` responses without a
    charset parameter. In that case the ``<meta charset>`` (or XML)
    declaration wins, then the detected encoding.
    """
    content_type = (response.headers.get("Content-Type") or "").lower()
    if "charset=" not in content_type:
        declared = EncodingDetector.find_declared_encoding(response.content, is_html=True)
        response.encoding = declared or response.apparent_encoding
    return response.text
