"""
HttpxPageFetcher - fetches page markup with a browser-like request.

Many sites serve empty or degraded markup to clients they do not recognize,
so every request carries a desktop browser User-Agent.
"""

from typing import Any, Dict, Optional

import httpx

from shortcut_crx.core.constants import (
    DEFAULT_ACCEPT_HEADER,
    HTTP_CLIENT_ERROR_THRESHOLD,
)
from shortcut_crx.generator.application.contracts.page_fetcher import IPageFetcher
from shortcut_crx.generator.domain.exceptions import FetchError
from shortcut_crx.logger import get_logger

logger = get_logger(__name__)


class HttpxPageFetcher(IPageFetcher):
    """Page fetcher backed by ``httpx.AsyncClient``."""

    def __init__(self, config: Any) -> None:
        self.config = config
        self.timeout = config.request_timeout_seconds

    def build_headers(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        default_headers = {
            "User-Agent": self.config.user_agent,
            "Accept": DEFAULT_ACCEPT_HEADER,
            "Accept-Language": "en-US,en;q=0.5",
        }
        if headers:
            default_headers.update(headers)
        return default_headers

    async def fetch_html(self, url: str) -> str:
        """
        Fetch the HTML of ``url``.

        Args:
            url: Absolute HTTP(S) URL of the page

        Returns:
            Response body decoded as text

        Raises:
            FetchError: on network failure, timeout or a non-success status
        """
        logger.debug(f"Fetching page {url}")
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True
            ) as client:
                response = await client.get(url, headers=self.build_headers())
        except httpx.TimeoutException as e:
            raise FetchError(
                url, f"timed out after {self.timeout}s", original_exception=e
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(url, str(e) or type(e).__name__, original_exception=e) from e

        if response.status_code >= HTTP_CLIENT_ERROR_THRESHOLD:
            raise FetchError(
                url,
                f"server answered with HTTP {response.status_code}",
                status_code=response.status_code,
            )

        logger.debug(
            f"Fetched {url} (HTTP {response.status_code}, {len(response.content)} bytes)"
        )
        return response.text
