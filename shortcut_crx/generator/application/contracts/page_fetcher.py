"""
IPageFetcher Interface - retrieval of a page's HTML.
"""

from abc import ABC, abstractmethod


class IPageFetcher(ABC):
    """Abstract interface for fetching page markup over HTTP."""

    @abstractmethod
    async def fetch_html(self, url: str) -> str:
        """
        Fetch the HTML of ``url``.

        Raises:
            FetchError: on network failure, timeout or a non-success status.
        """
        raise NotImplementedError
