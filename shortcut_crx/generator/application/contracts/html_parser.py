"""
IHTMLParser Interface - Abstract interface for HTML parsing

Services depend on this abstraction so the concrete, markup-tolerant parser
can be swapped or mocked in tests.
"""

from abc import ABC, abstractmethod
from typing import Optional

from bs4 import BeautifulSoup


class IHTMLParser(ABC):
    """
    Abstract interface for HTML parsing operations.

    Implementations must never raise on malformed markup; missing values are
    reported as ``None``.
    """

    @abstractmethod
    def parse_html(self, html_content: str) -> BeautifulSoup:
        """
        Parse HTML content into a traversable document.

        Args:
            html_content: Raw HTML string to parse

        Returns:
            Parsed HTML structure (BeautifulSoup object)
        """
        pass

    @abstractmethod
    def extract_title(self, soup: BeautifulSoup) -> Optional[str]:
        """
        Extract the first non-blank title of the document.

        Args:
            soup: Parsed HTML structure

        Returns:
            Trimmed title text, or None if missing or blank
        """
        pass

    @abstractmethod
    def extract_icon_href(self, soup: BeautifulSoup) -> Optional[str]:
        """
        Extract the href of the first favicon <link> in document order.

        Args:
            soup: Parsed HTML structure

        Returns:
            The raw href value, or None if no favicon is declared
        """
        pass
