"""
BeautifulSoupAdapter - Concrete implementation of IHTMLParser using BeautifulSoup

BeautifulSoup's ``html.parser`` backend accepts broken markup and always
produces a document, which is what the metadata extractor needs.
"""

from typing import Optional

from bs4 import BeautifulSoup

from shortcut_crx.core.constants import ICON_LINK_RELATIONS
from shortcut_crx.generator.application.contracts.html_parser import IHTMLParser


class BeautifulSoupAdapter(IHTMLParser):
    """
    Adapter that implements IHTMLParser using BeautifulSoup4.
    """

    def __init__(self, parser: str = "html.parser"):
        """
        Initialize the BeautifulSoup adapter.

        Args:
            parser: BeautifulSoup parser to use (default: "html.parser")
        """
        self.parser = parser

    def parse_html(self, html_content: str) -> BeautifulSoup:
        return BeautifulSoup(html_content or "", self.parser)

    def extract_title(self, soup: BeautifulSoup) -> Optional[str]:
        for title in soup.find_all("title"):
            text = title.get_text().strip()
            if text:
                return text
        return None

    def extract_icon_href(self, soup: BeautifulSoup) -> Optional[str]:
        for link in soup.find_all("link", href=True):
            if self._link_relation(link.get("rel")) in ICON_LINK_RELATIONS:
                href = link["href"].strip()
                if href:
                    return href
        return None

    @staticmethod
    def _link_relation(rel) -> str:
        # rel is multi-valued, BeautifulSoup hands it back as a list of tokens
        if rel is None:
            return ""
        if isinstance(rel, str):
            return " ".join(rel.lower().split())
        return " ".join(token.lower() for token in rel)
