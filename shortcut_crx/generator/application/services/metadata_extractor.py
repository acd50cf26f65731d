"""
MetadataExtractor - pulls the page title and favicon reference out of HTML.
"""

from shortcut_crx.generator.application.contracts.html_parser import IHTMLParser
from shortcut_crx.generator.domain.value_objects import PageMetadata
from shortcut_crx.logger import get_logger

logger = get_logger(__name__)


class MetadataExtractor:
    """
    Extracts PageMetadata from raw markup.

    Never fails: missing fields come back as ``None`` and broken markup
    yields whatever the tolerant parser could recover.
    """

    def __init__(self, html_parser: IHTMLParser):
        self.html_parser = html_parser

    def extract(self, html: str) -> PageMetadata:
        soup = self.html_parser.parse_html(html)
        metadata = PageMetadata(
            title=self.html_parser.extract_title(soup),
            icon_ref=self.html_parser.extract_icon_href(soup),
        )
        logger.debug(
            f"Extracted title={metadata.title!r} icon_ref={metadata.icon_ref!r}"
        )
        return metadata
