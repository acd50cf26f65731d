"""
ConfigAssembler - builds the TargetConfig for one request.

This is the only place that decides between aborting and continuing:
an invalid URL aborts, while an unreachable or broken page simply leaves
the default configuration (hostname as title, no favicon) in place.
"""

from typing import Optional

from shortcut_crx.generator.application.contracts.page_fetcher import IPageFetcher
from shortcut_crx.generator.domain.exceptions import FetchError
from shortcut_crx.generator.domain.value_objects import FetchResult, TargetConfig
from shortcut_crx.logger import get_logger

from .metadata_extractor import MetadataExtractor
from .title_resolver import TitleResolver
from .url_validator import URLValidator

logger = get_logger(__name__)


class ConfigAssembler:
    def __init__(
        self,
        url_validator: URLValidator,
        page_fetcher: IPageFetcher,
        metadata_extractor: MetadataExtractor,
        title_resolver: TitleResolver,
    ):
        self.url_validator = url_validator
        self.page_fetcher = page_fetcher
        self.metadata_extractor = metadata_extractor
        self.title_resolver = title_resolver

    async def build(self, raw_url: Optional[str]) -> TargetConfig:
        """
        Validate ``raw_url`` and resolve title and favicon reference.

        Raises:
            InvalidInputError: if no URL was given.
            InvalidUrlError: if the URL is not an absolute http(s) URL.
        """
        parsed_url = self.url_validator.validate(raw_url)
        config = TargetConfig.from_parsed_url(parsed_url.raw, parsed_url)

        result = await self.fetch_metadata(config.source_url)
        if not result.success:
            logger.warning(
                f"Using default configuration for {config.hostname}: {result.error}"
            )
            return config

        metadata = result.metadata
        config = config.with_title(
            self.title_resolver.resolve_title(metadata.title, config)
        ).with_icon_ref(metadata.icon_ref)

        logger.info(
            f"Built configuration for {config.hostname}: title={config.title!r}, "
            f"icon_ref={config.icon_ref!r}"
        )
        return config

    async def fetch_metadata(self, url: str) -> FetchResult:
        """Fetch and extract ``url``; failures come back as a failed result."""
        try:
            html = await self.page_fetcher.fetch_html(url)
        except FetchError as e:
            return FetchResult.failed(e.message)

        return FetchResult.succeeded(self.metadata_extractor.extract(html))
