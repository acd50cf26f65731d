"""
IconResolver - the icon cascade.

Strategies are evaluated in strict order and the first one that applies
ends the cascade:

1. Curated per-host override asset, copied to the destination.
2. Favicon declared by the page, downloaded to the destination.
3. Letter placeholder, when the page declared no favicon at all.
4. Nothing: the packager's default icon stays in place.
"""

import string
from pathlib import Path
from typing import Optional
from urllib.parse import urljoin, urlsplit

from shortcut_crx.core.constants import ALLOWED_URL_SCHEMES
from shortcut_crx.generator.application.contracts.icon_downloader import (
    IIconDownloader,
)
from shortcut_crx.generator.domain.exceptions import IconDownloadError
from shortcut_crx.generator.domain.overrides import IconOverrideTable
from shortcut_crx.generator.domain.value_objects import IconResolution, TargetConfig
from shortcut_crx.generator.infrastructure.external.async_files import copy_file
from shortcut_crx.generator.infrastructure.icons.placeholder_store import (
    PlaceholderIconStore,
)
from shortcut_crx.logger import get_logger

logger = get_logger(__name__)


class IconResolver:
    def __init__(
        self,
        overrides: IconOverrideTable,
        downloader: IIconDownloader,
        placeholder_store: PlaceholderIconStore,
    ):
        self.overrides = overrides
        self.downloader = downloader
        self.placeholder_store = placeholder_store

    async def resolve(self, config: TargetConfig, destination: Path) -> TargetConfig:
        """
        Run the cascade and materialize the chosen icon at ``destination``.

        Args:
            config: Configuration produced by the assembler.
            destination: Icon path the packager's manifest points at.

        Returns:
            A new TargetConfig carrying the IconResolution.

        Raises:
            ValueError: if ``config`` already carries an icon resolution.
            IconDownloadError: if a declared favicon could not be downloaded.
        """
        if config.icon_resolution is not None:
            raise ValueError(f"Icon cascade already ran for {config.hostname}")

        resolution = await self._run_cascade(config, Path(destination))
        logger.info(
            f"Icon for {config.hostname}: {resolution.outcome.value}"
            + (f" ({resolution.source})" if resolution.source else "")
        )
        return config.with_icon_resolution(resolution)

    async def _run_cascade(
        self, config: TargetConfig, destination: Path
    ) -> IconResolution:
        override = self.overrides.lookup(config.normalized_host)
        if override is not None:
            await copy_file(override, destination)
            return IconResolution.overridden(str(override))

        if config.icon_ref:
            icon_url = self.absolute_icon_url(config)
            await self.downloader.download(icon_url, destination)
            return IconResolution.downloaded(icon_url)

        letter = self.placeholder_letter(config.hostname)
        if letter is None:
            return IconResolution.default()

        source = await self.placeholder_store.path_for(letter)
        await copy_file(source, destination)
        return IconResolution.placeholder(str(source))

    @staticmethod
    def absolute_icon_url(config: TargetConfig) -> str:
        """
        Resolve the favicon href against the requested URL.

        Raises:
            IconDownloadError: if the result is not an http(s) URL.
        """
        icon_url = urljoin(config.source_url, config.icon_ref)
        if urlsplit(icon_url).scheme.lower() not in ALLOWED_URL_SCHEMES:
            raise IconDownloadError(icon_url, "unsupported icon URL scheme")
        return icon_url

    @staticmethod
    def placeholder_letter(hostname: str) -> Optional[str]:
        """Uppercased first character of ``hostname`` if it is an ASCII letter."""
        if not hostname:
            return None
        letter = hostname[0].upper()
        if letter not in string.ascii_uppercase:
            return None
        return letter
