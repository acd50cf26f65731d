"""
PlaceholderIconStore - lookup of letter icons.

Pre-supplied assets (``<assets_dir>/<LETTER>.png``) win. A letter without an
asset is rendered once into the cache directory and reused afterwards.
"""

import asyncio
from pathlib import Path

from shortcut_crx.generator.infrastructure.external.async_files import file_exists
from shortcut_crx.logger import get_logger

from .icon_renderer import IconRenderer

logger = get_logger(__name__)


class PlaceholderIconStore:
    def __init__(self, assets_dir: Path, cache_dir: Path, renderer: IconRenderer):
        self.assets_dir = Path(assets_dir)
        self.cache_dir = Path(cache_dir)
        self.renderer = renderer

    async def path_for(self, letter: str) -> Path:
        """
        Return the icon file for an uppercase ASCII letter.

        Raises:
            ValueError: if ``letter`` is not a single ASCII letter.
        """
        if len(letter) != 1 or not ("A" <= letter.upper() <= "Z"):
            raise ValueError(f"Placeholder icons exist only for A-Z, got {letter!r}")
        letter = letter.upper()

        supplied = self.assets_dir / f"{letter}.png"
        if await file_exists(supplied):
            return supplied

        cached = self.cache_dir / f"{letter}.png"
        if not await file_exists(cached):
            logger.info(f"Rendering placeholder icon {letter} into {self.cache_dir}")
            await asyncio.to_thread(self.renderer.render_letter, letter, cached)
        return cached
