"""
HttpxIconDownloader - streams a remote favicon to disk.

The body is written to a sibling ``.part`` file and moved over the
destination only once complete, so a failed download never leaves a
truncated icon in the package.
"""

from pathlib import Path
from typing import Any

import aiofiles
import aiofiles.os
import httpx

from shortcut_crx.core.constants import (
    DOWNLOAD_CHUNK_SIZE,
    HTTP_CLIENT_ERROR_THRESHOLD,
)
from shortcut_crx.generator.application.contracts.icon_downloader import (
    IIconDownloader,
)
from shortcut_crx.generator.domain.exceptions import IconDownloadError
from shortcut_crx.logger import get_logger

logger = get_logger(__name__)


class HttpxIconDownloader(IIconDownloader):
    """Icon downloader backed by ``httpx.AsyncClient`` and aiofiles."""

    def __init__(self, config: Any) -> None:
        self.config = config
        self.timeout = config.icon_download_timeout_seconds

    async def download(self, icon_url: str, destination: Path) -> Path:
        destination = Path(destination)
        partial = destination.with_name(destination.name + ".part")
        headers = {"User-Agent": self.config.user_agent}
        size = 0
        try:
            await aiofiles.os.makedirs(destination.parent, exist_ok=True)
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True
            ) as client:
                async with client.stream("GET", icon_url, headers=headers) as response:
                    if response.status_code >= HTTP_CLIENT_ERROR_THRESHOLD:
                        raise IconDownloadError(
                            icon_url,
                            f"server answered with HTTP {response.status_code}",
                            status_code=response.status_code,
                        )
                    async with aiofiles.open(partial, "wb") as writer:
                        async for chunk in response.aiter_bytes(DOWNLOAD_CHUNK_SIZE):
                            size += len(chunk)
                            await writer.write(chunk)
        except httpx.HTTPError as e:
            await self._discard(partial)
            raise IconDownloadError(
                icon_url, str(e) or type(e).__name__, original_exception=e
            ) from e
        except OSError as e:
            await self._discard(partial)
            raise IconDownloadError(
                icon_url, f"cannot write {partial}: {e}", original_exception=e
            ) from e
        except IconDownloadError:
            await self._discard(partial)
            raise

        if size == 0:
            await self._discard(partial)
            raise IconDownloadError(icon_url, "response body was empty")

        try:
            await aiofiles.os.replace(partial, destination)
        except OSError as e:
            await self._discard(partial)
            raise IconDownloadError(
                icon_url, f"cannot write {destination}: {e}", original_exception=e
            ) from e

        logger.debug(f"Downloaded {size} bytes from {icon_url} to {destination}")
        return destination

    @staticmethod
    async def _discard(path: Path) -> None:
        if await aiofiles.os.path.exists(path):
            await aiofiles.os.remove(path)
