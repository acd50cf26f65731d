"""
IIconDownloader Interface - download of a remote icon to a local file.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class IIconDownloader(ABC):
    """Abstract interface for downloading an icon resource."""

    @abstractmethod
    async def download(self, icon_url: str, destination: Path) -> Path:
        """
        Download ``icon_url`` and write it to ``destination``.

        Returns:
            The path that was written.

        Raises:
            IconDownloadError: if the icon cannot be retrieved.
        """
        raise NotImplementedError
