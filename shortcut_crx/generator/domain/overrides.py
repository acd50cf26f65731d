"""
Read-only per-host override tables.

Both tables are keyed by the normalized hostname (lowercase, no leading
``www.``) and are built once, then injected into the title and icon
resolvers.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from shortcut_crx.core.constants import ICON_FILE_SUFFIX
from shortcut_crx.generator.domain.value_objects.parsed_url import normalize_host
from shortcut_crx.logger import get_logger

logger = get_logger(__name__)


class TitleOverrideTable:
    """Hostname -> literal title, used to patch known-bad page titles."""

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        self._entries = MappingProxyType(
            {
                normalize_host(host.strip()): title
                for host, title in (entries or {}).items()
            }
        )

    @property
    def entries(self) -> Mapping[str, str]:
        return self._entries

    def lookup(self, host: str) -> Optional[str]:
        return self._entries.get(normalize_host(host))

    def __contains__(self, host: object) -> bool:
        return host in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class IconOverrideTable:
    """
    Hostname -> curated icon file.

    The directory convention is ``<directory>/<host>.png``; the directory is
    scanned once at construction.
    """

    def __init__(self, entries: Optional[Mapping[str, Path]] = None):
        self._entries = MappingProxyType(
            {
                normalize_host(host): Path(path)
                for host, path in (entries or {}).items()
            }
        )

    @classmethod
    def from_directory(cls, directory: Path) -> "IconOverrideTable":
        directory = Path(directory)
        entries: Dict[str, Path] = {}
        if directory.is_dir():
            for candidate in sorted(directory.iterdir()):
                if candidate.is_file() and candidate.suffix.lower() == ICON_FILE_SUFFIX:
                    entries[normalize_host(candidate.stem)] = candidate
        else:
            logger.debug(f"Icon override directory {directory} does not exist")

        logger.debug(f"Loaded {len(entries)} icon overrides from {directory}")
        return cls(entries)

    @property
    def entries(self) -> Mapping[str, Path]:
        return self._entries

    def lookup(self, host: str) -> Optional[Path]:
        return self._entries.get(normalize_host(host))

    def __contains__(self, host: object) -> bool:
        return host in self._entries

    def __len__(self) -> int:
        return len(self._entries)
