"""
ParsedUrl - structured, immutable view of a validated HTTP(S) URL.
"""

from dataclasses import dataclass
from typing import Optional

from shortcut_crx.core.constants import WWW_PREFIX


@dataclass(frozen=True)
class ParsedUrl:
    """
    The pieces of a validated URL that the pipeline relies on.

    ``hostname`` is already lowercased by the URL parser.
    """

    raw: str
    scheme: str
    hostname: str
    port: Optional[int] = None
    path: str = ""
    query: str = ""
    fragment: str = ""

    @property
    def origin(self) -> str:
        """Scheme, host and explicit port, e.g. ``https://example.com:8443``."""
        if self.port is None:
            return f"{self.scheme}://{self.hostname}"
        return f"{self.scheme}://{self.hostname}:{self.port}"

    @property
    def is_secure(self) -> bool:
        return self.scheme == "https"

    def __str__(self) -> str:
        return self.raw


def normalize_host(hostname: str) -> str:
    """
    Build the per-host lookup key: lowercase, leading ``www.`` removed.

    Only used to look up overrides, never to navigate.
    """
    host = hostname.lower()
    if host.startswith(WWW_PREFIX):
        host = host[len(WWW_PREFIX):]
    return host
