"""
Values produced by the best-effort fetch-and-extract phase.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PageMetadata:
    """Title and favicon reference found in a page; both may be absent."""

    title: Optional[str] = None
    icon_ref: Optional[str] = None


@dataclass(frozen=True)
class FetchResult:
    """
    Success or failure of fetching and extracting a page.

    A failed result carries the error message instead of raising, so the
    assembler can fall back to defaults without catching anything.
    """

    success: bool
    metadata: Optional[PageMetadata] = None
    error: Optional[str] = None

    @classmethod
    def succeeded(cls, metadata: PageMetadata) -> "FetchResult":
        return cls(success=True, metadata=metadata)

    @classmethod
    def failed(cls, error: str) -> "FetchResult":
        return cls(success=False, error=error)
