"""
IconResolution - the tagged outcome of the icon cascade.

Exactly one outcome is recorded per request, so a configuration can never
describe an icon that was both overridden and downloaded.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class IconOutcome(Enum):
    """Which branch of the icon cascade produced the package icon."""

    OVERRIDDEN = "overridden"
    DOWNLOADED = "downloaded"
    PLACEHOLDER = "placeholder"
    DEFAULT = "default"


@dataclass(frozen=True)
class IconResolution:
    """Outcome plus the source the icon was taken from (a path or a URL)."""

    outcome: IconOutcome
    source: Optional[str] = None

    @classmethod
    def overridden(cls, source: str) -> "IconResolution":
        return cls(IconOutcome.OVERRIDDEN, source)

    @classmethod
    def downloaded(cls, source: str) -> "IconResolution":
        return cls(IconOutcome.DOWNLOADED, source)

    @classmethod
    def placeholder(cls, source: str) -> "IconResolution":
        return cls(IconOutcome.PLACEHOLDER, source)

    @classmethod
    def default(cls) -> "IconResolution":
        return cls(IconOutcome.DEFAULT)
