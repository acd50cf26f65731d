"""
TargetConfig - the resolved configuration for one generated extension.

A TargetConfig is created once per request from a validated URL and then
moves through the pipeline by value: each stage returns a new instance
through one of the ``with_*`` methods instead of mutating shared state.
"""

from dataclasses import dataclass, replace
from typing import Optional

from shortcut_crx.core.constants import CRX_FILE_EXTENSION

from .icon_resolution import IconOutcome, IconResolution
from .parsed_url import ParsedUrl, normalize_host


@dataclass(frozen=True)
class TargetConfig:
    """
    Everything the packager needs to know about the target site.

    Attributes:
        source_url: The raw URL exactly as provided by the caller.
        parsed_url: Structured view of ``source_url``.
        normalized_host: Lookup key for per-host overrides.
        title: Display name of the extension.
        filename: Suggested filename of the generated package.
        icon_ref: Favicon href found in the page, relative or absolute.
        icon_resolution: Outcome of the icon cascade, once it has run.
    """

    source_url: str
    parsed_url: ParsedUrl
    normalized_host: str
    title: str
    filename: str
    icon_ref: Optional[str] = None
    icon_resolution: Optional[IconResolution] = None

    @classmethod
    def from_parsed_url(cls, source_url: str, parsed_url: ParsedUrl) -> "TargetConfig":
        """Default configuration: hostname as title, no icon information."""
        hostname = parsed_url.hostname
        return cls(
            source_url=source_url,
            parsed_url=parsed_url,
            normalized_host=normalize_host(hostname),
            title=hostname,
            filename=f"{hostname}{CRX_FILE_EXTENSION}",
        )

    @property
    def hostname(self) -> str:
        return self.parsed_url.hostname

    @property
    def icon_overridden(self) -> bool:
        """True once a curated per-host icon has been applied."""
        return (
            self.icon_resolution is not None
            and self.icon_resolution.outcome is IconOutcome.OVERRIDDEN
        )

    def with_title(self, title: str) -> "TargetConfig":
        return replace(self, title=title)

    def with_icon_ref(self, icon_ref: Optional[str]) -> "TargetConfig":
        return replace(self, icon_ref=icon_ref)

    def with_icon_resolution(self, resolution: IconResolution) -> "TargetConfig":
        """
        Record the icon outcome.

        Raises:
            ValueError: if an outcome has already been recorded.
        """
        if self.icon_resolution is not None:
            raise ValueError(
                f"Icon already resolved as {self.icon_resolution.outcome.value} "
                f"for {self.hostname}"
            )
        return replace(self, icon_resolution=resolution)
