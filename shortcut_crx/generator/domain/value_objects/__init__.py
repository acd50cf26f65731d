"""
Domain Value Objects

Immutable values passed between the stages of the configuration pipeline.
"""

from .icon_resolution import IconOutcome, IconResolution
from .page_metadata import FetchResult, PageMetadata
from .parsed_url import ParsedUrl, normalize_host
from .target_config import TargetConfig

__all__ = [
    "FetchResult",
    "IconOutcome",
    "IconResolution",
    "PageMetadata",
    "ParsedUrl",
    "TargetConfig",
    "normalize_host",
]
