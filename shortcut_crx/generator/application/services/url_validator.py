"""
This module contains the URLValidator service, the single hard gate of the
pipeline: everything downstream assumes an absolute HTTP(S) URL.
"""

from typing import Optional
from urllib.parse import urlsplit

from shortcut_crx.core.constants import ALLOWED_URL_SCHEMES
from shortcut_crx.generator.domain.exceptions import (
    InvalidInputError,
    InvalidUrlError,
)
from shortcut_crx.generator.domain.value_objects import ParsedUrl, normalize_host


class URLValidator:
    """
    Validates raw user input and turns it into a ParsedUrl.

    Validation is pure: no network access, no side effects.
    """

    def validate(self, raw_url: Optional[str]) -> ParsedUrl:
        """
        Parse and validate ``raw_url``.

        Args:
            raw_url: The URL string provided by the user.

        Returns:
            The structured URL.

        Raises:
            InvalidInputError: if ``raw_url`` is missing or blank.
            InvalidUrlError: if it is not an absolute http/https URL.
        """
        if raw_url is None or not str(raw_url).strip():
            raise InvalidInputError()

        url = str(raw_url).strip()
        try:
            parts = urlsplit(url)
            port = parts.port
        except ValueError as e:
            raise InvalidUrlError(url, original_exception=e) from e

        if parts.scheme.lower() not in ALLOWED_URL_SCHEMES or not parts.hostname:
            raise InvalidUrlError(url)

        return ParsedUrl(
            raw=url,
            scheme=parts.scheme.lower(),
            hostname=parts.hostname,
            port=port,
            path=parts.path,
            query=parts.query,
            fragment=parts.fragment,
        )

    def is_valid(self, raw_url: Optional[str]) -> bool:
        """Boolean form of :meth:`validate`."""
        try:
            self.validate(raw_url)
        except (InvalidInputError, InvalidUrlError):
            return False
        return True

    @staticmethod
    def normalize_host(hostname: str) -> str:
        """Per-host lookup key: lowercase with a leading ``www.`` removed."""
        return normalize_host(hostname)
