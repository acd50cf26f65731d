"""
Exception hierarchy for the shortcut generator.

Every failure the pipeline can report derives from ``ShortcutError`` and
carries an error code, a context dictionary and a ``recoverable`` flag.
Only ``FetchError`` is recoverable: the assembler absorbs it and keeps the
default configuration. Everything else aborts the request.
"""

from typing import Any, Dict, Optional


class ShortcutError(Exception):
    """
    Base exception for all generator errors.

    Provides a standardized interface with error codes, context and a
    recovery hint.
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        context: Optional[Dict[str, Any]] = None,
        recoverable: bool = False,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.recoverable = recoverable
        self.original_exception = original_exception

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "recoverable": self.recoverable,
            "original_exception": (
                str(self.original_exception) if self.original_exception else None
            ),
        }


# Input validation errors
class InvalidInputError(ShortcutError):
    """Raised when no URL was provided at all."""

    def __init__(self, message: str = "Please provide a URL to continue.", **kwargs):
        super().__init__(
            message=message,
            error_code="INVALID_INPUT",
            recoverable=False,
            **kwargs,
        )


class InvalidUrlError(ShortcutError):
    """Raised when the input cannot be parsed as an absolute HTTP(S) URL."""

    def __init__(
        self,
        url: str,
        message: str = (
            "Please provide a valid URL for your extension. "
            "(It must start with http(s)://)"
        ),
        **kwargs,
    ):
        super().__init__(
            message=message,
            error_code="INVALID_URL",
            context={"url": url},
            recoverable=False,
            **kwargs,
        )


# Network errors
class FetchError(ShortcutError):
    """Raised when the target page cannot be retrieved."""

    def __init__(
        self, url: str, message: str, status_code: Optional[int] = None, **kwargs
    ):
        super().__init__(
            message=f"Failed to fetch {url}: {message}",
            error_code="FETCH_FAILED",
            context={"url": url, "status_code": status_code},
            recoverable=True,
            **kwargs,
        )


class IconDownloadError(ShortcutError):
    """Raised when a favicon was found on the page but could not be downloaded."""

    def __init__(
        self, icon_url: str, message: str, status_code: Optional[int] = None, **kwargs
    ):
        super().__init__(
            message=f"Failed to download icon {icon_url}: {message}",
            error_code="ICON_DOWNLOAD_FAILED",
            context={"icon_url": icon_url, "status_code": status_code},
            recoverable=False,
            **kwargs,
        )


# Packaging and signing errors
class CertificateError(ShortcutError):
    """Raised when the signing key or certificate cannot be produced."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=f"Certificate generation failed: {message}",
            error_code="CERTIFICATE_ERROR",
            recoverable=False,
            **kwargs,
        )


class PackagingError(ShortcutError):
    """Raised when the extension template cannot be loaded or packed."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(
            message=f"Packaging failed: {message}",
            error_code="PACKAGING_ERROR",
            context={"path": path},
            recoverable=False,
            **kwargs,
        )


__all__ = [
    "ShortcutError",
    "InvalidInputError",
    "InvalidUrlError",
    "FetchError",
    "IconDownloadError",
    "CertificateError",
    "PackagingError",
]
