"""
Constants module for the shortcut generator.

This module centralizes magic numbers and strings into named constants
so the pipeline, the packager and the HTTP boundary share one vocabulary.
"""

from pathlib import Path

# =============================================================================
# PATH CONSTANTS
# =============================================================================

PACKAGE_ROOT = Path(__file__).resolve().parents[1]

DEFAULT_EXTENSION_TEMPLATE_DIR = PACKAGE_ROOT / "extension" / "files"
DEFAULT_OVERRIDE_ICONS_DIR = PACKAGE_ROOT / "assets" / "icons" / "overrides"
DEFAULT_PLACEHOLDER_ICONS_DIR = PACKAGE_ROOT / "assets" / "icons" / "placeholders"

MANIFEST_FILENAME = "manifest.json"
ICON_FILE_SUFFIX = ".png"

# =============================================================================
# URL CONSTANTS
# =============================================================================

ALLOWED_URL_SCHEMES = ("http", "https")

# Prefix stripped from hostnames when building the per-host lookup key
WWW_PREFIX = "www."

# =============================================================================
# TIMEOUT CONSTANTS
# =============================================================================

DEFAULT_REQUEST_TIMEOUT_SECONDS = 15
DEFAULT_ICON_DOWNLOAD_TIMEOUT_SECONDS = 15

# =============================================================================
# HTTP CONSTANTS
# =============================================================================

# HTTP client error threshold - any status at or above it is a failure
HTTP_CLIENT_ERROR_THRESHOLD = 400

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

DEFAULT_ACCEPT_HEADER = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
)

CRX_MIME_TYPE = "application/x-chrome-extension"
CRX_FILE_EXTENSION = ".crx"

# Chunk size used when streaming icon downloads to disk
DOWNLOAD_CHUNK_SIZE = 64 * 1024

# =============================================================================
# HTML CONSTANTS
# =============================================================================

# <link rel="..."> values that declare a favicon
ICON_LINK_RELATIONS = ("icon", "shortcut icon")

# =============================================================================
# ICON CONSTANTS
# =============================================================================

DEFAULT_ICON_SIZE = 128
MANIFEST_ICON_KEY = "128"

DEFAULT_ICON_BACKGROUND = (96, 125, 139)
PLACEHOLDER_ICON_BACKGROUND = (66, 133, 244)
ICON_FOREGROUND = (255, 255, 255)

# Share of the icon height used by the placeholder glyph
PLACEHOLDER_GLYPH_RATIO = 0.6

# =============================================================================
# SIGNING CONSTANTS
# =============================================================================

DEFAULT_RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537

# Roughly ten years, as requested from the certificate component
DEFAULT_CERTIFICATE_VALIDITY_DAYS = 365 * 10

CERTIFICATE_COMMON_NAME = "site-shortcut-crx"
