"""
Pydantic Settings for the site shortcut generator.

Every tunable of the pipeline (timeouts, user agent, override tables, asset
locations and signing parameters) is declared here with type validation and
environment variable loading.
"""

import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings
from pydantic_settings import SettingsConfigDict

from shortcut_crx import __version__
from shortcut_crx.core.constants import (
    DEFAULT_CERTIFICATE_VALIDITY_DAYS,
    DEFAULT_EXTENSION_TEMPLATE_DIR,
    DEFAULT_ICON_DOWNLOAD_TIMEOUT_SECONDS,
    DEFAULT_ICON_SIZE,
    DEFAULT_OVERRIDE_ICONS_DIR,
    DEFAULT_PLACEHOLDER_ICONS_DIR,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_RSA_KEY_SIZE,
    DEFAULT_USER_AGENT,
)
from shortcut_crx.generator.domain.value_objects.parsed_url import normalize_host


class Settings(PydanticBaseSettings):
    """
    Application settings using Pydantic for validation and environment loading.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="",
        validate_assignment=True,
    )

    # Network settings
    request_timeout_seconds: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT_SECONDS,
        description="Timeout for fetching the target page (in seconds)",
        gt=0,
    )
    icon_download_timeout_seconds: float = Field(
        default=DEFAULT_ICON_DOWNLOAD_TIMEOUT_SECONDS,
        description="Timeout for downloading the favicon (in seconds)",
        gt=0,
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent string sent with every outgoing request",
    )

    # Per-host overrides
    title_overrides: Dict[str, str] = Field(
        # Messenger's <title> renders as garbage characters in other contexts
        default_factory=lambda: {"messenger.com": "Messenger"},
        description="Normalized hostname to literal extension title",
    )
    override_icons_dir: Path = Field(
        default=DEFAULT_OVERRIDE_ICONS_DIR,
        description="Directory of curated per-host icons named <host>.png",
    )

    # Icon assets
    placeholder_icons_dir: Path = Field(
        default=DEFAULT_PLACEHOLDER_ICONS_DIR,
        description="Directory of pre-supplied letter icons named <LETTER>.png",
    )
    placeholder_cache_dir: Path = Field(
        default_factory=lambda: Path(tempfile.gettempdir())
        / "shortcut-crx"
        / "placeholders",
        description="Where missing letter icons are rendered and reused",
    )
    icon_size: int = Field(
        default=DEFAULT_ICON_SIZE, description="Rendered icon size in pixels", gt=0
    )

    # Packaging and signing
    extension_template_dir: Path = Field(
        default=DEFAULT_EXTENSION_TEMPLATE_DIR,
        description="Template directory holding manifest.json and default files",
    )
    rsa_key_size: int = Field(
        default=DEFAULT_RSA_KEY_SIZE,
        description="Size of the RSA signing key (in bits)",
        ge=1024,
    )
    certificate_validity_days: int = Field(
        default=DEFAULT_CERTIFICATE_VALIDITY_DAYS,
        description="Lifetime of the self-signed certificate (in days)",
        gt=0,
    )

    # Debug settings
    debug_logs_enabled: bool = Field(
        default=False, description="Enable debug logging output"
    )

    # Service Information
    service_name: str = Field("site-shortcut-crx", description="Name of the service.")
    service_version: str = __version__

    @field_validator("debug_logs_enabled", mode="before")
    def parse_debug_logs(cls, v: Any) -> bool:
        """Parse debug logs from various string formats with strict validation"""
        if isinstance(v, str):
            lower_v = v.lower()
            if lower_v in ("true", "1", "yes", "on"):
                return True
            elif lower_v in ("false", "0", "no", "off"):
                return False
            else:
                raise ValueError(
                    f"Invalid boolean value: '{v}'. Must be one of: true, false, 1, "
                    "0, yes, no, on, off"
                )
        return bool(v)

    @field_validator("title_overrides", mode="after")
    def normalize_override_hosts(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Lookup keys are normalized hostnames (lowercase, no leading www.)."""
        return {normalize_host(host.strip()): title for host, title in v.items()}


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings instance (singleton pattern).

    Returns:
        Settings: The application settings instance
    """
    return Settings()


def reload_settings():
    """
    Reload settings by clearing the cache.
    Useful for testing and dynamic configuration changes.
    """
    get_settings.cache_clear()
