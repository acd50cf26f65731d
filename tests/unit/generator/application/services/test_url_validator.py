import pytest

from shortcut_crx.generator.application.services.url_validator import URLValidator
from shortcut_crx.generator.domain.exceptions import InvalidInputError, InvalidUrlError


@pytest.fixture
def validator():
    return URLValidator()


@pytest.mark.parametrize(
    "valid_url",
    [
        "http://example.com",
        "https://example.com",
        "https://www.example.com/path?query=value",
        "https://127.0.0.1:8080",
        "HTTPS://Example.com/x",
    ],
)
def test_validate_accepts_http_and_https(validator, valid_url):
    parsed = validator.validate(valid_url)
    assert parsed.scheme in ("http", "https")
    assert parsed.hostname


def test_validate_returns_structured_url(validator):
    parsed = validator.validate("https://WWW.Example.com:8443/docs/page?lang=en#top")

    assert parsed.raw == "https://WWW.Example.com:8443/docs/page?lang=en#top"
    assert parsed.scheme == "https"
    assert parsed.hostname == "www.example.com"
    assert parsed.port == 8443
    assert parsed.path == "/docs/page"
    assert parsed.query == "lang=en"
    assert parsed.fragment == "top"
    assert parsed.origin == "https://www.example.com:8443"


def test_validate_strips_surrounding_whitespace(validator):
    assert validator.validate("  https://example.com/  ").raw == "https://example.com/"


@pytest.mark.parametrize("empty", [None, "", "   "])
def test_validate_rejects_missing_input(validator, empty):
    with pytest.raises(InvalidInputError) as exc_info:
        validator.validate(empty)
    assert exc_info.value.message == "Please provide a URL to continue."


@pytest.mark.parametrize(
    "invalid_url",
    [
        "file:///etc/passwd",
        "javascript:alert('xss')",
        "ftp://example.com",
        "not-a-url",
        "example.com",
        "http://",
        "https://[::1",
        "http://example.com:notaport/",
    ],
)
def test_validate_rejects_non_http_urls(validator, invalid_url):
    with pytest.raises(InvalidUrlError) as exc_info:
        validator.validate(invalid_url)
    assert "http(s)://" in exc_info.value.message
    assert exc_info.value.error_code == "INVALID_URL"


def test_is_valid_mirrors_validate(validator):
    assert validator.is_valid("https://example.com") is True
    assert validator.is_valid("ftp://example.com") is False
    assert validator.is_valid("") is False


@pytest.mark.parametrize(
    "hostname,expected",
    [
        ("WWW.Example.com", "example.com"),
        ("example.com", "example.com"),
        ("www.messenger.com", "messenger.com"),
        ("docs.www.example.com", "docs.www.example.com"),
    ],
)
def test_normalize_host(hostname, expected):
    assert URLValidator.normalize_host(hostname) == expected
