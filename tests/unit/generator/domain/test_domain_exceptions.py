from shortcut_crx.generator.domain.exceptions import (
    CertificateError,
    FetchError,
    IconDownloadError,
    InvalidInputError,
    InvalidUrlError,
    PackagingError,
    ShortcutError,
)


def test_all_errors_share_the_base_class():
    errors = [
        InvalidInputError(),
        InvalidUrlError("ftp://x"),
        FetchError("https://x", "boom"),
        IconDownloadError("https://x/f.ico", "boom"),
        CertificateError("boom"),
        PackagingError("boom"),
    ]
    assert all(isinstance(error, ShortcutError) for error in errors)


def test_only_fetch_errors_are_recoverable():
    assert FetchError("https://x", "boom").recoverable is True
    assert IconDownloadError("https://x/f.ico", "boom").recoverable is False
    assert InvalidUrlError("ftp://x").recoverable is False


def test_str_includes_error_code():
    assert str(InvalidInputError()) == "[INVALID_INPUT] Please provide a URL to continue."


def test_to_dict_serializes_context_and_cause():
    cause = OSError("connection reset")
    error = IconDownloadError(
        "https://x/f.ico", "boom", status_code=404, original_exception=cause
    )

    data = error.to_dict()

    assert data["error_code"] == "ICON_DOWNLOAD_FAILED"
    assert data["context"] == {"icon_url": "https://x/f.ico", "status_code": 404}
    assert data["recoverable"] is False
    assert data["original_exception"] == "connection reset"


def test_invalid_url_message_guides_the_user():
    error = InvalidUrlError("example.com")
    assert error.message.endswith("(It must start with http(s)://)")
    assert error.context == {"url": "example.com"}
