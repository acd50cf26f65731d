from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from shortcut_crx.api import app, content_disposition, get_generator
from shortcut_crx.generator.application.services.extension_generator import (
    ExtensionGenerator,
    GeneratedExtension,
)
from shortcut_crx.generator.application.services.url_validator import URLValidator
from shortcut_crx.generator.domain.exceptions import (
    IconDownloadError,
    InvalidInputError,
    InvalidUrlError,
    PackagingError,
)
from shortcut_crx.generator.domain.value_objects import TargetConfig


@pytest.fixture
def generator():
    return AsyncMock(spec=ExtensionGenerator)


@pytest.fixture
def client(generator):
    app.dependency_overrides[get_generator] = lambda: generator
    yield TestClient(app)
    app.dependency_overrides.clear()


def generated(url="https://example.com/"):
    parsed = URLValidator().validate(url)
    config = TargetConfig.from_parsed_url(parsed.raw, parsed)
    return GeneratedExtension(filename=config.filename, content=b"Cr24...", config=config)


def test_generate_streams_package(client, generator):
    generator.generate.return_value = generated()

    response = client.post("/generate", json={"url": "https://example.com/"})

    assert response.status_code == 200
    assert response.content == b"Cr24..."
    assert response.headers["content-type"] == "application/x-chrome-extension"
    assert (
        response.headers["content-disposition"]
        == 'attachment; filename="example.com.crx"'
    )
    generator.generate.assert_awaited_once_with("https://example.com/")


def test_missing_url_is_a_bad_request(client, generator):
    generator.generate.side_effect = InvalidInputError()

    response = client.post("/generate", json={})

    assert response.status_code == 400
    assert response.json()["detail"] == "Please provide a URL to continue."
    assert response.json()["error_code"] == "INVALID_INPUT"
    generator.generate.assert_awaited_once_with(None)


def test_invalid_url_is_a_bad_request(client, generator):
    generator.generate.side_effect = InvalidUrlError("ftp://example.com")

    response = client.post("/generate", json={"url": "ftp://example.com"})

    assert response.status_code == 400
    assert "http(s)://" in response.json()["detail"]


def test_icon_download_failure_is_a_bad_gateway(client, generator):
    generator.generate.side_effect = IconDownloadError(
        "https://example.com/favicon.ico", "server answered with HTTP 404"
    )

    response = client.post("/generate", json={"url": "https://example.com/"})

    assert response.status_code == 502
    assert response.json()["error_code"] == "ICON_DOWNLOAD_FAILED"


def test_packaging_failure_is_a_server_error(client, generator):
    generator.generate.side_effect = PackagingError("disk full")

    response = client.post("/generate", json={"url": "https://example.com/"})

    assert response.status_code == 500
    assert response.json()["error_code"] == "PACKAGING_ERROR"


def test_root_reports_status(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["service"] == "site-shortcut-crx"


def test_internationalized_hostname_gets_ascii_safe_header(client, generator):
    generator.generate.return_value = GeneratedExtension(
        filename="例え.jp.crx", content=b"Cr24...", config=generated().config
    )

    response = client.post("/generate", json={"url": "https://例え.jp/"})

    assert response.status_code == 200
    assert response.content == b"Cr24..."
    disposition = response.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="xn--')
    assert '.jp.crx"' in disposition
    assert "filename*=UTF-8''%E4%BE%8B%E3%81%88.jp.crx" in disposition


def test_content_disposition_keeps_plain_ascii_names():
    assert content_disposition("github.io.crx") == 'attachment; filename="github.io.crx"'


def test_content_disposition_escapes_quotes():
    header = content_disposition('a"b.crx')

    assert header.startswith('attachment; filename="a_b.crx"; ')
    assert header.endswith("filename*=UTF-8''a%22b.crx")
