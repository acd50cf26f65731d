import io
import sys
from pathlib import Path

import pytest
from PIL import Image

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from shortcut_crx.settings import Settings, reload_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    reload_settings()
    yield
    reload_settings()


@pytest.fixture
def png_bytes():
    buffer = io.BytesIO()
    Image.new("RGBA", (16, 16), (255, 0, 0, 255)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def settings(tmp_path):
    """Settings pointing every asset directory into the test's tmp dir."""
    override_dir = tmp_path / "overrides"
    placeholder_dir = tmp_path / "placeholders"
    override_dir.mkdir()
    placeholder_dir.mkdir()
    return Settings(
        override_icons_dir=override_dir,
        placeholder_icons_dir=placeholder_dir,
        placeholder_cache_dir=tmp_path / "placeholder-cache",
        rsa_key_size=1024,
        request_timeout_seconds=5,
        icon_download_timeout_seconds=5,
    )


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "tests/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
