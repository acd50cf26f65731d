import io
import json
import zipfile

import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from shortcut_crx.core.constants import DEFAULT_EXTENSION_TEMPLATE_DIR
from shortcut_crx.generator.domain.exceptions import PackagingError
from shortcut_crx.generator.infrastructure.icons.icon_renderer import IconRenderer
from shortcut_crx.generator.infrastructure.packaging.crx_format import verify_crx3
from shortcut_crx.generator.infrastructure.packaging.crx_packager import CrxExtension


@pytest.fixture(scope="module")
def private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=1024)


@pytest.fixture
def template_dir(tmp_path, png_bytes):
    directory = tmp_path / "template"
    (directory / "js").mkdir(parents=True)
    (directory / "manifest.json").write_text(
        json.dumps(
            {
                "name": "Template",
                "icons": {"128": "img/icon.png"},
                "app": {"urls": [], "launch": {"web_url": ""}},
            }
        )
    )
    (directory / "img").mkdir()
    (directory / "img" / "icon.png").write_bytes(png_bytes)
    (directory / "js" / "background.js").write_text("// noop")
    return directory


@pytest.mark.asyncio
async def test_load_copies_template_into_private_directory(private_key, template_dir):
    async with CrxExtension(private_key) as extension:
        await extension.load(template_dir)

        assert extension.path != template_dir
        assert extension.manifest["name"] == "Template"
        assert extension.icon_path == extension.path / "img" / "icon.png"
        assert extension.icon_path.is_file()
        working_dir = extension.path

    assert not working_dir.exists()


@pytest.mark.asyncio
async def test_pack_writes_manifest_changes(private_key, template_dir):
    async with CrxExtension(private_key) as extension:
        await extension.load(template_dir)
        extension.manifest["name"] = "Example"
        extension.manifest["app"]["urls"].append("https://example.com")
        extension.icon_path.write_bytes(b"new-icon")

        content = await extension.pack()
        expected_id = extension.extension_id

    package = verify_crx3(content)
    archive = zipfile.ZipFile(io.BytesIO(package.archive))
    assert sorted(archive.namelist()) == [
        "img/icon.png",
        "js/background.js",
        "manifest.json",
    ]
    assert json.loads(archive.read("manifest.json"))["name"] == "Example"
    assert archive.read("img/icon.png") == b"new-icon"
    assert package.extension_id == expected_id

    # the template itself is untouched
    assert json.loads((template_dir / "manifest.json").read_text())["name"] == "Template"


@pytest.mark.asyncio
async def test_missing_template_icon_is_rendered(private_key, template_dir):
    (template_dir / "img" / "icon.png").unlink()

    async with CrxExtension(private_key, icon_renderer=IconRenderer(32)) as extension:
        await extension.load(template_dir)
        assert extension.icon_path.read_bytes().startswith(b"\x89PNG")


@pytest.mark.asyncio
async def test_template_without_manifest_is_rejected(private_key, tmp_path):
    with pytest.raises(PackagingError):
        await CrxExtension(private_key).load(tmp_path)


@pytest.mark.asyncio
async def test_manifest_without_icon_entry_is_rejected(private_key, tmp_path):
    (tmp_path / "manifest.json").write_text(json.dumps({"name": "x"}))

    with pytest.raises(PackagingError):
        await CrxExtension(private_key).load(tmp_path)


@pytest.mark.asyncio
async def test_pack_requires_load(private_key):
    with pytest.raises(PackagingError):
        await CrxExtension(private_key).pack()


@pytest.mark.asyncio
async def test_bundled_template_loads(private_key):
    async with CrxExtension(private_key, icon_renderer=IconRenderer(32)) as extension:
        await extension.load(DEFAULT_EXTENSION_TEMPLATE_DIR)
        assert extension.manifest["app"]["launch"]["web_url"] == ""
        assert extension.icon_path.is_file()
