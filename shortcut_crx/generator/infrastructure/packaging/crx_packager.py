"""
CrxExtension - loads an extension template, exposes its manifest and packs
it into a signed CRX3 file.

Each instance owns a private working directory, so concurrent requests never
write to the same icon path.
"""

import asyncio
import io
import json
import shutil
import tempfile
import zipfile
from pathlib import Path
from typing import Any, Dict, Optional

from cryptography.hazmat.primitives.asymmetric import rsa

from shortcut_crx.core.constants import MANIFEST_FILENAME, MANIFEST_ICON_KEY
from shortcut_crx.generator.domain.exceptions import PackagingError
from shortcut_crx.generator.infrastructure.icons.icon_renderer import IconRenderer
from shortcut_crx.logger import get_logger

from .crx_format import build_crx3, extension_id, public_key_der

logger = get_logger(__name__)


class CrxExtension:
    def __init__(
        self,
        private_key: rsa.RSAPrivateKey,
        icon_renderer: Optional[IconRenderer] = None,
    ):
        self.private_key = private_key
        self.icon_renderer = icon_renderer or IconRenderer()
        self.path: Optional[Path] = None
        self.manifest: Dict[str, Any] = {}

    async def __aenter__(self) -> "CrxExtension":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.cleanup()

    @property
    def extension_id(self) -> str:
        return extension_id(public_key_der(self.private_key))

    @property
    def icon_path(self) -> Path:
        """Absolute path of the 128px icon declared by the manifest."""
        self._require_loaded()
        try:
            relative = self.manifest["icons"][MANIFEST_ICON_KEY]
        except (KeyError, TypeError) as e:
            raise PackagingError(
                f"manifest declares no icons[{MANIFEST_ICON_KEY!r}]",
                path=str(self.path),
            ) from e
        return self.path / relative

    async def load(self, template_dir: Path) -> "CrxExtension":
        """
        Copy ``template_dir`` into a fresh working directory and read its
        manifest. A missing icon is replaced by a rendered default.
        """
        await asyncio.to_thread(self._load_sync, Path(template_dir))
        return self

    def _load_sync(self, template_dir: Path) -> None:
        manifest_path = template_dir / MANIFEST_FILENAME
        if not manifest_path.is_file():
            raise PackagingError("template has no manifest.json", path=str(template_dir))

        working_dir = Path(tempfile.mkdtemp(prefix="shortcut-crx-"))
        try:
            shutil.copytree(template_dir, working_dir, dirs_exist_ok=True)
            self.path = working_dir
            self.manifest = json.loads(
                (working_dir / MANIFEST_FILENAME).read_text(encoding="utf-8")
            )
        except (OSError, ValueError) as e:
            shutil.rmtree(working_dir, ignore_errors=True)
            self.path = None
            raise PackagingError(
                f"cannot load template: {e}", path=str(template_dir), original_exception=e
            ) from e

        try:
            icon = self.icon_path
        except PackagingError:
            self.cleanup()
            raise

        if not icon.is_file():
            logger.debug(f"Template has no icon at {icon}, rendering the default")
            self.icon_renderer.render_default(icon)

    async def pack(self) -> bytes:
        """Write the manifest back, zip the working directory and sign it."""
        self._require_loaded()
        return await asyncio.to_thread(self._pack_sync)

    def _pack_sync(self) -> bytes:
        (self.path / MANIFEST_FILENAME).write_text(
            json.dumps(self.manifest, indent=2), encoding="utf-8"
        )
        archive = self._zip_directory(self.path)
        try:
            content = build_crx3(archive, self.private_key)
        except (ValueError, TypeError) as e:
            raise PackagingError(str(e), path=str(self.path), original_exception=e) from e

        logger.debug(
            f"Packed {self.manifest.get('name')!r}: {len(archive)} byte archive, "
            f"{len(content)} byte package"
        )
        return content

    @staticmethod
    def _zip_directory(directory: Path) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for file_path in sorted(directory.rglob("*")):
                if file_path.is_file():
                    archive.write(file_path, file_path.relative_to(directory).as_posix())
        return buffer.getvalue()

    def cleanup(self) -> None:
        if self.path is not None:
            shutil.rmtree(self.path, ignore_errors=True)
            self.path = None

    def _require_loaded(self) -> None:
        if self.path is None:
            raise PackagingError("extension template has not been loaded")
