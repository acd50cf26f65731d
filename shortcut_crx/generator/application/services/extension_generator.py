"""
ExtensionGenerator - end-to-end production of a site shortcut package.

Steps run one after another, each awaiting its I/O before the next starts:
build the configuration, create signing key material, load the template,
point the manifest at the target URL, run the icon cascade into the
manifest's icon path, pack.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from cryptography.hazmat.primitives.asymmetric import rsa

from shortcut_crx.core.constants import CRX_MIME_TYPE
from shortcut_crx.generator.domain.value_objects import TargetConfig
from shortcut_crx.generator.infrastructure.packaging.certificate import (
    SelfSignedCertificateFactory,
)
from shortcut_crx.generator.infrastructure.packaging.crx_packager import CrxExtension
from shortcut_crx.logger import get_logger

from .config_assembler import ConfigAssembler
from .icon_resolver import IconResolver

logger = get_logger(__name__)

ExtensionFactory = Callable[[rsa.RSAPrivateKey], CrxExtension]


@dataclass(frozen=True)
class GeneratedExtension:
    """The packed extension and the configuration it was built from."""

    filename: str
    content: bytes
    config: TargetConfig
    content_type: str = CRX_MIME_TYPE

    @property
    def size(self) -> int:
        return len(self.content)


class ExtensionGenerator:
    def __init__(
        self,
        assembler: ConfigAssembler,
        icon_resolver: IconResolver,
        certificate_factory: SelfSignedCertificateFactory,
        template_dir: Path,
        extension_factory: Optional[ExtensionFactory] = None,
    ):
        self.assembler = assembler
        self.icon_resolver = icon_resolver
        self.certificate_factory = certificate_factory
        self.template_dir = Path(template_dir)
        self.extension_factory = extension_factory or CrxExtension

    async def generate(self, raw_url: Optional[str]) -> GeneratedExtension:
        """
        Produce the signed package for ``raw_url``.

        Raises:
            InvalidInputError, InvalidUrlError: for unusable input.
            IconDownloadError: if the page's favicon could not be downloaded.
            CertificateError, PackagingError: if signing or packing fails.
        """
        config = await self.assembler.build(raw_url)
        key_material = await self.certificate_factory.create()

        async with self.extension_factory(key_material.private_key) as extension:
            await extension.load(self.template_dir)
            self.apply_config(extension, config)
            config = await self.icon_resolver.resolve(config, extension.icon_path)
            content = await extension.pack()

        logger.info(
            f"Generated {config.filename} ({len(content)} bytes) for {config.source_url}"
        )
        return GeneratedExtension(filename=config.filename, content=content, config=config)

    @staticmethod
    def apply_config(extension: CrxExtension, config: TargetConfig) -> None:
        """Set the manifest name and make the app launch the target URL."""
        manifest = extension.manifest
        manifest["name"] = config.title
        app = manifest.setdefault("app", {})
        app.setdefault("urls", []).append(config.source_url)
        app.setdefault("launch", {})["web_url"] = config.source_url
