"""
Dependency Injection Module
Single Responsibility: Configure all dependency bindings for the application.
"""

from injector import Binder, Module, provider, singleton

from shortcut_crx.generator.application.services.config_assembler import (
    ConfigAssembler,
)
from shortcut_crx.generator.application.services.extension_generator import (
    ExtensionGenerator,
)
from shortcut_crx.generator.application.services.icon_resolver import IconResolver
from shortcut_crx.generator.application.services.metadata_extractor import (
    MetadataExtractor,
)
from shortcut_crx.generator.application.services.title_resolver import TitleResolver
from shortcut_crx.generator.application.services.url_validator import URLValidator
from shortcut_crx.generator.domain.overrides import (
    IconOverrideTable,
    TitleOverrideTable,
)
from shortcut_crx.generator.infrastructure.external.beautiful_soup_adapter import (
    BeautifulSoupAdapter,
)
from shortcut_crx.generator.infrastructure.icons.icon_renderer import IconRenderer
from shortcut_crx.generator.infrastructure.icons.placeholder_store import (
    PlaceholderIconStore,
)
from shortcut_crx.generator.infrastructure.packaging.certificate import (
    SelfSignedCertificateFactory,
)
from shortcut_crx.generator.infrastructure.packaging.crx_packager import CrxExtension
from shortcut_crx.generator.infrastructure.web.icon_downloader import (
    HttpxIconDownloader,
)
from shortcut_crx.generator.infrastructure.web.page_fetcher import HttpxPageFetcher
from shortcut_crx.settings import Settings


class AppModule(Module):
    def __init__(self, settings: Settings):
        self._settings = settings

    def configure(self, binder: Binder):
        binder.bind(Settings, to=self._settings, scope=singleton)

    @singleton
    @provider
    def provide_title_overrides(self, settings: Settings) -> TitleOverrideTable:
        return TitleOverrideTable(settings.title_overrides)

    @singleton
    @provider
    def provide_icon_overrides(self, settings: Settings) -> IconOverrideTable:
        return IconOverrideTable.from_directory(settings.override_icons_dir)

    @singleton
    @provider
    def provide_icon_renderer(self, settings: Settings) -> IconRenderer:
        return IconRenderer(size=settings.icon_size)

    @singleton
    @provider
    def provide_placeholder_store(
        self, settings: Settings, renderer: IconRenderer
    ) -> PlaceholderIconStore:
        return PlaceholderIconStore(
            assets_dir=settings.placeholder_icons_dir,
            cache_dir=settings.placeholder_cache_dir,
            renderer=renderer,
        )

    @singleton
    @provider
    def provide_page_fetcher(self, settings: Settings) -> HttpxPageFetcher:
        return HttpxPageFetcher(config=settings)

    @singleton
    @provider
    def provide_icon_downloader(self, settings: Settings) -> HttpxIconDownloader:
        return HttpxIconDownloader(config=settings)

    @singleton
    @provider
    def provide_metadata_extractor(self) -> MetadataExtractor:
        return MetadataExtractor(html_parser=BeautifulSoupAdapter())

    @singleton
    @provider
    def provide_config_assembler(
        self,
        page_fetcher: HttpxPageFetcher,
        metadata_extractor: MetadataExtractor,
        title_overrides: TitleOverrideTable,
    ) -> ConfigAssembler:
        return ConfigAssembler(
            url_validator=URLValidator(),
            page_fetcher=page_fetcher,
            metadata_extractor=metadata_extractor,
            title_resolver=TitleResolver(title_overrides),
        )

    @singleton
    @provider
    def provide_icon_resolver(
        self,
        icon_overrides: IconOverrideTable,
        downloader: HttpxIconDownloader,
        placeholder_store: PlaceholderIconStore,
    ) -> IconResolver:
        return IconResolver(
            overrides=icon_overrides,
            downloader=downloader,
            placeholder_store=placeholder_store,
        )

    @singleton
    @provider
    def provide_certificate_factory(
        self, settings: Settings
    ) -> SelfSignedCertificateFactory:
        return SelfSignedCertificateFactory(
            key_size=settings.rsa_key_size,
            validity_days=settings.certificate_validity_days,
        )

    @singleton
    @provider
    def provide_extension_generator(
        self,
        settings: Settings,
        assembler: ConfigAssembler,
        icon_resolver: IconResolver,
        certificate_factory: SelfSignedCertificateFactory,
        renderer: IconRenderer,
    ) -> ExtensionGenerator:
        return ExtensionGenerator(
            assembler=assembler,
            icon_resolver=icon_resolver,
            certificate_factory=certificate_factory,
            template_dir=settings.extension_template_dir,
            extension_factory=lambda private_key: CrxExtension(
                private_key, icon_renderer=renderer
            ),
        )
