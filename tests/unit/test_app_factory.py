from injector import Injector

from shortcut_crx.app_factory import create_generator
from shortcut_crx.app_factory_di import AppModule
from shortcut_crx.generator.application.services.config_assembler import (
    ConfigAssembler,
)
from shortcut_crx.generator.application.services.extension_generator import (
    ExtensionGenerator,
)
from shortcut_crx.generator.domain.overrides import (
    IconOverrideTable,
    TitleOverrideTable,
)


def test_create_generator_wires_all_services(settings):
    generator = create_generator(settings)

    assert isinstance(generator, ExtensionGenerator)
    assert isinstance(generator.assembler, ConfigAssembler)
    assert generator.template_dir == settings.extension_template_dir
    assert generator.certificate_factory.key_size == settings.rsa_key_size
    assert generator.assembler.page_fetcher.timeout == settings.request_timeout_seconds


def test_override_tables_come_from_settings(settings, png_bytes):
    (settings.override_icons_dir / "example.com.png").write_bytes(png_bytes)
    injector = Injector(AppModule(settings))

    titles = injector.get(TitleOverrideTable)
    icons = injector.get(IconOverrideTable)

    assert titles.lookup("messenger.com") == "Messenger"
    assert icons.lookup("example.com") == settings.override_icons_dir / "example.com.png"


def test_services_are_singletons(settings):
    injector = Injector(AppModule(settings))
    assert injector.get(ExtensionGenerator) is injector.get(ExtensionGenerator)
