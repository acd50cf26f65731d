"""
Application Factory
Single Responsibility: Create and configure the application instance.
"""

from typing import Optional

from injector import Injector

from shortcut_crx.app_factory_di import AppModule
from shortcut_crx.generator.application.services.extension_generator import (
    ExtensionGenerator,
)
from shortcut_crx.settings import Settings, get_settings


def create_generator(settings: Optional[Settings] = None) -> ExtensionGenerator:
    """Wire every service from ``settings`` and return the generator."""
    injector = Injector(AppModule(settings or get_settings()))
    return injector.get(ExtensionGenerator)
