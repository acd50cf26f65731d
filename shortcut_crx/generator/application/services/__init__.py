from .config_assembler import ConfigAssembler
from .extension_generator import ExtensionGenerator, GeneratedExtension
from .icon_resolver import IconResolver
from .metadata_extractor import MetadataExtractor
from .title_resolver import TitleResolver
from .url_validator import URLValidator

__all__ = [
    "ConfigAssembler",
    "ExtensionGenerator",
    "GeneratedExtension",
    "IconResolver",
    "MetadataExtractor",
    "TitleResolver",
    "URLValidator",
]
