from typing import Optional

from shortcut_crx.generator.domain.overrides import TitleOverrideTable
from shortcut_crx.generator.domain.value_objects import TargetConfig


class TitleResolver:
    """Chooses the extension title: host override, then page title, then hostname."""

    def __init__(self, overrides: TitleOverrideTable):
        self.overrides = overrides

    def resolve_title(self, extracted_title: Optional[str], config: TargetConfig) -> str:
        override = self.overrides.lookup(config.normalized_host)
        if override is not None:
            return override

        if extracted_title and extracted_title.strip():
            return extracted_title.strip()

        return config.hostname
