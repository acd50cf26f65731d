from .icon_renderer import IconRenderer
from .placeholder_store import PlaceholderIconStore

__all__ = ["IconRenderer", "PlaceholderIconStore"]
