"""Turn any web page URL into a signed, installable site shortcut extension."""

__version__ = "0.1.0"
