"""Configuration pipeline and packaging for site shortcut extensions."""
