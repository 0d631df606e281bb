"""Configuration module."""

from autocomplete_cli.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
