"""Configuration management."""

from devfeedback.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
