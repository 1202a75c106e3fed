"""Configuration."""

from apps.age_gate.setup.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
