"""Configuration package."""

from schengen_tracker.config.settings import Settings, build_membership, resolve_settings

__all__ = ["Settings", "build_membership", "resolve_settings"]
