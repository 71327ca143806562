"""Exceptions raised for bad configuration and map data."""

__all__ = ["ConfigurationError", "MapError"]


class ConfigurationError(ValueError):
    """Invalid tuning constant or screen dimension."""


class MapError(ConfigurationError):
    """Malformed map data or an impossible start pose."""
