"""Geocoding service implementations."""

# Services auto-register on import
from . import nominatim  # noqa: F401

__all__ = ["nominatim"]
