"""Geocoding services for Addressify.

Services look up free-form address text with an external provider and return
typed candidates for normalization.
"""

from .base import AddressParts, GeocodeCandidate, GeocodeService
from .registry import GeocodeServiceRegistry
from . import services  # noqa: F401  (registers the bundled services)

__all__ = [
    "AddressParts",
    "GeocodeCandidate",
    "GeocodeService",
    "GeocodeServiceRegistry",
]
