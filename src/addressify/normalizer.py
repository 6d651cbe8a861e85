"""Map a geocode candidate onto the canonical address record."""

import re
from typing import Optional

from addressify.geocoding.base import GeocodeCandidate
from addressify.models import NormalizedAddress

_INTEGER_PATTERN = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse a whole-number string, returning None for anything else ("12B", "94043-1351")."""
    if value is None or not _INTEGER_PATTERN.fullmatch(value):
        return None

    try:
        return int(value)
    except ValueError:
        # Longer than the interpreter's int digit limit
        return None


def normalize(candidate: GeocodeCandidate) -> NormalizedAddress:
    """
    Build a NormalizedAddress from a candidate's address parts.

    City falls back from ``city`` to ``town`` to ``municipality``, since the
    provider labels settlements at different administrative levels. Missing
    or non-numeric house numbers and postcodes become None.

    Args:
        candidate: Selected geocode candidate.

    Returns:
        NormalizedAddress, possibly with every field absent.
    """
    parts = candidate.address_parts

    return NormalizedAddress(
        street=parts.road,
        number=parse_int(parts.house_number),
        city=parts.city or parts.town or parts.municipality,
        state=parts.state,
        zip=parse_int(parts.postal_code),
    )
