"""Result types and errors for address verification."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Optional, Union

BODY_EXCERPT_LENGTH = 200


class AddressConfidence(Enum):
    """How closely the matched candidate echoes the caller's input."""

    VALID = "valid"  # Input is identical to the provider's display name
    CORRECTED = "corrected"  # Provider's form differs from what was typed


@dataclass(frozen=True)
class NormalizedAddress:
    """Canonical structured address built from a geocode candidate."""

    street: Optional[str] = None
    number: Optional[int] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class NoMatch:
    """The provider had no candidate for the address."""

    @property
    def address_type(self) -> str:
        return "unverifiable"


@dataclass(frozen=True)
class Match:
    """A candidate was selected and normalized."""

    address: NormalizedAddress
    confidence: AddressConfidence

    @property
    def address_type(self) -> str:
        return self.confidence.value


VerificationOutcome = Union[NoMatch, Match]


class AddressifyError(Exception):
    """Base class for all Addressify errors."""


class InputError(AddressifyError, ValueError):
    """The address is missing, empty, or not a string."""


class UnknownServiceError(AddressifyError, ValueError):
    """No geocoding service is registered under the requested name."""

    def __init__(self, name: str, available: list[str]):
        super().__init__(
            f"Unknown geocoding service: {name}. Available services: {', '.join(available)}"
        )
        self.name = name
        self.available = available


class ProviderError(AddressifyError):
    """The geocoding provider failed or broke its response contract."""


class ProviderTransportError(ProviderError):
    """Non-success status, non-JSON content type, or a failed HTTP exchange."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.body_excerpt = excerpt(body) if body is not None else None


class ProviderParseError(ProviderError):
    """The response body could not be decoded into geocode candidates."""


def excerpt(text: str, limit: int = BODY_EXCERPT_LENGTH) -> str:
    """Truncate provider output for inclusion in error messages."""
    return text[:limit]
