"""Address verification pipeline: lookup, select, normalize, classify."""

from typing import Any, Optional

from loguru import logger

from addressify.config import Settings, get_settings
from addressify.geocoding import GeocodeCandidate, GeocodeService, GeocodeServiceRegistry
from addressify.models import (
    AddressConfidence,
    InputError,
    Match,
    NoMatch,
    VerificationOutcome,
)
from addressify.normalizer import normalize


def classify(input_address: str, candidate: GeocodeCandidate) -> AddressConfidence:
    """
    Compare the caller's text with the provider's display name.

    The comparison is exact: case, whitespace and punctuation all count.
    """
    if input_address == candidate.display_name:
        return AddressConfidence.VALID
    return AddressConfidence.CORRECTED


def validate_input(address: Any) -> str:
    """
    Reject addresses that must never reach the provider.

    Raises:
        InputError: If the address is missing, not a string, blank, or not
            encodable as UTF-8.
    """
    if address is None:
        raise InputError("Address is required")
    if not isinstance(address, str):
        raise InputError("Address is required and must be a string")
    if not address.strip():
        raise InputError("Address must not be empty")
    try:
        address.encode("utf-8")
    except UnicodeEncodeError:
        raise InputError("Address must be valid UTF-8 text") from None
    return address


class AddressVerifier:
    """Runs the verification pipeline against one geocoding service."""

    def __init__(self, geocoder: GeocodeService):
        self.geocoder = geocoder

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, service: Optional[str] = None
    ) -> "AddressVerifier":
        """Build a verifier for the named (or configured default) service."""
        settings = settings or get_settings()
        name = service or settings.default_geocode_service
        return cls(GeocodeServiceRegistry.get_service(name, settings))

    def verify(self, address: Any) -> VerificationOutcome:
        """
        Verify a free-form address.

        Args:
            address: Caller-supplied address text.

        Returns:
            NoMatch if the provider has no candidate, otherwise a Match with the
            normalized address and its confidence.

        Raises:
            InputError: Before any network call, for missing or blank input.
            ProviderError: If the provider fails; never downgraded to NoMatch.
        """
        address = validate_input(address)

        candidate = self.geocoder.fetch_best_candidate(address)
        if candidate is None:
            logger.info("No match for address '{}'", address)
            return NoMatch()

        outcome = Match(address=normalize(candidate), confidence=classify(address, candidate))
        logger.info(
            "Address '{}' matched '{}' ({})",
            address,
            candidate.display_name,
            outcome.confidence.value,
        )
        return outcome


def verify_address(
    address: Any, settings: Optional[Settings] = None, service: Optional[str] = None
) -> VerificationOutcome:
    """Verify an address with a verifier built from settings."""
    return AddressVerifier.from_settings(settings, service).verify(address)
