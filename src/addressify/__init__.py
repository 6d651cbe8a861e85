"""Addressify: normalize and verify free-form postal addresses."""

from addressify.models import (
    AddressConfidence,
    AddressifyError,
    InputError,
    Match,
    NoMatch,
    NormalizedAddress,
    ProviderError,
    ProviderParseError,
    ProviderTransportError,
    UnknownServiceError,
    VerificationOutcome,
)
from addressify.verification import AddressVerifier, classify, verify_address

__version__ = "0.1.0"

__all__ = [
    "AddressConfidence",
    "AddressVerifier",
    "AddressifyError",
    "InputError",
    "Match",
    "NoMatch",
    "NormalizedAddress",
    "ProviderError",
    "ProviderParseError",
    "ProviderTransportError",
    "UnknownServiceError",
    "VerificationOutcome",
    "classify",
    "verify_address",
]
