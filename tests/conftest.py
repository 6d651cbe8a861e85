"""Pytest configuration and fixtures for Addressify tests."""

from typing import Any
from unittest.mock import Mock, patch

import httpx
import pytest

from addressify.config import GeocodeServicesConfig, NominatimConfig, Settings
from addressify.geocoding import GeocodeCandidate
from addressify.geocoding.services.nominatim import NominatimGeocoder

SEARCH_URL = "https://geocoder.test/search"


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """
    Provide test settings pointing at a stub provider endpoint.

    Returns:
        Settings instance configured for testing.
    """
    return Settings(
        log_level="DEBUG",
        log_file=str(tmp_path / "test.log"),
        geocode_services=GeocodeServicesConfig(
            nominatim=NominatimConfig(search_url=SEARCH_URL, timeout=5),
        ),
    )


@pytest.fixture
def geocoder(test_settings: Settings) -> NominatimGeocoder:
    return NominatimGeocoder(test_settings)


@pytest.fixture
def mock_client():
    """
    Patch httpx.Client in the Nominatim module.

    Yields:
        The mock client; set ``mock_client.get.return_value`` to a response.
    """
    with patch("addressify.geocoding.services.nominatim.httpx.Client") as mock_client_class:
        client = Mock()
        client.__enter__ = Mock(return_value=client)
        client.__exit__ = Mock(return_value=False)
        mock_client_class.return_value = client
        yield client


def make_candidate(display_name: str, importance: float, **parts: Any) -> GeocodeCandidate:
    """Build a candidate from Nominatim-style keys (``house_number``, ``postcode``, ...)."""
    return GeocodeCandidate.model_validate(
        {"display_name": display_name, "importance": importance, "address": parts}
    )


def json_response(payload: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        json=payload,
        request=httpx.Request("GET", SEARCH_URL),
    )
