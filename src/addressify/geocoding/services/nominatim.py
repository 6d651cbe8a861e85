"""Nominatim (OpenStreetMap) geocoding service implementation."""

from urllib.parse import quote

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from addressify.config import Settings
from addressify.models import ProviderParseError, ProviderTransportError, excerpt

from ..base import GeocodeCandidate, GeocodeService
from ..registry import GeocodeServiceRegistry

# Characters left unescaped by JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"

_CANDIDATE_LIST = TypeAdapter(list[GeocodeCandidate])


@GeocodeServiceRegistry.register
class NominatimGeocoder(GeocodeService):
    """Nominatim (OpenStreetMap) geocoding service.

    Nominatim is a free, open-source geocoding service based on OpenStreetMap data.
    Every request carries an identifying User-Agent (usage policy requirement).
    A single attempt is made per lookup; failures are raised, never retried.
    """

    service_name = "nominatim"

    def __init__(self, config: Settings):
        """Initialize Nominatim geocoder with configuration.

        Args:
            config: Application settings containing nominatim configuration
        """
        super().__init__(config)
        self.nominatim_config = config.geocode_services.nominatim

    @property
    def user_agent(self) -> str:
        if self.nominatim_config.email:
            return f"{self.nominatim_config.user_agent} ({self.nominatim_config.email})"
        return self.nominatim_config.user_agent

    def build_query(self, address: str) -> str:
        """Build the Nominatim search URL for an address.

        addressdetails=1 is what makes Nominatim return the structured
        ``address`` object; without it nothing can be normalized.

        Args:
            address: Free-form address text (may be empty)

        Returns:
            ``<search_url>?q=<encoded>&addressdetails=1&format=json``
        """
        encoded = quote(address, safe=_URI_COMPONENT_SAFE)
        return f"{self.nominatim_config.search_url}?q={encoded}&addressdetails=1&format=json"

    def submit_request(self, url: str) -> httpx.Response:
        """Send the lookup to Nominatim and check the transport contract.

        Args:
            url: URL produced by build_query()

        Returns:
            Successful JSON response

        Raises:
            ProviderTransportError: On HTTP failure, non-success status, or a
                content type that is not JSON
        """
        logger.debug("Querying Nominatim: {}", url)

        try:
            with httpx.Client(timeout=self.nominatim_config.timeout) as client:
                response = client.get(url, headers={"User-Agent": self.user_agent})
        except httpx.HTTPError as e:
            logger.error("Nominatim request failed: {}", str(e))
            raise ProviderTransportError(f"Nominatim request failed: {e}") from e

        if not response.is_success:
            logger.error(
                "Nominatim API error: {} {}", response.status_code, response.reason_phrase
            )
            raise ProviderTransportError(
                f"Nominatim API error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                reason=response.reason_phrase,
                body=response.text,
            )

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type.lower():
            body = response.text
            logger.error("Nominatim returned non-JSON content type: {}", content_type)
            raise ProviderTransportError(
                f"Expected JSON response but got: {content_type or 'no content type'}. "
                f"Response: {excerpt(body)}",
                status_code=response.status_code,
                reason=response.reason_phrase,
                body=body,
            )

        return response

    def parse_response(self, response: httpx.Response) -> list[GeocodeCandidate]:
        """Parse a Nominatim search response into candidates.

        Nominatim returns a JSON array:
        [
            {
                "display_name": "1600, Amphitheatre Parkway, Mountain View, ...",
                "importance": 6.28e-05,
                "address": {"house_number": "1600", "road": "...", "postcode": "94043", ...},
                ...
            }
        ]

        Args:
            response: Response returned by submit_request()

        Returns:
            Candidates in provider order

        Raises:
            ProviderParseError: If the body is not valid JSON or not a list of candidates
        """
        try:
            candidates = _CANDIDATE_LIST.validate_json(response.content)
        except ValidationError as e:
            logger.error("Could not parse Nominatim response: {}", str(e))
            raise ProviderParseError(
                f"Could not parse Nominatim response: {e.error_count()} error(s). "
                f"Response: {excerpt(response.text)}"
            ) from e

        logger.debug("Parsed {} candidates from Nominatim response", len(candidates))
        return candidates
