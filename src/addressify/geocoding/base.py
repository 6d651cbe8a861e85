"""Abstract base classes and candidate models for geocoding services."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from addressify.selection import select_best


class AddressParts(BaseModel):
    """Structured sub-fields of a candidate. The provider guarantees none of them."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    road: Optional[str] = None
    house_number: Optional[str] = None
    city: Optional[str] = None
    town: Optional[str] = None
    municipality: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = Field(default=None, alias="postcode")
    country: Optional[str] = None


class GeocodeCandidate(BaseModel):
    """One result returned by a geocoding provider."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    display_name: str
    importance: float
    address_parts: AddressParts = Field(default_factory=AddressParts, alias="address")


class GeocodeService(ABC):
    """Abstract base class for all geocoding services."""

    # Registry key, e.g. "nominatim"
    service_name: ClassVar[str]

    def __init__(self, config: Any):
        """Initialize the service with configuration.

        Args:
            config: Settings object containing service-specific configuration
        """
        self.config = config

    @abstractmethod
    def build_query(self, address: str) -> str:
        """Build the lookup URL for an address.

        Args:
            address: Free-form address text

        Returns:
            Fully encoded request URL
        """
        pass

    @abstractmethod
    def submit_request(self, url: str) -> Any:
        """Submit the lookup to the service API.

        Args:
            url: URL produced by build_query()

        Returns:
            Raw response from the service
        """
        pass

    @abstractmethod
    def parse_response(self, response: Any) -> list[GeocodeCandidate]:
        """Parse the service response into candidates, preserving provider order.

        Args:
            response: Raw response from submit_request()

        Returns:
            List of GeocodeCandidate objects
        """
        pass

    def fetch_best_candidate(self, address: str) -> Optional[GeocodeCandidate]:
        """Main workflow: build → submit → parse → select.

        Args:
            address: Free-form address text

        Returns:
            The highest-importance candidate, or None when there are none
        """
        url = self.build_query(address)
        response = self.submit_request(url)
        candidates = self.parse_response(response)
        return select_best(candidates)
