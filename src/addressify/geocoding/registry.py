"""Name-based lookup of geocoding services."""

from typing import Any

from loguru import logger

from addressify.models import UnknownServiceError

from .base import GeocodeService


class GeocodeServiceRegistry:
    """Maps ``service_name`` values to GeocodeService classes."""

    _services: dict[str, type[GeocodeService]] = {}

    @classmethod
    def register(
        cls, service_class: type[GeocodeService]
    ) -> type[GeocodeService]:
        """Class decorator making a service selectable by its ``service_name``.

        Raises:
            ValueError: If a different class already claimed the name
        """
        name = service_class.service_name
        existing = cls._services.get(name)
        if existing is not None and existing is not service_class:
            raise ValueError(
                f"Geocoding service '{name}' is already registered by {existing.__name__}"
            )

        cls._services[name] = service_class
        logger.debug("Registered geocoding service '{}'", name)
        return service_class

    @classmethod
    def get_service(cls, name: str, config: Any) -> GeocodeService:
        """Instantiate the service registered as ``name`` with the given settings.

        Raises:
            UnknownServiceError: If nothing is registered under ``name``
        """
        try:
            service_class = cls._services[name]
        except KeyError:
            raise UnknownServiceError(name, cls.list_services()) from None
        return service_class(config)

    @classmethod
    def list_services(cls) -> list[str]:
        return sorted(cls._services)
