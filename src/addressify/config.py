"""Configuration management for Addressify using pydantic-settings."""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NominatimConfig(BaseModel):
    """Configuration for Nominatim (OpenStreetMap) Geocoder."""

    search_url: str = "https://nominatim.openstreetmap.org/search"
    user_agent: str = "Addressify/1.0"
    email: Optional[str] = None  # Contact address, requested by usage policy
    timeout: int = 30


class GeocodeServicesConfig(BaseModel):
    """Container for all geocoding service configurations."""

    nominatim: NominatimConfig = Field(default_factory=NominatimConfig)


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_prefix="ADDRESSIFY_",
        env_file=".env",
        env_nested_delimiter="__",  # ADDRESSIFY_GEOCODE_SERVICES__NOMINATIM__TIMEOUT
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_file: str = Field(
        default="",
        description="Path to a rotating log file; empty logs to stderr only",
    )

    geocode_services: GeocodeServicesConfig = Field(default_factory=GeocodeServicesConfig)
    default_geocode_service: str = Field(
        default="nominatim", description="Default geocoding service to use"
    )


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
