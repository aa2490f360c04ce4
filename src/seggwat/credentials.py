"""Credential model for the SeggWat API."""

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import ConfigurationError

DEFAULT_API_URL = "https://seggwat.com"
CREDENTIAL_NAME = "seggwatApi"


class SeggwatCredentials(BaseModel):
    """
    API credentials as injected by the host.

    Accepts the host's camelCase keys (``apiKey``, ``apiUrl``) as well as
    snake_case field names.
    """

    model_config = ConfigDict(populate_by_name=True)

    api_key: str = Field("", alias="apiKey", repr=False, description="Organization access token")
    api_url: str = Field(DEFAULT_API_URL, alias="apiUrl", description="Base URL, changed for self-hosted instances")

    @field_validator("api_key", mode="before")
    @classmethod
    def coerce_api_key(cls, v):
        return v or ""

    @field_validator("api_url", mode="before")
    @classmethod
    def normalize_api_url(cls, v):
        """Fall back to the default URL and strip trailing slashes."""
        return (v or DEFAULT_API_URL).rstrip("/")

    def require_api_key(self) -> str:
        """Return the API key or raise if none is configured."""
        if not self.api_key:
            raise ConfigurationError("API Key is required. Please configure your SeggWat credentials.")
        return self.api_key


def resolve_credentials(credentials: Optional[Any]) -> SeggwatCredentials:
    """
    Build credentials from whatever the host handed us.

    Args:
        credentials: A SeggwatCredentials instance, a mapping with
            ``apiKey``/``apiUrl`` (or snake_case) keys, or None

    Returns:
        SeggwatCredentials instance
    """
    if isinstance(credentials, SeggwatCredentials):
        return credentials
    data: Dict[str, Any] = dict(credentials or {})
    return SeggwatCredentials.model_validate(data)
