"""SeggWat API client."""

from .client import SeggwatClient
from .credentials import DEFAULT_API_URL, SeggwatCredentials
from .errors import (
    AuthError,
    ConfigurationError,
    ConnectivityError,
    SeggwatError,
    UnclassifiedTransportError,
    UnknownOperationError,
    ValidationError,
)
from .factory import create_seggwat_client, credentials_from_env

__all__ = [
    "SeggwatClient",
    "SeggwatCredentials",
    "DEFAULT_API_URL",
    "SeggwatError",
    "ConfigurationError",
    "ConnectivityError",
    "AuthError",
    "UnclassifiedTransportError",
    "ValidationError",
    "UnknownOperationError",
    "create_seggwat_client",
    "credentials_from_env",
]
