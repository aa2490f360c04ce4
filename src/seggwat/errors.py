"""Errors raised by the SeggWat API client and node."""


class SeggwatError(Exception):
    """Base class for all SeggWat errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(SeggwatError):
    """Raised when credentials are missing or incomplete."""


class ConnectivityError(SeggwatError):
    """Raised when the API host cannot be resolved or refuses the connection.

    Attributes:
        api_url: Base URL that could not be reached.
    """

    def __init__(self, message: str, api_url: str):
        super().__init__(message)
        self.api_url = api_url


class AuthError(SeggwatError):
    """Raised on 401/403 responses.

    Attributes:
        status_code: HTTP status returned by the API.
    """

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class UnclassifiedTransportError(SeggwatError):
    """Raised for any other request failure, keeping the underlying message."""


class ValidationError(SeggwatError):
    """Raised when node parameters are invalid before any request is made."""


class UnknownOperationError(SeggwatError):
    """Raised when a resource/operation pair has no handler."""
