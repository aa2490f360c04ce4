"""
SeggWat API client for the workflow node.
"""

import errno
import logging
import re
import socket
import requests
from typing import Dict, Any, Optional, List, Union
from pydantic import ValidationError as SchemaError

from .credentials import SeggwatCredentials, resolve_credentials
from .errors import AuthError, ConnectivityError, UnclassifiedTransportError
from .schemas import MAX_PAGE_SIZE, PageEnvelope, RequestDescriptor

# Configure logging
logger = logging.getLogger(__name__)

JsonValue = Union[Dict[str, Any], List[Any]]

_REFUSED_MARKERS = ("ECONNREFUSED", "Connection refused", "actively refused")
_NOT_FOUND_MARKERS = (
    "ENOTFOUND",
    "Name or service not known",
    "nodename nor servname provided",
    "getaddrinfo failed",
    "Temporary failure in name resolution",
    "Failed to resolve",
    "NameResolutionError",
)

# Status phrase of an HTTPError raised without a response attached
_AUTH_STATUS_PATTERN = re.compile(r"\b(401|403) (?:Client Error|Unauthorized|Forbidden)\b")


class SeggwatClient:
    """
    Client for SeggWat API operations.

    Bundles the credentials with the transport used to reach the API, so every
    call gets both explicitly instead of reading them from ambient state:
    - request: Single authenticated call against /api/v1
    - request_all_pages: Walk a paginated list endpoint to the end
    - list_projects: Projects visible to the API key
    - test_credentials: Verify the key against the API
    """

    API_PREFIX = "/api/v1"

    def __init__(
        self,
        credentials: Union[SeggwatCredentials, Dict[str, Any], None],
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the SeggWat client.

        Args:
            credentials: Credentials object or a host credential mapping
            session: Transport to send requests with (a new requests.Session by default)
        """
        self.credentials = resolve_credentials(credentials)
        self.session = session or requests.Session()

        if not self.credentials.api_key:
            logger.warning("SeggwatClient: No API key provided")

    @property
    def api_url(self) -> str:
        return self.credentials.api_url

    def _get_headers(self, api_key: str) -> Dict[str, str]:
        """Get headers for API requests."""
        return {
            "X-API-Key": api_key,
            "Content-Type": "application/json",
        }

    def build_url(self, endpoint: str) -> str:
        return f"{self.api_url}{self.API_PREFIX}{endpoint}"

    def request(
        self,
        method: str,
        endpoint: str,
        body: Optional[Dict[str, Any]] = None,
        query: Optional[Dict[str, Any]] = None,
    ) -> JsonValue:
        """
        Make a single request to the SeggWat API.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            endpoint: API endpoint below /api/v1, e.g. "/projects"
            body: JSON body; dropped for GET/DELETE and when empty
            query: Query parameters; None and empty-string values are dropped

        Returns:
            Decoded JSON response ({} for an empty body)

        Raises:
            ConfigurationError: If no API key is configured
            ConnectivityError: If the host is unknown or refuses the connection
            AuthError: On 401/403 responses
            UnclassifiedTransportError: For any other failure
        """
        api_key = self.credentials.require_api_key()
        descriptor = RequestDescriptor(method=method, endpoint=endpoint, body=body or {}, query=query or {})

        options: Dict[str, Any] = {
            "method": descriptor.method,
            "url": self.build_url(descriptor.endpoint),
            "headers": self._get_headers(api_key),
            "params": descriptor.clean_query(),
        }
        if descriptor.has_body():
            options["json"] = descriptor.body

        try:
            response = self.session.request(**options)
            response.raise_for_status()
            if not response.content:
                return {}
            return response.json()
        except Exception as e:
            logger.error(f"SeggwatClient: API request failed - {descriptor.method} {descriptor.endpoint}: {e}")
            raise self._classify_error(e) from e

    def request_all_pages(
        self,
        method: str,
        endpoint: str,
        body: Optional[Dict[str, Any]] = None,
        query: Optional[Dict[str, Any]] = None,
        items_key: str = "feedback",
    ) -> List[Dict[str, Any]]:
        """
        Request every page of a list endpoint and return all items.

        Pages are requested with limit=100 starting at page 1. Paging stops once
        the reported ``pagination.total_pages`` is reached, or after the first
        page when the response carries no page count.

        Args:
            method: HTTP method
            endpoint: List endpoint below /api/v1
            body: JSON body (unused by GET list endpoints)
            query: Filters; any page/limit entries are overwritten
            items_key: Envelope key holding the items ("feedback" or "ratings")

        Returns:
            Items of all pages, in order
        """
        results: List[Dict[str, Any]] = []
        page = 1

        while True:
            response = self.request(method, endpoint, body, {**(query or {}), "page": page, "limit": MAX_PAGE_SIZE})
            envelope = _parse_envelope(response)
            items = envelope.items(items_key)
            results.extend(items)
            logger.debug(f"SeggwatClient: {endpoint} page {page} returned {len(items)} {items_key}")

            if not envelope.has_more(page):
                break
            page += 1

        return results

    def list_projects(self) -> List[Dict[str, Any]]:
        """Get projects visible to the API key."""
        response = self.request("GET", "/projects")
        projects = response.get("projects") if isinstance(response, dict) else None
        return projects if isinstance(projects, list) else []

    def test_credentials(self) -> bool:
        """
        Verify the credentials with the same call the host uses for its credential test.

        Returns:
            True if the API accepted the key

        Raises:
            SeggwatError: The classified failure otherwise
        """
        self.request("GET", "/projects")
        return True

    def _classify_error(self, error: Exception) -> Exception:
        """
        Map a transport failure to a descriptive error.

        Connection problems are checked first, then the HTTP status, then the
        status phrase of an HTTP error that carries no response object.
        """
        message = str(error)

        if _is_refused(error) or any(marker in message for marker in _REFUSED_MARKERS):
            return ConnectivityError(
                f"Cannot connect to API at {self.api_url}. Verify URL and that server is running.",
                self.api_url,
            )

        if _is_name_error(error) or any(marker in message for marker in _NOT_FOUND_MARKERS):
            return ConnectivityError(f"Cannot resolve API host {self.api_url}. Check the URL.", self.api_url)

        status_code = None
        response = getattr(error, "response", None)
        if response is not None:
            status_code = getattr(response, "status_code", None)

        if status_code is None:
            match = _AUTH_STATUS_PATTERN.search(message)
            if match:
                status_code = int(match.group(1))

        if status_code == 401:
            return AuthError("Authentication failed. Verify API Key.", 401)

        if status_code == 403:
            return AuthError("Access denied. API Key lacks permission.", 403)

        return UnclassifiedTransportError(f"API request failed: {message}")


def _parse_envelope(response: Any) -> PageEnvelope:
    if not isinstance(response, dict):
        return PageEnvelope()
    data = dict(response)
    if not isinstance(data.get("pagination"), dict):
        data.pop("pagination", None)
    try:
        return PageEnvelope.model_validate(data)
    except SchemaError:
        # Unreadable page count, treat it as missing
        logger.warning(f"SeggwatClient: ignoring malformed pagination {data.get('pagination')}")
        data.pop("pagination", None)
        return PageEnvelope.model_validate(data)


def _error_chain(error: BaseException):
    """Yield the error, its causes/contexts and any exceptions nested in args."""
    seen = set()
    stack = [error]
    while stack:
        current = stack.pop()
        if current is None or id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        stack.append(current.__cause__)
        stack.append(current.__context__)
        stack.extend(arg for arg in getattr(current, "args", ()) if isinstance(arg, BaseException))
        # urllib3 MaxRetryError keeps the underlying failure in .reason
        reason = getattr(current, "reason", None)
        if isinstance(reason, BaseException):
            stack.append(reason)


def _is_refused(error: BaseException) -> bool:
    return any(
        isinstance(e, ConnectionRefusedError) or getattr(e, "errno", None) == errno.ECONNREFUSED
        for e in _error_chain(error)
    )


def _is_name_error(error: BaseException) -> bool:
    return any(isinstance(e, socket.gaierror) for e in _error_chain(error))
