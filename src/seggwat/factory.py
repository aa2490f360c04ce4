"""Factory helpers for building SeggWat clients from the environment."""

import os
import logging
from typing import Any, Dict, Optional, Union
import requests
from dotenv import load_dotenv

from .client import SeggwatClient
from .credentials import DEFAULT_API_URL, SeggwatCredentials
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def credentials_from_env(env_file: Optional[str] = None) -> SeggwatCredentials:
    """
    Read credentials from SEGGWAT_API_KEY / SEGGWAT_API_URL.

    Args:
        env_file: Optional .env file to load first (existing variables win)

    Returns:
        SeggwatCredentials

    Raises:
        ConfigurationError: If SEGGWAT_API_KEY is not set
    """
    load_dotenv(env_file)

    api_key = os.getenv("SEGGWAT_API_KEY")
    if not api_key:
        raise ConfigurationError("API Key is required. Set the SEGGWAT_API_KEY environment variable.")

    api_url = os.getenv("SEGGWAT_API_URL") or DEFAULT_API_URL
    return SeggwatCredentials(api_key=api_key, api_url=api_url)


def create_seggwat_client(
    credentials: Union[SeggwatCredentials, Dict[str, Any], None] = None,
    session: Optional[requests.Session] = None,
) -> SeggwatClient:
    """
    Create a client from explicit credentials, or from the environment when none are given.

    Args:
        credentials: Host-provided credentials (optional)
        session: Transport to reuse (optional)

    Returns:
        SeggwatClient instance
    """
    if credentials is None:
        logger.info("No credentials passed, reading SeggWat credentials from environment")
        credentials = credentials_from_env()
    return SeggwatClient(credentials, session=session)
