"""Dynamic option sources for the node's dropdowns."""

import logging
from typing import Dict, List, Optional

from seggwat.client import SeggwatClient
from seggwat.errors import SeggwatError, UnknownOperationError
from seggwat.factory import create_seggwat_client

logger = logging.getLogger(__name__)


def get_projects(client: Optional[SeggwatClient] = None) -> List[Dict[str, str]]:
    """
    Load projects for the Project dropdown.

    Args:
        client: Client to use (built from the environment when omitted)

    Returns:
        Options like {"name": "Docs (12 feedback)", "value": "<project id>"}

    Raises:
        SeggwatError: "Failed to load projects: ..." wrapping the underlying failure
    """
    try:
        client = client or create_seggwat_client()
        projects = client.list_projects()
    except Exception as e:
        logger.error(f"Failed to load projects: {e}")
        raise SeggwatError(f"Failed to load projects: {e}") from e

    return [
        {
            "name": f"{project.get('name')} ({project.get('feedback_count') or 0} feedback)",
            "value": project.get("id"),
        }
        for project in projects
    ]


LOAD_OPTIONS = {
    "getProjects": get_projects,
}


def load_options(method: str, client: Optional[SeggwatClient] = None) -> List[Dict[str, str]]:
    """Run the option loader a property names in its ``load_options_method``."""
    loader = LOAD_OPTIONS.get(method)
    if loader is None:
        raise UnknownOperationError(f"Unknown load options method: {method}")
    return loader(client)
