"""
Agent API keys module

Provides agent API key operations for a project:
- List agent API keys
- Create agent API key
- Delete agent API key
"""

import logging
from typing import TYPE_CHECKING, List, Optional
from urllib.parse import quote

from .exceptions import InvalidArgumentError
from .types import AgentAPIKey, AgentAPIKeysRequest

if TYPE_CHECKING:
    from .client import OpsManagerClient

logger = logging.getLogger(__name__)

AGENT_API_KEYS_PATH = "groups/{project_id}/agentapikeys"


class AgentsService:
    """
    Agent API key management

    Usage:
        async with OpsManagerClient("http://localhost:8080") as client:
            keys = await client.agents.list_agent_api_keys(project_id)
    """

    def __init__(self, client: "OpsManagerClient"):
        """
        Initialize agents service

        Args:
            client: OpsManagerClient instance
        """
        self.client = client

    async def list_agent_api_keys(self, project_id: str) -> List[AgentAPIKey]:
        """
        List all agent API keys of a project

        Args:
            project_id: Project ID

        Returns:
            Agent API keys in the order the server returned them
        """
        if not project_id:
            raise InvalidArgumentError("project_id is required")

        path = _collection_path(project_id)
        body = await self.client.request("GET", path)
        return self.client.decode(body, List[AgentAPIKey])

    async def create_agent_api_key(
        self,
        project_id: str,
        request: Optional[AgentAPIKeysRequest],
    ) -> AgentAPIKey:
        """
        Create an agent API key

        Every call creates a new key on the server.

        Args:
            project_id: Project ID
            request: Key description and any other fields to send

        Returns:
            Created agent API key
        """
        if not project_id:
            raise InvalidArgumentError("project_id is required")
        if request is None:
            raise InvalidArgumentError("request is required")

        logger.info(f"Creating agent API key in project {project_id}")

        path = _collection_path(project_id)
        body = await self.client.request("POST", path, json_data=request.to_dict())
        key = self.client.decode(body, AgentAPIKey)
        logger.info(f"Agent API key created: {key.id}")
        return key

    async def delete_agent_api_key(self, project_id: str, agent_api_key_id: str) -> None:
        """
        Delete an agent API key

        Args:
            project_id: Project ID
            agent_api_key_id: Agent API key ID
        """
        if not project_id:
            raise InvalidArgumentError("project_id is required")
        if not agent_api_key_id:
            raise InvalidArgumentError("agent_api_key_id is required")

        logger.info(f"Deleting agent API key: {agent_api_key_id}")
        path = f"{_collection_path(project_id)}/{quote(agent_api_key_id, safe='')}"
        await self.client.request("DELETE", path)
        logger.info(f"Agent API key deleted: {agent_api_key_id}")


def _collection_path(project_id: str) -> str:
    return AGENT_API_KEYS_PATH.format(project_id=quote(project_id, safe=""))
