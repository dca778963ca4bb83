"""
Ops Manager Python Client

An async Python client for the Ops Manager public API agent API keys.

Example:
    ```python
    from opsmngr import AgentAPIKeysRequest, OpsManagerClient

    async with OpsManagerClient("http://localhost:8080") as client:
        key = await client.agents.create_agent_api_key(
            "5e66185d917b220fbd8bb4d1",
            AgentAPIKeysRequest(desc="Agent API Key for this project"),
        )
        print(key.id)
    ```
"""

__version__ = "1.0.0"

from .client import OpsManagerClient
from .agents import AgentsService
from .types import AgentAPIKey, AgentAPIKeyCreator, AgentAPIKeysRequest, ErrorResponse
from .exceptions import (
    OpsManagerError,
    InvalidArgumentError,
    TransportError,
    OpsManagerTimeoutError,
    DecodeError,
)

__all__ = [
    "OpsManagerClient",
    "AgentsService",
    "AgentAPIKey",
    "AgentAPIKeyCreator",
    "AgentAPIKeysRequest",
    "ErrorResponse",
    "OpsManagerError",
    "InvalidArgumentError",
    "TransportError",
    "OpsManagerTimeoutError",
    "DecodeError",
]
