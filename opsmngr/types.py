"""
Type definitions for the Ops Manager client.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class AgentAPIKeyCreator(str, Enum):
    """Known values of ``AgentAPIKey.created_by``."""

    PUBLIC_API = "PUBLIC_API"
    PROVISIONING = "PROVISIONING"
    USER = "USER"


class AgentAPIKey(BaseModel):
    """An agent API key as returned by the server.

    ``created_user_id`` and ``created_ip_addr`` are only sent for some
    creator categories and stay ``None`` when the server omits them.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    key: str
    desc: str
    created_time: StrictInt = Field(alias="createdTime")
    created_by: str = Field(alias="createdBy")
    created_user_id: Optional[str] = Field(default=None, alias="createdUserId")
    created_ip_addr: Optional[str] = Field(default=None, alias="createdIpAddr")


class AgentAPIKeysRequest(BaseModel):
    """Body of a create request. Extra fields are forwarded as-is.

    ``desc`` defaults to an empty string, which is still sent.
    """

    model_config = ConfigDict(extra="allow")

    desc: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON body sent to the server."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ErrorResponse(BaseModel):
    """Error body returned by Ops Manager for non-2xx responses."""

    model_config = ConfigDict(populate_by_name=True)

    detail: Optional[str] = None
    error: Optional[int] = None
    error_code: Optional[str] = Field(default=None, alias="errorCode")
    reason: Optional[str] = None
    parameters: Optional[List[Any]] = None
