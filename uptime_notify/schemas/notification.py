"""Pydantic schemas for notification destinations."""

import enum
from typing import Optional

from pydantic import BaseModel, Field


class AuthenticationMethod(str, enum.Enum):
    BASIC = "basic"
    API_KEY = "apiKey"
    OAUTH = "oauth"


class XMattersConfig(BaseModel):
    """
    xMatters destination settings, keyed the way the monitoring
    application stores them (``xMattersUrl``, ``xMattersPriority``, ...).
    """

    url: str = Field(..., alias="xMattersUrl", description="xMatters HTTP trigger URL")
    priority: Optional[str] = Field(None, alias="xMattersPriority")
    authentication_method: Optional[AuthenticationMethod] = Field(
        None, alias="xMattersAuthenticationMethod"
    )
    username: Optional[str] = Field(None, alias="xMattersUsername")
    password: Optional[str] = Field(None, alias="xMattersPassword")
    api_key: Optional[str] = Field(None, alias="xMattersApiKey")
    secret: Optional[str] = Field(None, alias="xMattersSecret")
    client_id: Optional[str] = Field(None, alias="xMattersClientId")

    model_config = {"populate_by_name": True, "frozen": True}


class NotificationTestRequest(BaseModel):
    type: str = Field("xmatters", description="Provider type")
    config: dict = Field(..., description="Provider-specific configuration (JSON)")
    message: str = Field("Uptime Kuma test notification", description="Alert message body")
