"""Authentication strategies for xMatters requests."""

import logging
from dataclasses import dataclass
from typing import Optional, Union
from urllib.parse import urlparse

import httpx

from uptime_notify.errors import InvalidResponseError, TransportError
from uptime_notify.schemas.notification import AuthenticationMethod, XMattersConfig
from uptime_notify.transport import OutboundRequest, check_result, send_request

logger = logging.getLogger(__name__)

TOKEN_PATH = "/api/xm/1/oauth2/token"


@dataclass(frozen=True)
class BasicCredentials:
    username: str
    password: str

    async def apply(self, request: OutboundRequest, client: httpx.AsyncClient) -> None:
        request.auth = (self.username, self.password)


@dataclass(frozen=True)
class ApiKeyCredentials:
    """xMatters accepts an API key/secret pair as basic-auth username/password."""
    api_key: str
    secret: str

    async def apply(self, request: OutboundRequest, client: httpx.AsyncClient) -> None:
        request.auth = (self.api_key, self.secret)


@dataclass(frozen=True)
class OAuthCredentials:
    client_id: str
    username: str
    password: str

    async def apply(self, request: OutboundRequest, client: httpx.AsyncClient) -> None:
        host = urlparse(request.url).hostname
        if not host:
            raise TransportError(f"Cannot derive xMatters host from URL: {request.url!r}")
        token = await request_oauth_token(
            client, host, self.client_id, self.username, self.password
        )
        request.headers["Authorization"] = f"Bearer {token}"


Credentials = Union[BasicCredentials, ApiKeyCredentials, OAuthCredentials]


def credentials_from_config(config: XMattersConfig) -> Optional[Credentials]:
    """Pick the credential strategy for a config. None means send unauthenticated."""
    method = config.authentication_method

    if method == AuthenticationMethod.BASIC:
        return BasicCredentials(config.username or "", config.password or "")
    elif method == AuthenticationMethod.API_KEY:
        return ApiKeyCredentials(config.api_key or "", config.secret or "")
    elif method == AuthenticationMethod.OAUTH:
        return OAuthCredentials(
            config.client_id or "", config.username or "", config.password or ""
        )
    return None


async def request_oauth_token(
    client: httpx.AsyncClient,
    host: str,
    client_id: str,
    username: str,
    password: str,
) -> str:
    """Exchange a username/password for a bearer token. Never cached."""
    request = OutboundRequest(
        method="POST",
        url=f"https://{host}{TOKEN_PATH}",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        data={
            "grant_type": "password",
            "client_id": client_id,
            "username": username,
            "password": password,
        },
    )
    resp = await send_request(client, request)
    check_result(resp, "xMatters token request")

    try:
        payload = resp.json()
    except ValueError:
        payload = None
    token = payload.get("access_token") if isinstance(payload, dict) else None
    if not token:
        raise InvalidResponseError("xMatters token response did not contain an access_token")

    logger.debug("Obtained xMatters OAuth token from %s", host)
    return token
