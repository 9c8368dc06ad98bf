"""Outbound HTTP request descriptor and client factory."""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx

from uptime_notify.config import settings
from uptime_notify.errors import HttpStatusError, InvalidResponseError, TransportError

logger = logging.getLogger(__name__)


@dataclass
class OutboundRequest:
    """Represents one HTTP call to a notification service."""
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    json: Optional[dict[str, Any]] = None  # JSON body
    data: Optional[dict[str, Any]] = None  # form-encoded body
    auth: Optional[tuple[str, str]] = None  # basic-auth (username, password)


def http_client(timeout: Optional[float] = None, **kwargs) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.http_timeout if timeout is None else timeout,
        **kwargs,
    )


async def send_request(client: httpx.AsyncClient, request: OutboundRequest) -> httpx.Response:
    """Issue an OutboundRequest on the given client."""
    logger.debug("%s %s", request.method, request.url)
    try:
        return await client.request(
            method=request.method,
            url=request.url,
            headers=request.headers,
            json=request.json,
            data=request.data,
            auth=request.auth,
        )
    except Exception as exc:
        raise TransportError(f"{request.method} {request.url} failed: {exc}") from exc


def check_result(response, action: str) -> None:
    """
    Raise unless the response status code is in the 2xx range.

    Args:
        response: httpx.Response (or anything exposing ``status_code``)
        action: Human-readable name of the call, used in error messages
    """
    status_code = getattr(response, "status_code", None)
    if status_code is None:
        raise InvalidResponseError(f"{action} failed with invalid response!")
    if status_code < 200 or status_code >= 300:
        raise HttpStatusError(f"{action} failed with status code {status_code}", status_code)
