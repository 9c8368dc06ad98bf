"""Routes for sending notifications on demand."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from uptime_notify.auth import require_admin_key
from uptime_notify.providers import resolve_provider
from uptime_notify.schemas.notification import NotificationTestRequest
from uptime_notify.transport import http_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def get_client_factory():
    """HTTP client factory handed to providers (overridden in tests)."""
    return http_client


def _format_validation_error(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


@router.post("/test", summary="Send a test notification")
async def send_test_notification(
    body: NotificationTestRequest,
    client_factory=Depends(get_client_factory),
    _key=Depends(require_admin_key),
):
    try:
        provider = resolve_provider(body.type, client_factory=client_factory)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        msg = await provider.send(body.config, body.message)
    except ValidationError as e:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid {body.type} config: {_format_validation_error(e)}",
        )

    return {"data": {"ok": True, "msg": msg}}
