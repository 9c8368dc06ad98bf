import logging
import secrets

from fastapi import HTTPException, Security
from fastapi.security import APIKeyHeader

from uptime_notify.config import settings

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def require_admin_key(api_key: str = Security(api_key_header)) -> str:
    if not settings.admin_api_key:
        raise HTTPException(
            status_code=503,
            detail="Test notifications are disabled: ADMIN_API_KEY is not set",
        )
    if not api_key:
        raise HTTPException(status_code=401, detail="Missing API key")

    # Constant-time comparison
    if not secrets.compare_digest(api_key, settings.admin_api_key):
        logger.warning("Rejected request with invalid API key")
        raise HTTPException(status_code=401, detail="Invalid API key")
    return api_key
