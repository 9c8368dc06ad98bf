import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from uptime_notify import __version__ as API_VERSION
from uptime_notify.config import settings
from uptime_notify.errors import HttpStatusError, NotificationError
from uptime_notify.routers import notifications

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s %s starting", settings.app_name, API_VERSION)
    yield


app = FastAPI(
    title="Uptime Notify",
    description="Deliver uptime monitor alerts to third-party alerting services.",
    version=API_VERSION,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


# --- Exception Handlers ---


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": exc.status_code, "message": exc.detail}},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        clean = {k: v for k, v in err.items() if k != "ctx"}
        if "msg" in clean:
            clean["msg"] = str(clean["msg"])
        errors.append(clean)
    return JSONResponse(
        status_code=422,
        content={"error": {"code": 422, "message": "Validation error", "details": errors}},
    )


@app.exception_handler(NotificationError)
async def notification_error_handler(request: Request, exc: NotificationError):
    # The alerting service, not this API, failed
    logger.warning("Notification failed on %s: %s", request.url.path, exc)
    content = {"error": {"code": 502, "message": str(exc)}}
    if isinstance(exc, HttpStatusError):
        content["error"]["upstream_status"] = exc.status_code
    return JSONResponse(status_code=502, content=content)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": {"code": 500, "message": "Internal server error"}},
    )


# --- Routes ---

api_v1 = APIRouter(prefix="/v1")
api_v1.include_router(notifications.router)
app.include_router(api_v1)


@app.get("/", summary="API root")
async def root():
    return {"name": settings.app_name, "status": "ok", "version": API_VERSION}


@app.get("/health", summary="Health check")
async def health_ping():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": API_VERSION,
    }
