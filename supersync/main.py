"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Annotated

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from supersync.api import auth, contacts, dashboard, emails, sales
from supersync.config import get_settings
from supersync.database import get_db, init_db, is_database_connected
from supersync.exceptions import SuperSyncError
from supersync.schemas.dashboard import HealthResponse

settings = get_settings()

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

STARTED_AT = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    init_db()
    logger.info(f"SuperSync API started (environment={settings.environment})")
    yield
    logger.info("SuperSync API shutting down")


app = FastAPI(
    title="SuperSync API",
    description="Contacts, demo inbox sync and dashboard stats for SuperSync",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Baseline security headers added to every response
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
    "X-DNS-Prefetch-Control": "off",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
}


@app.middleware("http")
async def secure_and_log_requests(request: Request, call_next):
    """Add security headers and write one access-log line per request."""
    start_time = time.perf_counter()
    response = await call_next(request)
    response.headers.update(SECURITY_HEADERS)
    process_time = time.perf_counter() - start_time
    logger.info(
        f"{request.method} {request.url.path} - {response.status_code} - {process_time:.4f}s"
    )
    return response


def error_response(status_code: int, message: str) -> JSONResponse:
    """Every error body is ``{"error": message}``."""
    return JSONResponse(status_code=status_code, content={"error": message})


def describe_validation_error(error: dict) -> str:
    """Turn one pydantic error into a short client-facing message."""
    if error["type"] == "json_invalid":
        return "Invalid JSON format"
    field = ".".join(str(part) for part in error["loc"] if part not in ("body", "query", "path"))
    if error["type"] == "missing":
        return f"{field or 'Request body'} is required"
    if "email" in field and error["type"] == "value_error":
        return "Invalid email format"
    ctx_error = error.get("ctx", {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)
    return f"{field}: {error['msg']}" if field else error["msg"]


@app.exception_handler(SuperSyncError)
async def supersync_error_handler(request: Request, exc: SuperSyncError):
    """Render application errors."""
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Input that fails schema validation is a 400."""
    errors = exc.errors()
    message = describe_validation_error(errors[0]) if errors else "Invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Framework HTTP errors, e.g. unknown routes."""
    if exc.status_code == status.HTTP_404_NOT_FOUND and request.url.path.startswith("/api/"):
        return error_response(exc.status_code, "API endpoint not found")
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Last resort. Internals are only shown in debug development mode."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    message = str(exc) if settings.expose_errors else "Internal server error"
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


# Register routers
app.include_router(auth.router)
app.include_router(contacts.router)
app.include_router(sales.router)
app.include_router(emails.router)
app.include_router(dashboard.router)


@app.get("/api/health", response_model=HealthResponse)
def health_check(db: Annotated[Session, Depends(get_db)]):
    """Health check endpoint."""
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(UTC),
        database="Connected" if is_database_connected(db) else "Disconnected",
        uptime=round(time.monotonic() - STARTED_AT, 3),
        environment=settings.environment,
    )


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
