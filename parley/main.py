"""Parley - Conversation Translation Backend.

FastAPI application entry point: translation, speech-to-text and
conversation summarization for two-language conversations.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from parley.core.config import settings
from parley.core.errors import ServiceError, error_response
from parley.core.logging import setup_logging
from parley.services.speech import router as speech_router
from parley.services.summarization import router as summarization_router
from parley.services.translation import router as translation_router

# Setup logging first
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown."""
    logger.info(
        f"Starting {settings.app_name} v{settings.app_version} "
        f"(summarizer backend: {settings.summarizer_backend})"
    )
    yield
    logger.info("Shutting down...")


app = FastAPI(
    title="Parley",
    description="Translation, speech-to-text and conversation summarization API",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include service routers
app.include_router(translation_router)
app.include_router(speech_router)
app.include_router(summarization_router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTP errors, including unknown routes, in the error envelope."""
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = f"Route {request.method} {request.url.path} not found"
    else:
        message = str(exc.detail)

    logger.warning(f"HTTP {exc.status_code} on {request.method} {request.url.path}: {message}")
    return error_response(exc.status_code, message)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 with the first problem found."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first["loc"] if part != "body")
        message = f"{field}: {first['msg']}" if field else first["msg"]
    else:
        message = "Request validation failed"

    logger.warning(f"Validation error on {request.url.path}: {message}")
    return error_response(400, message)


@app.exception_handler(ServiceError)
async def service_exception_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Report service failures as 500 with the service's message."""
    logger.error(f"{type(exc).__name__} on {request.url.path}: {exc}")
    return error_response(500, str(exc))


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unexpected failures."""
    logger.exception(f"Unexpected error on {request.url.path}: {exc}")
    message = str(exc) if settings.debug else "An unexpected error occurred"
    return error_response(500, message)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: datetime
    version: str


@app.get("/")
async def root() -> dict:
    """Root endpoint with service info."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Conversation translation backend",
        "services": ["translation", "speech", "summarization"],
    }


@app.get("/api/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Overall service health."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.app_version,
    )
