"""FastAPI app entry: config, logging, health, and the encoded-word routes."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from mimeword.config.codec.static import load_codec_profiles
from mimeword.config.logging import configure_logging, get_logger
from mimeword.config.settings import get_settings
from mimeword.controllers.routes.decode import router as decode_router
from mimeword.controllers.routes.encode import router as encode_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config, logging, and codec profiles. Profiles are validated once here."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    profiles = load_codec_profiles()
    logger.info("Codec profiles loaded", extra={"profiles": sorted(profiles)})
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Encoded-Word Service",
    description="RFC 2047 encoded-word encoding and decoding for message headers",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(encode_router)
app.include_router(decode_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up."""
    return {"status": "ok"}


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: internal details are never returned to the client."""
    logger.exception("Unhandled error", extra={"error": type(exc).__name__})
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
