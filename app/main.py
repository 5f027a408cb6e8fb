"""FastAPI app entry: config, logging, health, and the chunking route."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config.chunking.static import get_active_chunking_config, get_active_profile_name
from app.config.logging import configure_logging, get_logger
from app.config.settings import get_settings
from app.controllers.routes.chunk import router as chunk_router
from app.services.chunking.tokenizer import get_tokenizer

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config, logging, and tokenizer warm-up. Shutdown: log only."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    # Load the active profile's encoding up front so the first request doesn't pay for it
    try:
        get_tokenizer(get_active_chunking_config().encoding_name)
    except Exception as e:
        logger.error("Failed to load tokenizer on startup", extra={"error": str(e)})
        # Don't fail startup; /ready reports it
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Chunking Service",
    description="Split text into token-sized chunks for embedding",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(chunk_router)


def _check_chunking() -> dict[str, Any]:
    try:
        config = get_active_chunking_config()
        get_tokenizer(config.encoding_name)
    except Exception as e:
        return {"ok": False, "error": type(e).__name__}
    return {"ok": True, "profile": get_active_profile_name(), "encoding": config.encoding_name}


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up. Does not check dependencies."""
    return {"status": "ok"}


@app.get("/ready")
async def ready() -> dict[str, Any]:
    """Readiness: the active chunking profile resolves and its tokenizer loads."""
    chunking = _check_chunking()
    ok = chunking.get("ok", False)
    body = {"status": "ok" if ok else "degraded", "chunking": chunking}
    return JSONResponse(content=body, status_code=200 if ok else 503)


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: tokenizer and other failures get a non-leaking 500."""
    # Do not leak stack traces or internal details to the client
    logger.exception("Unhandled error", extra={"error": type(exc).__name__})
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )


def run() -> None:
    """Console entry: serve the app with uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())
