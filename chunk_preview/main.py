"""FastAPI app entry: config, logging, health, and error envelopes."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from chunk_preview.config.chunking.static import load_strategy_catalog
from chunk_preview.config.logging import configure_logging, get_logger
from chunk_preview.config.settings import get_settings
from chunk_preview.controllers.routes.chunk import router as chunk_router
from chunk_preview.controllers.routes.strategies import router as strategies_router
from chunk_preview.services.chunking.errors import ChunkingError

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config, logging, and strategy catalog. Shutdown: log only; nothing to close."""
    settings = get_settings()
    configure_logging()
    catalog = load_strategy_catalog()
    logger.info(
        "Application starting",
        extra={"app_name": settings.app_name, "environment": settings.environment, "strategies": len(catalog)},
    )
    yield
    logger.info("Shutdown complete")


app = FastAPI(
    title="Chunk Preview Service",
    description="Preview how chunking strategies split a document and what it costs in tokens",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(chunk_router)
app.include_router(strategies_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up. The engine has no dependencies to check."""
    return {"status": "ok"}


@app.exception_handler(ChunkingError)
async def chunking_error_handler(_request: Request, exc: ChunkingError):
    """Caller errors: render the message in the {"error": ...} envelope with the error's status."""
    logger.info(
        "Chunk preview rejected",
        extra={"error_type": type(exc).__name__, "status_code": exc.http_status},
    )
    return JSONResponse(content={"error": exc.message}, status_code=exc.http_status)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_request: Request, exc: RequestValidationError):
    """Malformed bodies use the same envelope as dispatcher errors."""
    errors = exc.errors()
    reason = errors[0].get("msg", "invalid value") if errors else "invalid value"
    return JSONResponse(content={"error": f"Invalid request body: {reason}"}, status_code=400)


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: never leak stack traces or internal details to the client."""
    logger.exception("Unhandled error", extra={"error_type": type(exc).__name__})
    return JSONResponse(
        content={"error": "An internal error occurred."},
        status_code=500,
    )


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
