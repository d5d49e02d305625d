"""POST /chunk-preview: chunk raw text with one strategy and return chunks plus metrics."""

import asyncio
from functools import partial

from fastapi import APIRouter

from chunk_preview.config.logging import get_logger
from chunk_preview.config.settings import get_settings
from chunk_preview.controllers.schema.chunk import ChunkPreviewRequest, ChunkPreviewResponse, ErrorResponse
from chunk_preview.services.chunking.chunker import preview_chunks
from chunk_preview.services.chunking.errors import PreviewTimeout

logger = get_logger(__name__)

router = APIRouter(prefix="/chunk-preview", tags=["chunking"])


@router.post(
    "",
    response_model=ChunkPreviewResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
async def chunk_preview(body: ChunkPreviewRequest) -> ChunkPreviewResponse:
    """
    Run the selected strategy on the default executor under the configured time budget.
    ChunkingError subclasses propagate to the app-level handler, which renders {"error": ...}.
    A timed-out strategy keeps its worker thread until it finishes; only the response is abandoned.
    """
    settings = get_settings()
    loop = asyncio.get_running_loop()
    job = loop.run_in_executor(None, partial(preview_chunks, body.text, body.strategy_key, body.params))
    try:
        preview = await asyncio.wait_for(job, timeout=settings.preview_timeout_seconds)
    except asyncio.TimeoutError as e:
        logger.warning(
            "Chunk preview timed out",
            extra={"strategy": body.strategy_key, "timeout_seconds": settings.preview_timeout_seconds},
        )
        raise PreviewTimeout(
            f"Chunk preview did not finish within {settings.preview_timeout_seconds:g} seconds"
        ) from e
    return ChunkPreviewResponse(chunks=preview.chunks, metrics=preview.metrics)
