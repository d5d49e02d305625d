"""Request/response schemas for POST /chunk-preview."""

from typing import Any

from pydantic import BaseModel, Field

from chunk_preview.services.chunking.models import Chunk, Metrics


class ChunkPreviewRequest(BaseModel):
    """
    POST /chunk-preview request body. text and strategy_key are optional here so a missing
    field is reported by the dispatcher in the standard error envelope.
    """

    text: str | None = Field(default=None, description="Raw text to chunk")
    strategy_key: str | None = Field(
        default=None, description="fixed|recursive|sentence|structure|semantic"
    )
    params: Any = Field(default=None, description="Flat strategy parameters; invalid values fall back to defaults")


class ChunkPreviewResponse(BaseModel):
    """POST /chunk-preview response body."""

    chunks: list[Chunk] = Field(default_factory=list)
    metrics: Metrics


class ErrorResponse(BaseModel):
    """Error envelope returned for every rejected request."""

    error: str = Field(..., description="Human-readable reason")
