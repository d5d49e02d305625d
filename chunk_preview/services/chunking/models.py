"""Chunk preview value objects. Transient; created per request and never persisted."""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """One span of the source text with its offsets and token estimate."""

    model_config = ConfigDict(frozen=True)

    ordinal: int = Field(..., ge=0, description="Zero-based position in the chunk sequence")
    start_char: int = Field(..., ge=0, description="Inclusive start offset into the source text")
    end_char: int = Field(..., ge=0, description="Exclusive end offset into the source text")
    text: str = Field(..., description="Whitespace-trimmed text of the span")
    token_count: int = Field(..., ge=0, description="Estimated token count of text")


class Metrics(BaseModel):
    """Aggregate token statistics over a chunk sequence."""

    model_config = ConfigDict(frozen=True)

    total_chunks: int = Field(..., ge=0)
    total_tokens: int = Field(..., ge=0)
    avg_tokens_per_chunk: int = Field(..., ge=0)
    max_tokens: int = Field(..., ge=0)
    min_tokens: int = Field(..., ge=0)

    @classmethod
    def empty(cls) -> "Metrics":
        """All-zero metrics for an empty chunk sequence."""
        return cls(total_chunks=0, total_tokens=0, avg_tokens_per_chunk=0, max_tokens=0, min_tokens=0)


class ChunkPreview(BaseModel):
    """Dispatcher result: chunks plus their metrics."""

    chunks: list[Chunk] = Field(default_factory=list)
    metrics: Metrics
