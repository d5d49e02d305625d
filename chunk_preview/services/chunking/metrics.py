"""Aggregate token metrics over a chunk sequence."""

import math
from collections.abc import Sequence

from chunk_preview.services.chunking.errors import EmptyResult
from chunk_preview.services.chunking.models import Chunk, Metrics


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def compute_metrics(chunks: Sequence[Chunk]) -> Metrics:
    """
    Reduce chunks to count, total, rounded average, max and min token counts.
    Raises EmptyResult for an empty sequence; callers decide how to report it.
    """
    if not chunks:
        raise EmptyResult("No chunks produced; metrics are undefined")
    counts = [c.token_count for c in chunks]
    total = sum(counts)
    return Metrics(
        total_chunks=len(counts),
        total_tokens=total,
        avg_tokens_per_chunk=_round_half_up(total / len(counts)),
        max_tokens=max(counts),
        min_tokens=min(counts),
    )
