"""
Chunk preview dispatcher: validate the request, run the selected strategy, aggregate metrics.
Pure and synchronous; the same (text, strategy_key, params) always yields the same preview.
"""

from collections.abc import Mapping
from typing import Any

from chunk_preview.config.logging import get_logger
from chunk_preview.config.settings import get_settings
from chunk_preview.services.chunking.errors import EmptyResult, InvalidRequest, TextTooLarge, UnknownStrategy
from chunk_preview.services.chunking.metrics import compute_metrics
from chunk_preview.services.chunking.models import ChunkPreview, Metrics
from chunk_preview.services.chunking.strategies import get_strategy
from chunk_preview.services.chunking.tokenizer import DEFAULT_ESTIMATOR, TokenEstimator

logger = get_logger(__name__)


def preview_chunks(
    text: str | None,
    strategy_key: str | None,
    params: Mapping[str, Any] | None = None,
    estimator: TokenEstimator = DEFAULT_ESTIMATOR,
    max_text_chars: int | None = None,
) -> ChunkPreview:
    """
    Chunk text with the strategy named by strategy_key and return chunks plus metrics.

    Raises InvalidRequest when text or strategy_key is missing (TextTooLarge past the size limit),
    UnknownStrategy for unsupported keys and StrategyNotImplemented for recognized but unavailable
    strategies. Empty text yields an empty envelope with all-zero metrics.
    """
    if text is None or not strategy_key:
        raise InvalidRequest("Missing text or strategy_key")
    limit = max_text_chars if max_text_chars is not None else get_settings().preview_max_text_chars
    if len(text) > limit:
        raise TextTooLarge(f"Text exceeds the {limit} character preview limit")
    strategy = get_strategy(strategy_key, estimator)
    if strategy is None:
        raise UnknownStrategy(f"Unknown strategy: {strategy_key!r}")

    chunks = strategy.chunk(text, params)
    try:
        metrics = compute_metrics(chunks)
    except EmptyResult:
        logger.info(
            "Strategy produced no chunks",
            extra={"strategy": strategy_key, "text_chars": len(text)},
        )
        return ChunkPreview(chunks=[], metrics=Metrics.empty())

    logger.info(
        "Chunk preview complete",
        extra={
            "strategy": strategy_key,
            "text_chars": len(text),
            "total_chunks": metrics.total_chunks,
            "total_tokens": metrics.total_tokens,
        },
    )
    return ChunkPreview(chunks=chunks, metrics=metrics)
