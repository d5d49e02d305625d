"""Chunking strategy implementations, keyed by strategy_key."""

from chunk_preview.services.chunking.base import BaseChunkingStrategy
from chunk_preview.services.chunking.strategies.fixed_size import FixedSizeStrategy, chunk_fixed
from chunk_preview.services.chunking.strategies.recursive import RecursiveStrategy, chunk_recursive
from chunk_preview.services.chunking.strategies.semantic import SemanticStrategy
from chunk_preview.services.chunking.strategies.sentence_window import SentenceWindowStrategy, chunk_sentence
from chunk_preview.services.chunking.strategies.structure import StructureStrategy, chunk_structure
from chunk_preview.services.chunking.tokenizer import DEFAULT_ESTIMATOR, TokenEstimator

STRATEGY_REGISTRY: dict[str, type[BaseChunkingStrategy]] = {
    "recursive": RecursiveStrategy,
    "fixed": FixedSizeStrategy,
    "sentence": SentenceWindowStrategy,
    "structure": StructureStrategy,
    "semantic": SemanticStrategy,
}

__all__ = [
    "STRATEGY_REGISTRY",
    "chunk_fixed",
    "chunk_recursive",
    "chunk_sentence",
    "chunk_structure",
    "get_strategy",
]


def get_strategy(
    strategy_key: str, estimator: TokenEstimator = DEFAULT_ESTIMATOR
) -> BaseChunkingStrategy | None:
    """Return an instance of the chunking strategy for the given key, or None."""
    cls = STRATEGY_REGISTRY.get(strategy_key)
    if cls is None:
        return None
    return cls(estimator)
