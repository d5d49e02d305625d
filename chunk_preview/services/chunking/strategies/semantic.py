"""Semantic chunking placeholder. Recognized so callers get a clear message instead of an unknown key."""

from collections.abc import Mapping
from typing import Any

from chunk_preview.config.chunking.models import SemanticParams
from chunk_preview.services.chunking.base import BaseChunkingStrategy
from chunk_preview.services.chunking.errors import StrategyNotImplemented
from chunk_preview.services.chunking.models import Chunk

SEMANTIC_UNAVAILABLE_MESSAGE = "Semantic chunking requires embedding API key"


class SemanticStrategy(BaseChunkingStrategy):
    params_model = SemanticParams

    @property
    def strategy_key(self) -> str:
        return "semantic"

    @property
    def available(self) -> bool:
        return False

    def chunk(self, text: str, params: Mapping[str, Any] | None = None) -> list[Chunk]:
        raise StrategyNotImplemented(SEMANTIC_UNAVAILABLE_MESSAGE)
