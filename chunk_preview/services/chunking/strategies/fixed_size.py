"""Fixed-size chunking. Windows of `size` chars or approximate tokens, stepping by size - overlap."""

from collections.abc import Mapping
from typing import Any

from chunk_preview.config.chunking.models import FixedParams
from chunk_preview.services.chunking.base import BaseChunkingStrategy
from chunk_preview.services.chunking.models import Chunk
from chunk_preview.services.chunking.tokenizer import DEFAULT_ESTIMATOR, TokenEstimator

# Token windows are sized with a flat ratio, independent of the estimator's per-tokenizer table
WINDOW_CHARS_PER_TOKEN = 4


def chunk_fixed(
    text: str,
    params: Mapping[str, Any] | FixedParams | None = None,
    estimator: TokenEstimator = DEFAULT_ESTIMATOR,
) -> list[Chunk]:
    """
    Split text into windows of `size` units with `overlap` units repeated between neighbours.
    The cursor walks to the end of the text, so the last windows may be shorter than `size`.
    The step is clamped to at least one character so overlap >= size still terminates.
    """
    config = FixedParams.from_params(params)
    if not text:
        return []
    if config.unit == "chars":
        size, overlap = config.size, config.overlap
    else:
        size = config.size * WINDOW_CHARS_PER_TOKEN
        overlap = config.overlap * WINDOW_CHARS_PER_TOKEN
    step = max(1, size - overlap)
    length = len(text)
    chunks: list[Chunk] = []
    start = 0
    while start < length:
        end = min(start + size, length)
        chunk_text = text[start:end].strip()
        chunks.append(Chunk(
            ordinal=len(chunks),
            start_char=start,
            end_char=end,
            text=chunk_text,
            token_count=estimator.estimate_tokens(chunk_text),
        ))
        start += step
    return chunks


class FixedSizeStrategy(BaseChunkingStrategy):
    params_model = FixedParams

    @property
    def strategy_key(self) -> str:
        return "fixed"

    def chunk(self, text: str, params: Mapping[str, Any] | None = None) -> list[Chunk]:
        return chunk_fixed(text, params, self.estimator)
