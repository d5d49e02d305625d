"""Recursive character chunking. Prefer structural separators as cut points, fall back to raw length."""

from collections.abc import Mapping, Sequence
from typing import Any

from chunk_preview.config.chunking.models import RecursiveParams
from chunk_preview.services.chunking.base import BaseChunkingStrategy
from chunk_preview.services.chunking.models import Chunk
from chunk_preview.services.chunking.tokenizer import DEFAULT_ESTIMATOR, TokenEstimator

# A separator only counts when it falls past this fraction of the window
MIN_CUT_FRACTION = 0.5


def _find_cut(candidate: str, separators: Sequence[str], size: int) -> int:
    """
    Return the cut length within candidate: just after the last occurrence of the first separator
    (in priority order) that lies past size * MIN_CUT_FRACTION, else the full candidate length.
    """
    threshold = size * MIN_CUT_FRACTION
    for separator in separators:
        if not separator:
            continue
        idx = candidate.rfind(separator)
        if idx > threshold:
            return idx + len(separator)
    return len(candidate)


def chunk_recursive(
    text: str,
    params: Mapping[str, Any] | RecursiveParams | None = None,
    estimator: TokenEstimator = DEFAULT_ESTIMATOR,
) -> list[Chunk]:
    """
    Take up to `size` characters; when more text follows, cut after the best separator. The separator
    stays with the left chunk. Advance by max(1, chunk length - overlap) until a chunk reaches the end.
    """
    config = RecursiveParams.from_params(params)
    if not text:
        return []
    length = len(text)
    chunks: list[Chunk] = []
    start = 0
    while start < length:
        end = min(start + config.size, length)
        if end < length:
            end = start + _find_cut(text[start:end], config.separators, config.size)
        chunk_text = text[start:end].strip()
        chunks.append(Chunk(
            ordinal=len(chunks),
            start_char=start,
            end_char=end,
            text=chunk_text,
            token_count=estimator.estimate_tokens(chunk_text, config.tokenizer),
        ))
        if end >= length:
            break
        start += max(1, (end - start) - config.overlap)
    return chunks


class RecursiveStrategy(BaseChunkingStrategy):
    params_model = RecursiveParams

    @property
    def strategy_key(self) -> str:
        return "recursive"

    def chunk(self, text: str, params: Mapping[str, Any] | None = None) -> list[Chunk]:
        return chunk_recursive(text, params, self.estimator)
