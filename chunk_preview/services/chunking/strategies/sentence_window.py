"""Sentence-window chunking. Accumulate whole sentences under a token budget with sentence-level overlap."""

import math
import re
from collections.abc import Mapping
from typing import Any, NamedTuple

from chunk_preview.config.chunking.models import SentenceParams
from chunk_preview.services.chunking.base import BaseChunkingStrategy
from chunk_preview.services.chunking.models import Chunk
from chunk_preview.services.chunking.tokenizer import DEFAULT_ESTIMATOR, TokenEstimator

# A sentence runs up to and including its terminal punctuation, or to the end of the text
_SENTENCE_PATTERN = re.compile(r"[^.!?]+(?:[.!?]+|\Z)")
_TERMINATORS = ".!?"


class _Sentence(NamedTuple):
    start: int
    end: int
    tokens: int


def _split_sentences(text: str, estimator: TokenEstimator) -> list[_Sentence]:
    """Split on . ! ? runs. Each sentence is trimmed and keeps exact offsets into text."""
    sentences: list[_Sentence] = []
    for m in _SENTENCE_PATTERN.finditer(text):
        raw = m.group()
        body = raw.strip()
        if not body.strip(_TERMINATORS).strip():
            continue
        start = m.start() + (len(raw) - len(raw.lstrip()))
        end = m.end() - (len(raw) - len(raw.rstrip()))
        sentences.append(_Sentence(start, end, estimator.estimate_tokens(text[start:end])))
    return sentences


def _overlap_count(window: list[_Sentence], window_tokens: int, overlap: int) -> int:
    """
    Number of trailing sentences to carry into the next chunk: overlap divided by the window's
    average tokens per sentence. Capped so the next chunk never repeats the whole window.
    """
    if not window or window_tokens <= 0:
        return 0
    avg_tokens = window_tokens / len(window)
    carry = math.floor(overlap / avg_tokens)
    return max(0, min(carry, len(window) - 1))


def _make_chunk(text: str, window: list[_Sentence], ordinal: int, estimator: TokenEstimator) -> Chunk:
    start, end = window[0].start, window[-1].end
    chunk_text = text[start:end]
    return Chunk(
        ordinal=ordinal,
        start_char=start,
        end_char=end,
        text=chunk_text,
        token_count=estimator.estimate_tokens(chunk_text),
    )


def chunk_sentence(
    text: str,
    params: Mapping[str, Any] | SentenceParams | None = None,
    estimator: TokenEstimator = DEFAULT_ESTIMATOR,
) -> list[Chunk]:
    """
    Accumulate sentences while their summed token estimates stay within `size`. When the next
    sentence would overflow, emit the window and re-seed it with trailing sentences worth roughly
    `overlap` tokens. The last window is always emitted.
    """
    config = SentenceParams.from_params(params)
    if not text:
        return []
    sentences = _split_sentences(text, estimator)
    chunks: list[Chunk] = []
    window: list[_Sentence] = []
    window_tokens = 0
    for sentence in sentences:
        if window and window_tokens + sentence.tokens > config.size:
            chunks.append(_make_chunk(text, window, len(chunks), estimator))
            carry = _overlap_count(window, window_tokens, config.overlap)
            window = window[len(window) - carry:]
            window_tokens = sum(s.tokens for s in window)
        window.append(sentence)
        window_tokens += sentence.tokens
    if window:
        chunks.append(_make_chunk(text, window, len(chunks), estimator))
    return chunks


class SentenceWindowStrategy(BaseChunkingStrategy):
    params_model = SentenceParams

    @property
    def strategy_key(self) -> str:
        return "sentence"

    def chunk(self, text: str, params: Mapping[str, Any] | None = None) -> list[Chunk]:
        return chunk_sentence(text, params, self.estimator)
