"""Structure chunking. Markdown headers start sections; oversized sections are split at line boundaries."""

import re
from collections.abc import Mapping
from typing import Any

from chunk_preview.config.chunking.models import StructureParams
from chunk_preview.services.chunking.base import BaseChunkingStrategy
from chunk_preview.services.chunking.models import Chunk
from chunk_preview.services.chunking.tokenizer import DEFAULT_ESTIMATOR, TokenEstimator

_HEADER_PATTERN = re.compile(r"#{1,6}\s")


def is_header_line(line: str) -> bool:
    """True for markdown ATX header lines: 1-6 '#' followed by whitespace."""
    return _HEADER_PATTERN.match(line.strip()) is not None


def chunk_structure(
    text: str,
    params: Mapping[str, Any] | StructureParams | None = None,
    estimator: TokenEstimator = DEFAULT_ESTIMATOR,
) -> list[Chunk]:
    """
    Walk text line by line. A header line, or a line arriving after the accumulated section has
    grown past maxSectionTokens, closes the current section and opens a new one at that line.
    Whitespace-only sections are dropped. headerDepth, keepLists and overlap do not affect splitting.
    Assumes the estimator is subadditive over concatenation, as the character-ratio estimator is.
    """
    config = StructureParams.from_params(params)
    if not text:
        return []
    length = len(text)
    chunks: list[Chunk] = []
    section_start = section_end = 0

    def flush() -> None:
        section_text = text[section_start:section_end].strip()
        if section_text:
            chunks.append(Chunk(
                ordinal=len(chunks),
                start_char=section_start,
                end_char=section_end,
                text=section_text,
                token_count=estimator.estimate_tokens(section_text),
            ))

    # Upper bound on the section's estimate: the sum of per-line estimates never undercounts the
    # whole, so the section is only re-estimated once this bound passes the ceiling.
    section_bound = 0
    pos = 0
    for line in text.split("\n"):
        line_start = pos
        pos = min(pos + len(line) + 1, length)
        oversized = False
        if section_end > section_start and section_bound > config.max_section_tokens:
            section_bound = estimator.estimate_tokens(text[section_start:section_end])
            oversized = section_bound > config.max_section_tokens
        if is_header_line(line) or oversized:
            flush()
            section_start = line_start
            section_bound = 0
        section_end = pos
        section_bound += estimator.estimate_tokens(text[line_start:pos])
    flush()
    return chunks


class StructureStrategy(BaseChunkingStrategy):
    params_model = StructureParams

    @property
    def strategy_key(self) -> str:
        return "structure"

    def chunk(self, text: str, params: Mapping[str, Any] | None = None) -> list[Chunk]:
        return chunk_structure(text, params, self.estimator)
