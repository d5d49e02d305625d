"""Tests for the chunk preview dispatcher."""

import pytest

from chunk_preview.services.chunking.chunker import preview_chunks
from chunk_preview.services.chunking.errors import (
    InvalidRequest,
    StrategyNotImplemented,
    TextTooLarge,
    UnknownStrategy,
)
from chunk_preview.services.chunking.models import Metrics

RUNNABLE = ["fixed", "recursive", "sentence", "structure"]

DOC = (
    "# Overview\n"
    "Chunking splits text into spans. Each span has offsets! Why estimate tokens? Cost.\n"
    "## Details\n"
    "Overlap repeats context across boundaries. Separators guide the cut points.\n"
)


class TestPreviewValidation:
    def test_missing_text(self) -> None:
        with pytest.raises(InvalidRequest, match="Missing text or strategy_key"):
            preview_chunks(None, "fixed")

    @pytest.mark.parametrize("key", [None, ""])
    def test_missing_strategy_key(self, key) -> None:
        with pytest.raises(InvalidRequest):
            preview_chunks("some text", key)

    def test_unknown_strategy(self) -> None:
        with pytest.raises(UnknownStrategy, match="bogus"):
            preview_chunks("some text", "bogus")

    @pytest.mark.parametrize("text", ["", "some text"])
    def test_semantic_always_fails(self, text: str) -> None:
        with pytest.raises(StrategyNotImplemented, match="requires embedding API key"):
            preview_chunks(text, "semantic", {"threshold": 0.5})

    def test_text_too_large(self) -> None:
        with pytest.raises(TextTooLarge) as exc_info:
            preview_chunks("x" * 11, "fixed", max_text_chars=10)
        assert isinstance(exc_info.value, InvalidRequest)
        assert exc_info.value.http_status == 413

    def test_text_at_limit_is_accepted(self) -> None:
        preview = preview_chunks("x" * 10, "fixed", max_text_chars=10)
        assert len(preview.chunks) == 1


class TestPreviewResults:
    @pytest.mark.parametrize("key", RUNNABLE)
    def test_empty_text_returns_empty_envelope(self, key: str) -> None:
        preview = preview_chunks("", key, {})
        assert preview.chunks == []
        assert preview.metrics == Metrics.empty()

    def test_whitespace_text_with_no_sentences(self) -> None:
        preview = preview_chunks("   ", "sentence")
        assert preview.chunks == []
        assert preview.metrics == Metrics.empty()

    @pytest.mark.parametrize("key", RUNNABLE)
    def test_metrics_match_chunks(self, key: str) -> None:
        preview = preview_chunks(DOC, key, {"size": 20, "overlap": 4, "unit": "chars", "maxSectionTokens": 15})
        counts = [c.token_count for c in preview.chunks]
        assert preview.metrics.total_chunks == len(preview.chunks)
        assert preview.metrics.total_tokens == sum(counts)
        assert preview.metrics.max_tokens == max(counts)
        assert preview.metrics.min_tokens == min(counts)
        assert [c.ordinal for c in preview.chunks] == list(range(len(preview.chunks)))

    @pytest.mark.parametrize("key", RUNNABLE)
    def test_deterministic(self, key: str) -> None:
        params = {"size": 25, "overlap": 5}
        assert preview_chunks(DOC, key, params) == preview_chunks(DOC, key, params)

    @pytest.mark.parametrize("key", RUNNABLE)
    def test_malformed_params_fall_back(self, key: str) -> None:
        preview = preview_chunks(DOC, key, {"size": "big", "overlap": None, "maxSectionTokens": -1})
        assert preview.chunks == preview_chunks(DOC, key).chunks

    def test_structure_sections(self) -> None:
        preview = preview_chunks(DOC, "structure")
        assert [c.text.splitlines()[0] for c in preview.chunks] == ["# Overview", "## Details"]

    def test_custom_estimator(self) -> None:
        class FlatEstimator:
            def estimate_tokens(self, text: str, tokenizer_name: str | None = "cl100k") -> int:
                return 2

        preview = preview_chunks(DOC, "recursive", {"size": 40, "overlap": 0}, estimator=FlatEstimator())
        assert all(c.token_count == 2 for c in preview.chunks)
        assert preview.metrics.total_tokens == 2 * len(preview.chunks)
