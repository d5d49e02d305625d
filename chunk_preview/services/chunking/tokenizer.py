"""Token estimation for chunking. Character-ratio heuristic; never an exact tokenizer count."""

import math
from typing import Protocol

DEFAULT_TOKENIZER = "cl100k"
DEFAULT_CHARS_PER_TOKEN = 4.0

# Tokenizers with a denser vocabulary than the default
CHARS_PER_TOKEN: dict[str, float] = {
    "gpt-4o": 3.8,
}


class TokenEstimator(Protocol):
    """Anything that can estimate the token count of a text span."""

    def estimate_tokens(self, text: str, tokenizer_name: str | None = DEFAULT_TOKENIZER) -> int:
        ...


class CharRatioTokenEstimator:
    """Estimate tokens as ceil(len(text) / chars_per_token) with the ratio keyed by tokenizer name."""

    def __init__(
        self,
        ratios: dict[str, float] | None = None,
        default_ratio: float = DEFAULT_CHARS_PER_TOKEN,
    ):
        self.ratios = dict(CHARS_PER_TOKEN if ratios is None else ratios)
        self.default_ratio = default_ratio

    def chars_per_token(self, tokenizer_name: str | None) -> float:
        if tokenizer_name is None:
            return self.default_ratio
        return self.ratios.get(tokenizer_name, self.default_ratio)

    def estimate_tokens(self, text: str, tokenizer_name: str | None = DEFAULT_TOKENIZER) -> int:
        if not text:
            return 0
        return math.ceil(len(text) / self.chars_per_token(tokenizer_name))


DEFAULT_ESTIMATOR = CharRatioTokenEstimator()


def estimate_tokens(text: str, tokenizer_name: str | None = DEFAULT_TOKENIZER) -> int:
    """Return the estimated token count for text using the default estimator."""
    return DEFAULT_ESTIMATOR.estimate_tokens(text, tokenizer_name)
