"""Base chunking strategy and contract."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from chunk_preview.config.chunking.models import StrategyParams
from chunk_preview.services.chunking.models import Chunk
from chunk_preview.services.chunking.tokenizer import DEFAULT_ESTIMATOR, TokenEstimator


class BaseChunkingStrategy(ABC):
    """
    Abstract chunking strategy. Each strategy is a pure function of (text, params): it applies
    its own defaults for absent or invalid params and returns chunks in source order.
    """

    params_model: type[StrategyParams] = StrategyParams

    def __init__(self, estimator: TokenEstimator = DEFAULT_ESTIMATOR):
        self.estimator = estimator

    @abstractmethod
    def chunk(self, text: str, params: Mapping[str, Any] | None = None) -> list[Chunk]:
        """Split text into ordered chunks. Empty text yields an empty list."""
        ...

    @property
    @abstractmethod
    def strategy_key(self) -> str:
        """Strategy identifier, e.g. 'fixed', 'recursive'."""
        ...

    @property
    def available(self) -> bool:
        """False for strategies that are recognized but cannot run."""
        return True
