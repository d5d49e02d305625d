"""Chunking error taxonomy. Each error carries the HTTP status it maps to at the boundary."""


class ChunkingError(Exception):
    """Base for errors raised by the chunk preview dispatcher."""

    http_status: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequest(ChunkingError):
    """Missing text or strategy_key. The caller must fix the request."""


class TextTooLarge(InvalidRequest):
    """Text exceeds the configured preview limit."""

    http_status = 413


class UnknownStrategy(ChunkingError):
    """strategy_key is not in the supported set."""


class StrategyNotImplemented(ChunkingError):
    """Strategy is recognized but deliberately unsupported."""


class EmptyResult(ChunkingError):
    """A strategy produced zero chunks, so metrics cannot be computed."""


class PreviewTimeout(ChunkingError):
    """A preview did not finish within the configured wall-clock budget."""

    http_status = 504
