"""Chunking parameter models, one per strategy. Read-only; no business logic."""

from collections.abc import Mapping
from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from chunk_preview.config.logging import get_logger

logger = get_logger(__name__)

P = TypeVar("P", bound="StrategyParams")

DEFAULT_SEPARATORS: tuple[str, ...] = ("\n\n", "\n", ". ", " ")


class StrategyParams(BaseModel):
    """Base for strategy parameters. Unknown keys are ignored; invalid values fall back to defaults."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    @classmethod
    def from_params(cls: type[P], params: Any = None) -> P:
        """
        Build params from a caller-supplied mapping. Each recognized key is validated on its own;
        a value that fails validation is dropped and the documented default applies.
        """
        if isinstance(params, cls):
            return params
        if params is None:
            return cls()
        if not isinstance(params, Mapping):
            logger.warning(
                "Chunking params is not an object; using defaults",
                extra={"params_model": cls.__name__, "params_type": type(params).__name__},
            )
            return cls()
        accepted: dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            key = field.alias or name
            if key in params:
                value = params[key]
            elif name in params:
                value = params[name]
            else:
                continue
            try:
                cls.model_validate({key: value})
            except ValidationError as e:
                logger.warning(
                    "Ignoring invalid chunking param; using default",
                    extra={"params_model": cls.__name__, "param": key, "error_count": e.error_count()},
                )
                continue
            accepted[key] = value
        return cls.model_validate(accepted)


class FixedParams(StrategyParams):
    """Fixed-size windows measured in characters or approximate tokens."""

    unit: Literal["chars", "tokens"] = Field(default="tokens", description="Window unit")
    size: int = Field(default=700, ge=1, description="Window size in units")
    overlap: int = Field(default=70, ge=0, description="Units repeated between consecutive windows")


class RecursiveParams(StrategyParams):
    """Separator-aware fixed-size splitting, sizes in characters."""

    size: int = Field(default=800, ge=1, description="Maximum chunk size in characters")
    overlap: int = Field(default=80, ge=0, description="Characters repeated between consecutive chunks")
    separators: list[str] = Field(
        default=list(DEFAULT_SEPARATORS),
        description="Preferred cut points, most significant first",
    )
    tokenizer: str | None = Field(default=None, description="Tokenizer name used for token estimates")


class SentenceParams(StrategyParams):
    """Sentence accumulation under a token budget, with sentence-level overlap."""

    size: int = Field(default=750, ge=1, description="Token budget per chunk")
    overlap: int = Field(default=75, ge=0, description="Tokens of trailing sentences carried into the next chunk")


class StructureParams(StrategyParams):
    """Markdown-header sections with a token ceiling per section."""

    header_depth: int = Field(
        default=3, ge=1, le=6, alias="headerDepth", description="Reserved; headers of any depth start a section"
    )
    keep_lists: bool = Field(default=True, alias="keepLists", description="Reserved for list-aware merging")
    max_section_tokens: int = Field(
        default=1000, ge=1, alias="maxSectionTokens", description="Token ceiling before a section is split"
    )
    overlap: int = Field(default=80, ge=0, description="Reserved; sections do not overlap")


class SemanticParams(StrategyParams):
    """Semantic chunking accepts no parameters; the strategy is unavailable."""


class StrategyCatalogEntry(BaseModel):
    """Display metadata for one strategy, loaded from static.json."""

    key: str = Field(..., min_length=1, description="Strategy key accepted by /chunk-preview")
    name: str = Field(..., description="Human-readable name")
    description: str = Field(default="", description="One-line explanation shown in the catalog")
