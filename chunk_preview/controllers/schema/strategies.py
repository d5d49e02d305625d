"""Response schemas for GET /strategies."""

from typing import Any

from pydantic import BaseModel, Field


class StrategyInfo(BaseModel):
    """One strategy in the catalog, with the JSON schema of its params."""

    key: str = Field(..., description="Value to send as strategy_key")
    name: str
    description: str = ""
    available: bool = Field(..., description="False when the strategy is recognized but cannot run")
    params_schema: dict[str, Any] = Field(default_factory=dict, description="JSON schema with defaults and bounds")


class StrategiesResponse(BaseModel):
    strategies: list[StrategyInfo] = Field(default_factory=list)
