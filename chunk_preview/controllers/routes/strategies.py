"""GET /strategies: strategy catalog with parameter schemas."""

from fastapi import APIRouter

from chunk_preview.config.chunking.static import load_strategy_catalog
from chunk_preview.config.logging import get_logger
from chunk_preview.controllers.schema.strategies import StrategiesResponse, StrategyInfo
from chunk_preview.services.chunking.strategies import get_strategy

logger = get_logger(__name__)

router = APIRouter(prefix="/strategies", tags=["chunking"])


@router.get("", response_model=StrategiesResponse)
async def list_strategies() -> StrategiesResponse:
    """List strategies in catalog order. Params schemas are generated from each strategy's params model."""
    strategies: list[StrategyInfo] = []
    for entry in load_strategy_catalog():
        strategy = get_strategy(entry.key)
        if strategy is None:
            logger.warning("Catalog entry has no registered strategy", extra={"strategy": entry.key})
            continue
        strategies.append(StrategyInfo(
            key=entry.key,
            name=entry.name,
            description=entry.description,
            available=strategy.available,
            params_schema=strategy.params_model.model_json_schema(by_alias=True),
        ))
    return StrategiesResponse(strategies=strategies)
