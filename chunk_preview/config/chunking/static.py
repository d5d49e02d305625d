"""Static strategy catalog loader. Read-only; no business logic."""

import json
from pathlib import Path

from chunk_preview.config.chunking.models import StrategyCatalogEntry

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: list[StrategyCatalogEntry] | None = None


def _load_raw_data() -> dict:
    """Load raw JSON from static.json."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_strategy_catalog() -> list[StrategyCatalogEntry]:
    """Load catalog entries from static.json, in file order."""
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    entries = data.get("strategies", [])
    _cached = [StrategyCatalogEntry.model_validate(e) for e in entries]
    return _cached

